import os
import logging
import cv2
import numpy as np
from datetime import datetime

logger = logging.getLogger(__name__)


class VideoRecorder:
    def __init__(self, active=False, output_file=None, fps=30):
        self.active = active
        self.output_file = output_file
        self.fps = fps
        self.writer = None
        self.frame_size = None
        self.frame_count = 0

        if self.active and not self.output_file:
            # Generate filename if not provided
            ts = datetime.now().strftime("%Y%m%d_%H%M%S")
            fname = f"maze_{ts}.mp4"

            # Check for recordings dir
            if os.path.exists("recordings"):
                self.output_file = os.path.join("recordings", fname)
            else:
                self.output_file = fname

    def capture_frame(self, frame: np.ndarray):
        """frame: (height, width, 3) RGB uint8, e.g. from render_image."""
        if not self.active:
            return

        height, width = frame.shape[:2]

        # Initialize writer on first frame
        if self.writer is None:
            self.frame_size = (width, height)
            fourcc = cv2.VideoWriter_fourcc(*'mp4v')
            self.writer = cv2.VideoWriter(self.output_file, fourcc, self.fps, self.frame_size)
            logger.info("Recording started: %s", self.output_file)

        if (width, height) != self.frame_size:
            frame = cv2.resize(frame, self.frame_size, interpolation=cv2.INTER_NEAREST)

        self.writer.write(cv2.cvtColor(frame, cv2.COLOR_RGB2BGR))
        self.frame_count += 1

    def stop(self):
        if self.writer:
            self.writer.release()
            logger.info("Video saved: %s (%d frames)", self.output_file, self.frame_count)
            self.writer = None
