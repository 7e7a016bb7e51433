import logging
import numpy as np
import pygame
from gridmaze.core.distances import Distances
from gridmaze.core.grid import Grid
from gridmaze.viz.image import render_image
from gridmaze.viz.recorder import VideoRecorder

logger = logging.getLogger(__name__)


class Viewer:
    COLOR_BG = (10, 10, 10)
    COLOR_TEXT = (255, 255, 255)

    # Generator steps consumed per frame
    STEPS_PER_FRAME = 5

    def __init__(self, grid: Grid, generator=None, distances_root=None, width=1280, height=720, record=False, cell_size=10):
        self.grid = grid
        self.generator = generator
        self.distances_root = distances_root
        self.distances = None
        self.screen_width = width
        self.screen_height = height
        self.cell_size = cell_size

        # Camera
        self.zoom = 1.0
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.zoom_speed = 1.1

        self.recorder = VideoRecorder(active=record)

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.frame = None
        self.gen_iter = None
        self.gen_finished = generator is None
        self.dirty = True

        if self.gen_finished and distances_root is not None:
            self.distances = Distances.build(grid, distances_root)

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire maze on screen with padding."""
        padding = 40
        maze_h, maze_w = self.grid.rows * self.cell_size + 1, self.grid.columns * self.cell_size + 1
        zoom_x = (self.screen_width - padding * 2) / maze_w
        zoom_y = (self.screen_height - padding * 2) / maze_h

        # Taking minimum zoom to fit both dimensions
        self.zoom = max(0.01, min(zoom_x, zoom_y))

        # Center
        self.offset_x = (self.screen_width - maze_w * self.zoom) / 2
        self.offset_y = (self.screen_height - maze_h * self.zoom) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"gridmaze - {self.grid.rows}x{self.grid.columns}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

        # Initial fit
        self.fit_to_screen()

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h

            elif event.type == pygame.MOUSEWHEEL:
                # Zoom towards mouse
                mx, my = pygame.mouse.get_pos()
                wx = (mx - self.offset_x) / self.zoom
                wy = (my - self.offset_y) / self.zoom

                if event.y > 0:
                    self.zoom *= self.zoom_speed
                else:
                    self.zoom /= self.zoom_speed
                self.zoom = max(0.01, min(50.0, self.zoom))

                # Keep mouse at same world coord
                self.offset_x = mx - wx * self.zoom
                self.offset_y = my - wy * self.zoom

            elif event.type == pygame.MOUSEMOTION:
                if pygame.mouse.get_pressed()[0] or pygame.mouse.get_pressed()[2]: # Left or Right drag
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

    def step_generator(self, gen_iter):
        try:
            for _ in range(self.STEPS_PER_FRAME):
                next(gen_iter)
        except StopIteration:
            self.gen_finished = True
            if self.distances_root is not None:
                self.distances = Distances.build(self.grid, self.distances_root)
            logger.info("Generation finished (%d links)", self.grid.link_count())
        self.dirty = True

    def draw(self):
        if self.dirty:
            self.frame = render_image(self.grid, self.distances, cell_size=self.cell_size)
            self.dirty = False

        self.surface.fill(self.COLOR_BG)
        # surfarray is indexed (x, y)
        maze = pygame.surfarray.make_surface(np.transpose(self.frame, (1, 0, 2)))
        size = (max(1, int(maze.get_width() * self.zoom)), max(1, int(maze.get_height() * self.zoom)))
        self.surface.blit(pygame.transform.scale(maze, size), (int(self.offset_x), int(self.offset_y)))

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        status = "Done" if self.gen_finished else "Running"
        name = getattr(self.generator, "name", "-")
        info = [
            f"FPS: {fps}",
            f"Size: {self.grid.rows}x{self.grid.columns} ({self.grid.size:,})",
            f"Algorithm: {name}",
            f"Status: {status}",
            "REC" if self.recorder.active else "",
        ]

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, self.COLOR_TEXT)
            self.surface.blit(lbl, (10, 10 + i * 20))

    def run_loop(self):
        self.gen_iter = self.generator.run() if self.generator else None

        while self.running:
            self.handle_input()

            if self.gen_iter and not self.gen_finished:
                self.step_generator(self.gen_iter)

            self.draw()
            self.draw_hud()
            pygame.display.flip()

            if self.recorder.active:
                self.recorder.capture_frame(self.frame)

            self.clock.tick(60)

        self.recorder.stop()
        pygame.quit()
