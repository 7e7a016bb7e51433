class MazeError(Exception):
    """Base class for every error raised by gridmaze."""


class InvalidDimensions(MazeError, ValueError):
    def __init__(self, rows, columns):
        super().__init__(f"Grid dimensions must be positive, got {rows}x{columns}")
        self.rows = rows
        self.columns = columns


class OutOfBounds(MazeError, IndexError):
    def __init__(self, row, column, rows, columns):
        super().__init__(f"Cell ({row}, {column}) out of bounds for {rows}x{columns} grid")
        self.row = row
        self.column = column


class NotAdjacent(MazeError, ValueError):
    def __init__(self, a, b):
        super().__init__(f"Cells {tuple(a)} and {tuple(b)} are not neighbors")
        self.a = a
        self.b = b


class Unreachable(MazeError, KeyError):
    def __init__(self, cell):
        super().__init__(f"Cell {tuple(cell)} has no recorded distance")
        self.cell = cell

    # KeyError.__str__ would repr() the message
    def __str__(self):
        return self.args[0]


class UnknownAlgorithm(MazeError, KeyError):
    def __init__(self, name, known):
        super().__init__(f"Unknown algorithm '{name}' (choose from: {', '.join(known)})")
        self.name = name

    def __str__(self):
        return self.args[0]
