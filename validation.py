# validation.py
"""
Request payload parsing for the solve endpoints.

Everything the solver receives goes through here first, so the search
itself never sees jagged rows or coordinates outside the grid.
"""
from collections import namedtuple

SolveRequest = namedtuple('SolveRequest', ['grid', 'start', 'goal'])


class InvalidMaze(ValueError):
    """Raised when a request payload does not describe a usable maze."""


def _is_int(value):
    # bool is an int subclass but true/false are not cell values
    return isinstance(value, int) and not isinstance(value, bool)


def _check_matrix(rows, name, max_size):
    if not isinstance(rows, list) or not rows:
        raise InvalidMaze('%s must be a non-empty list of rows' % name)
    if len(rows) > max_size:
        raise InvalidMaze('%s has %d rows, at most %d allowed' % (name, len(rows), max_size))
    width = None
    for i, row in enumerate(rows):
        if not isinstance(row, list) or not row:
            raise InvalidMaze('%s row %d must be a non-empty list' % (name, i))
        if width is None:
            width = len(row)
        elif len(row) != width:
            raise InvalidMaze('%s row %d has %d cells, expected %d' % (name, i, len(row), width))
    if width > max_size:
        raise InvalidMaze('%s has %d columns, at most %d allowed' % (name, width, max_size))


def parse_point(value, name, grid):
    if (not isinstance(value, (list, tuple)) or len(value) != 2
            or not all(_is_int(v) for v in value)):
        raise InvalidMaze('%s must be a [row, col] pair of integers' % name)
    r, c = value
    if not (0 <= r < len(grid) and 0 <= c < len(grid[0])):
        raise InvalidMaze('%s %s is outside the %dx%d maze' % (name, list(value), len(grid), len(grid[0])))
    return (r, c)


def parse_solve_request(payload, max_size=100):
    """
    Validate a {maze, start, goal} payload.

    Returns a SolveRequest whose grid is a tuple of tuples, an immutable
    snapshot of what the client sent.
    """
    if not isinstance(payload, dict):
        raise InvalidMaze('request body must be a JSON object')
    maze = payload.get('maze')
    if maze is None:
        raise InvalidMaze('maze data required')
    _check_matrix(maze, 'maze', max_size)
    for i, row in enumerate(maze):
        if not all(_is_int(cell) for cell in row):
            raise InvalidMaze('maze row %d must contain only integers' % i)
    grid = tuple(tuple(row) for row in maze)
    start = parse_point(payload.get('start'), 'start', grid)
    goal = parse_point(payload.get('goal'), 'goal', grid)
    return SolveRequest(grid, start, goal)


def parse_board_request(payload, max_size=100):
    """Validate a {grid: [[label, ...], ...]} payload and return the board."""
    if not isinstance(payload, dict):
        raise InvalidMaze('request body must be a JSON object')
    board = payload.get('grid')
    if board is None:
        raise InvalidMaze('grid data required')
    _check_matrix(board, 'grid', max_size)
    for i, row in enumerate(board):
        if not all(isinstance(cell, str) for cell in row):
            raise InvalidMaze('grid row %d must contain only cell labels' % i)
    return [list(row) for row in board]
