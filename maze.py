# maze.py
"""
Translation between the editor board and the solver's occupancy grid.

The editor stores one label per cell:
  'empty' -> open floor
  'wall'  -> blocked
  'start' -> the start cell (exactly one)
  'goal'  -> the goal cell (exactly one)
  'path'  -> part of the last solution, open floor to the solver
"""
from validation import InvalidMaze

# Cell labels
EMPTY = 'empty'
WALL = 'wall'
START = 'start'
GOAL = 'goal'
PATH = 'path'

LABELS = (EMPTY, WALL, START, GOAL, PATH)

# Occupancy codes
PASSABLE = 0
BLOCKED = 1


def empty_board(size):
    return [[EMPTY for _ in range(size)] for _ in range(size)]


def _find_unique(board, label):
    found = [(r, c) for r, row in enumerate(board) for c, cell in enumerate(row) if cell == label]
    if not found:
        raise InvalidMaze('%s cell required' % label)
    if len(found) > 1:
        raise InvalidMaze('only one %s cell allowed, found %d' % (label, len(found)))
    return found[0]


def to_occupancy(board):
    """
    Convert a labeled board to (grid, start, goal).

    grid is a tuple of tuples with 1 for walls and 0 for everything else.
    """
    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            if cell not in LABELS:
                raise InvalidMaze('unknown cell label %r at [%d, %d]' % (cell, r, c))
    start = _find_unique(board, START)
    goal = _find_unique(board, GOAL)
    grid = tuple(tuple(BLOCKED if cell == WALL else PASSABLE for cell in row) for row in board)
    return grid, start, goal


def clear_path(board):
    return [[EMPTY if cell == PATH else cell for cell in row] for row in board]


def apply_path(board, path):
    """Return a copy of board with path marked and start/goal left in place."""
    marked = clear_path(board)
    for r, c in path or []:
        if marked[r][c] not in (START, GOAL):
            marked[r][c] = PATH
    return marked
