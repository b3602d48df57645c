# config.py
"""
Default settings for the maze solver backend.

Every value can be overridden with a MAZE_ prefixed environment variable,
e.g. MAZE_MAX_GRID_SIZE=50 or MAZE_LOG_LEVEL=DEBUG.
"""


class DefaultConfig:
    # largest accepted number of rows or columns
    MAX_GRID_SIZE = 100
    # board size the editor draws
    BOARD_SIZE = 20
    CORS_ORIGINS = '*'
    LOG_LEVEL = 'INFO'
