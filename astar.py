# astar.py
"""
A* shortest path over a binary occupancy grid.

Grid cells are addressed as (row, col) and read as grid[row][col]:
  0       = passable
  nonzero = blocked
Movement is orthogonal with unit cost, the heuristic is Manhattan distance.

Usage:
  path = solve(grid, (0, 0), (2, 2))
  path = solve(grid, (0, 0), (2, 2), on_visit=visited.append)
"""
import heapq
import logging

logger = logging.getLogger(__name__)

PASSABLE = 0

# up, down, left, right
DIRECTIONS = [(-1, 0), (1, 0), (0, -1), (0, 1)]


class SearchNode:
    """Frontier entry for one coordinate, owned by a single search call."""

    __slots__ = ('point', 'g', 'h', 'f', 'parent', 'seq')

    def __init__(self, point, g, h, parent=None, seq=0):
        self.point = point
        self.g = g
        self.h = h
        self.f = g + h
        self.parent = parent
        self.seq = seq

    def __repr__(self):
        return 'SearchNode(point=%r, g=%d, h=%d)' % (self.point, self.g, self.h)


def heuristic(a, b):
    """Manhattan distance |r1 - r2| + |c1 - c2|."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def in_bounds(point, grid):
    r, c = point
    return 0 <= r < len(grid) and 0 <= c < len(grid[r])


def is_passable(point, grid):
    return in_bounds(point, grid) and grid[point[0]][point[1]] == PASSABLE


def neighbors(point, grid):
    """Passable orthogonal neighbors in up, down, left, right order."""
    r, c = point
    for dr, dc in DIRECTIONS:
        nxt = (r + dr, c + dc)
        # jagged rows: each row is checked against its own length
        if is_passable(nxt, grid):
            yield nxt


def reconstruct_path(node):
    path = []
    while node is not None:
        path.append(node.point)
        node = node.parent
    path.reverse()
    return path


def iter_search(grid, start, goal):
    """
    Run A* as a generator.

    Yields every coordinate at the moment it is finalized, in finalization
    order. The generator's return value is the start-to-goal path (list of
    (row, col) tuples, both ends included) or None when the goal cannot be
    reached. Ties on f are broken by frontier insertion order; a node whose
    cost is lowered keeps its original place in that order.
    """
    start = tuple(start)
    goal = tuple(goal)
    if not in_bounds(start, grid) or not in_bounds(goal, grid):
        logger.debug("start %s or goal %s is out of bounds", start, goal)
        return None
    if not is_passable(start, grid):
        logger.debug("start %s is blocked", start)
        return None
    # a blocked goal is never yielded by neighbors(), so the frontier runs dry

    counter = 0
    start_node = SearchNode(start, 0, heuristic(start, goal), seq=counter)
    frontier = [(start_node.f, start_node.seq, start)]
    open_nodes = {start: start_node}
    closed = set()

    while frontier:
        f, _, point = heapq.heappop(frontier)
        current = open_nodes.get(point)
        if current is None or current.f != f:
            # stale entry left behind by a cost update
            continue
        del open_nodes[point]
        closed.add(point)
        yield point

        if point == goal:
            path = reconstruct_path(current)
            logger.debug("reached %s after %d visits, path length %d", goal, len(closed), len(path))
            return path

        g_score = current.g + 1
        for nbr in neighbors(point, grid):
            if nbr in closed:
                continue
            node = open_nodes.get(nbr)
            if node is None:
                counter += 1
                node = SearchNode(nbr, g_score, heuristic(nbr, goal), parent=current, seq=counter)
                open_nodes[nbr] = node
                heapq.heappush(frontier, (node.f, node.seq, nbr))
            elif g_score < node.g:
                node.g = g_score
                node.f = g_score + node.h
                node.parent = current
                heapq.heappush(frontier, (node.f, node.seq, nbr))

    logger.debug("frontier exhausted after %d visits, %s unreachable", len(closed), goal)
    return None


def solve(grid, start, goal, on_visit=None):
    """
    Shortest orthogonal path from start to goal, or None if there is none.

    on_visit, when given, is called once per finalized coordinate, in order.
    """
    search = iter_search(grid, start, goal)
    while True:
        try:
            point = next(search)
        except StopIteration as done:
            return done.value
        if on_visit is not None:
            on_visit(point)
