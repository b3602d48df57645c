# app.py
"""
Maze Solver backend (Flask).
Endpoints:
  GET  /api/health        -> { status, boardSize }
  GET  /api/board         -> { grid: blank editor board, size }
  POST /api/solve         -> { maze: [[0/1]], start: [r,c], goal: [r,c] } returns
                             { path: [[r,c]..] | null, pathLength, visitedNodesCount, time: ms }
  POST /api/solve/stream  -> same body; NDJSON stream of
                             { type: 'visit', point: [r,c] } ... then { type: 'mazeSolved', ... }
  POST /api/solve_board   -> { grid: [['empty'|'wall'|'start'|'goal'|'path']] } returns
                             { grid, path, pathLength, visitedNodesCount }
Run locally:
  python3 -m venv venv
  source venv/bin/activate
  pip install -e .
  python app.py
"""
from flask import Flask, Response, request, jsonify, stream_with_context
from flask_cors import CORS
import json
import logging
import time
import os

from astar import iter_search, solve
from config import DefaultConfig
from validation import InvalidMaze, parse_solve_request, parse_board_request
import maze as board_codec

app = Flask(__name__)
app.config.from_object(DefaultConfig)
app.config.from_prefixed_env('MAZE')
CORS(app, origins=app.config['CORS_ORIGINS'])

logging.basicConfig(
    level=app.config['LOG_LEVEL'],
    format="%(asctime)s %(levelname)-8s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


def _points(path):
    # tuples -> JSON arrays
    return [[r, c] for r, c in path] if path is not None else None


def _result(path, visited_count):
    return {
        'path': _points(path),
        'pathLength': len(path) if path else 0,
        'visitedNodesCount': visited_count,
    }


def _payload():
    payload = request.get_json(silent=True)
    if payload is None:
        raise InvalidMaze('Invalid request')
    return payload


@app.errorhandler(InvalidMaze)
def handle_invalid_maze(err):
    logger.warning("rejected %s: %s", request.path, err)
    return jsonify({'error': str(err)}), 400


# --- Flask API routes --- #
@app.route('/api/health')
def api_health():
    return jsonify({'status': 'ok', 'boardSize': app.config['BOARD_SIZE']})


@app.route('/api/board')
def api_board():
    size = app.config['BOARD_SIZE']
    return jsonify({'grid': board_codec.empty_board(size), 'size': size})


@app.route('/api/solve', methods=['POST'])
def api_solve():
    req = parse_solve_request(_payload(), app.config['MAX_GRID_SIZE'])
    visited = []
    start_time = time.time()
    path = solve(req.grid, req.start, req.goal, on_visit=visited.append)
    time_ms = int((time.time() - start_time) * 1000)
    logger.info("solved %dx%d maze %s -> %s: %s, %d visited",
                len(req.grid), len(req.grid[0]), req.start, req.goal,
                'path of %d' % len(path) if path else 'no path', len(visited))
    body = _result(path, len(visited))
    body['time'] = time_ms
    return jsonify(body)


@app.route('/api/solve/stream', methods=['POST'])
def api_solve_stream():
    # validate before the response starts so bad input still gets a 400
    req = parse_solve_request(_payload(), app.config['MAX_GRID_SIZE'])

    def generate():
        search = iter_search(req.grid, req.start, req.goal)
        visited = 0
        while True:
            try:
                r, c = next(search)
            except StopIteration as done:
                path = done.value
                break
            visited += 1
            yield json.dumps({'type': 'visit', 'point': [r, c]}) + '\n'
        logger.info("streamed solve %s -> %s: %d visited", req.start, req.goal, visited)
        message = {'type': 'mazeSolved'}
        message.update(_result(path, visited))
        yield json.dumps(message) + '\n'

    return Response(stream_with_context(generate()), mimetype='application/x-ndjson')


@app.route('/api/solve_board', methods=['POST'])
def api_solve_board():
    board = parse_board_request(_payload(), app.config['MAX_GRID_SIZE'])
    grid, start, goal = board_codec.to_occupancy(board)
    visited = []
    path = solve(grid, start, goal, on_visit=visited.append)
    logger.info("solved board %s -> %s: %s", start, goal, 'path of %d' % len(path) if path else 'no path')
    body = _result(path, len(visited))
    body['grid'] = board_codec.apply_path(board, path)
    return jsonify(body)


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    host = os.environ.get('HOST', '0.0.0.0')
    app.run(host=host, port=port, debug=True)
