# tests for the Flask routes
# tests/test_app.py

import json

SIMPLE = {
    'maze': [[0, 0, 0],
             [1, 1, 0],
             [0, 0, 0]],
    'start': [0, 0],
    'goal': [2, 2],
}


def test_health(client):
    resp = client.get('/api/health')
    assert resp.status_code == 200
    assert resp.get_json() == {'status': 'ok', 'boardSize': 20}


def test_solve(client):
    resp = client.post('/api/solve', json=SIMPLE)
    assert resp.status_code == 200
    body = resp.get_json()
    assert body['path'] == [[0, 0], [0, 1], [0, 2], [1, 2], [2, 2]]
    assert body['pathLength'] == 5
    assert body['visitedNodesCount'] >= 5
    assert body['time'] >= 0


def test_solve_open_board(client, open_grid):
    resp = client.post('/api/solve', json={'maze': open_grid, 'start': [0, 0], 'goal': [19, 19]})
    assert resp.get_json()['pathLength'] == 39


def test_solve_unreachable_returns_null_path(client):
    payload = dict(SIMPLE, maze=[[0, 0, 0], [1, 1, 1], [0, 0, 0]])
    resp = client.post('/api/solve', json=payload)
    assert resp.status_code == 200
    body = resp.get_json()
    assert body['path'] is None
    assert body['pathLength'] == 0
    assert body['visitedNodesCount'] == 3


def test_solve_blocked_goal_reports_explored_cells(client):
    payload = dict(SIMPLE, maze=[[0, 0, 0], [1, 1, 0], [0, 0, 1]])
    resp = client.post('/api/solve', json=payload)
    assert resp.status_code == 200
    body = resp.get_json()
    assert body['path'] is None
    assert body['pathLength'] == 0
    # (0,0) (0,1) (0,2) (1,2); the bottom row is cut off by the goal wall
    assert body['visitedNodesCount'] == 4


def test_solve_stream_blocked_goal_sends_visits(client):
    payload = dict(SIMPLE, maze=[[0, 0, 0], [1, 1, 0], [0, 0, 1]])
    lines = client.post('/api/solve/stream', json=payload).get_data(as_text=True).splitlines()
    messages = [json.loads(line) for line in lines]
    assert [m['point'] for m in messages[:-1]] == [[0, 0], [0, 1], [0, 2], [1, 2]]
    assert messages[-1] == {'type': 'mazeSolved', 'path': None, 'pathLength': 0, 'visitedNodesCount': 4}


def test_board(client):
    resp = client.get('/api/board')
    assert resp.status_code == 200
    body = resp.get_json()
    assert body['size'] == 20
    assert len(body['grid']) == 20
    assert all(cell == 'empty' for row in body['grid'] for cell in row)


def test_solve_rejects_bad_input(client):
    resp = client.post('/api/solve', json={'maze': [[0, 0], [0]], 'start': [0, 0], 'goal': [1, 0]})
    assert resp.status_code == 400
    assert 'row 1' in resp.get_json()['error']


def test_solve_rejects_out_of_bounds_goal(client):
    resp = client.post('/api/solve', json=dict(SIMPLE, goal=[3, 3]))
    assert resp.status_code == 400
    assert 'outside' in resp.get_json()['error']


def test_solve_rejects_non_json(client):
    resp = client.post('/api/solve', data='not json', content_type='text/plain')
    assert resp.status_code == 400
    assert resp.get_json() == {'error': 'Invalid request'}


def test_solve_stream(client):
    resp = client.post('/api/solve/stream', json=SIMPLE)
    assert resp.status_code == 200
    assert resp.mimetype == 'application/x-ndjson'
    messages = [json.loads(line) for line in resp.get_data(as_text=True).splitlines()]

    visits = messages[:-1]
    final = messages[-1]
    assert all(m['type'] == 'visit' for m in visits)
    assert visits[0]['point'] == [0, 0]
    assert visits[-1]['point'] == [2, 2]
    assert final['type'] == 'mazeSolved'
    assert final['path'] == [[0, 0], [0, 1], [0, 2], [1, 2], [2, 2]]
    assert final['visitedNodesCount'] == len(visits)


def test_stream_matches_solve_visit_count(client):
    solved = client.post('/api/solve', json=SIMPLE).get_json()
    streamed = client.post('/api/solve/stream', json=SIMPLE).get_data(as_text=True).splitlines()
    assert len(streamed) - 1 == solved['visitedNodesCount']


def test_solve_stream_rejects_bad_input(client):
    resp = client.post('/api/solve/stream', json={'start': [0, 0]})
    assert resp.status_code == 400
    assert resp.get_json() == {'error': 'maze data required'}


def test_solve_board(client):
    board = [
        ['start', 'empty', 'empty'],
        ['wall', 'wall', 'empty'],
        ['path', 'empty', 'goal'],
    ]
    resp = client.post('/api/solve_board', json={'grid': board})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body['pathLength'] == 5
    assert body['grid'] == [
        ['start', 'path', 'path'],
        ['wall', 'wall', 'path'],
        ['empty', 'empty', 'goal'],
    ]


def test_solve_board_without_goal(client):
    resp = client.post('/api/solve_board', json={'grid': [['start', 'empty']]})
    assert resp.status_code == 400
    assert resp.get_json() == {'error': 'goal cell required'}
