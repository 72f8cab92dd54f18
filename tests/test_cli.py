from pathlab.__main__ import main, parse_walls


def test_parse_walls():
    assert parse_walls("1,2; 3,4;") == [(1, 2), (3, 4)]
    assert parse_walls("") == []


def test_open_grid_run(qapp, capsys):
    assert main(["--algorithm", "bfs", "--rows", "10", "--cols", "10"]) == 0
    out = capsys.readouterr().out
    assert "bfs:" in out
    assert "path length 5" in out
    assert "S****E" in out


def test_blocked_run_reports_no_path(qapp, capsys):
    walls = ";".join(f"{row},5" for row in range(10))
    assert main(["-a", "dijkstra", "--rows", "10", "--cols", "10", "--walls", walls]) == 0
    out = capsys.readouterr().out
    assert "no path" in out


def test_partial_steps(qapp, capsys):
    assert main(["-a", "astar", "--rows", "10", "--cols", "10", "--steps", "3"]) == 0
    out = capsys.readouterr().out
    assert "Replayed 3/12 steps" in out


def test_bad_walls_value(qapp, capsys):
    assert main(["--walls", "1;2"]) == 2
