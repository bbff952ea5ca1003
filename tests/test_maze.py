import io
import sys

import pytest

from searchplay.maze import (
    MazeProblem,
    SearchStep,
    SearchTrace,
    breadth_first_search,
    depth_first_search,
    format_step,
    get_maze,
    get_problem,
    is_open,
    main,
    render_maze,
)


def _assert_valid_path(board, path, start, goal):
    assert path[0] == start
    assert path[-1] == goal
    assert len(set(path)) == len(path)
    for (ax, ay), (bx, by) in zip(path, path[1:]):
        assert abs(ax - bx) + abs(ay - by) == 1
    for x, y in path:
        assert board[x][y] == 0


@pytest.mark.parametrize("number", [1, 2, 3, 4])
@pytest.mark.parametrize("search", [breadth_first_search, depth_first_search])
def test_every_problem_is_solved(number, search):
    problem = get_problem(number)
    trace = search(problem.board, problem.start, problem.goal)
    assert trace.found is True
    _assert_valid_path(problem.board, trace.path, problem.start, problem.goal)


@pytest.mark.parametrize("number", [1, 2, 3, 4])
def test_bfs_path_is_no_longer_than_dfs(number):
    problem = get_problem(number)
    bfs = breadth_first_search(problem.board, problem.start, problem.goal)
    dfs = depth_first_search(problem.board, problem.start, problem.goal)
    assert len(bfs.path) <= len(dfs.path)


def test_trace_method_names():
    problem = get_problem(2)
    assert breadth_first_search(problem.board, problem.start, problem.goal).method == "BFS"
    assert depth_first_search(problem.board, problem.start, problem.goal).method == "DFS"


def test_problem_starts_and_goals():
    problem = get_problem(4)
    assert isinstance(problem, MazeProblem)
    assert problem.start == (0, 1)
    assert problem.goal == (2, 9)
    assert problem.board == get_maze(3)


def test_get_problem_rejects_unknown_number():
    with pytest.raises(ValueError):
        get_problem(5)
    with pytest.raises(ValueError):
        get_problem(0)


def test_get_maze_falls_back_to_last_maze():
    assert get_maze(7) == get_maze(3)
    assert get_maze(-1) == get_maze(3)
    assert get_maze(0) != get_maze(3)


def test_get_maze_returns_independent_copy():
    board = get_maze(0)
    board[0][0] = 5
    assert get_maze(0)[0][0] == 1


def test_is_open():
    board = [[0, 1], [0, 0]]
    assert is_open(board, (0, 0), set()) is True
    assert is_open(board, (0, 1), set()) is False
    assert is_open(board, (0, 0), {(0, 0)}) is False
    assert is_open(board, (2, 0), set()) is False
    assert is_open(board, (-1, 0), set()) is False


def test_unreachable_goal_visits_every_reachable_cell_once():
    board = [
        [0, 0, 1, 0],
        [0, 0, 1, 0],
    ]
    for search in (breadth_first_search, depth_first_search):
        trace = search(board, (0, 0), (0, 3))
        assert trace.found is False
        assert trace.path is None
        visited = [step.current for step in trace.steps]
        assert sorted(visited) == [(0, 0), (0, 1), (1, 0), (1, 1)]


def test_bfs_and_dfs_expansion_order():
    board = [[0, 0], [0, 0]]
    bfs = breadth_first_search(board, (0, 0), (5, 5))
    dfs = depth_first_search(board, (0, 0), (5, 5))
    assert bfs.steps[0] == SearchStep((0, 0), ((0, 0),), ())
    assert bfs.steps[1].current == (1, 0)
    assert bfs.steps[1].frontier == ((0, 1),)
    assert dfs.steps[1].current == (1, 0)
    assert dfs.steps[1].frontier == ((0, 1),)


def test_steps_paths_end_at_current():
    problem = get_problem(3)
    trace = depth_first_search(problem.board, problem.start, problem.goal)
    assert isinstance(trace, SearchTrace)
    for step in trace.steps:
        assert step.path[-1] == step.current
        assert step.current not in step.frontier


def test_render_maze_small_board():
    board = [[0, 1], [0, 0]]
    assert render_maze(board, [(0, 0), (1, 0)], (1, 1)) == "R # \n* Q \n"


def test_render_maze_requires_path():
    with pytest.raises(ValueError):
        render_maze([[0]], [], (0, 0))


def test_render_maze_marks_start_and_goal():
    problem = get_problem(1)
    text = render_maze(problem.board, [problem.start], problem.goal)
    lines = text.splitlines()
    assert len(lines) == len(problem.board)
    assert text.count("R") == 1
    assert text.count("Q") == 1
    assert lines[9].split()[3] == "R"
    assert lines[9].split()[8] == "Q"


def test_format_step_mentions_current_cell():
    problem = get_problem(1)
    trace = breadth_first_search(problem.board, problem.start, problem.goal)
    text = format_step("BFS", trace.steps[0], problem.board, problem.goal)
    assert "[BFS] Visitando: (9,3)" in text
    assert "[BFS] Camino actual: (9,3) " in text
    assert text.endswith("------------------------\n")


def test_main_runs_bfs_then_exits(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n1\n5\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "CAMINO ENCONTRADO!" in out
    assert "Saliendo del programa..." in out


def test_main_rejects_bad_choices(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("9\n2\n7\n3\n2\n5\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Opcion invalida. Intente de nuevo." in out
    assert "Opcion invalida. Regresando al menu principal." in out
    assert "[DFS]  Camino encontrado!" in out