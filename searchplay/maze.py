"""Rat-and-cheese maze solved step by step with breadth-first or depth-first search."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

Cell = tuple[int, int]
Board = list[list[int]]

_MAZES: tuple[tuple[tuple[int, ...], ...], ...] = (
    (
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
        (1, 0, 0, 0, 1, 1, 1, 1, 1, 1),
        (1, 1, 1, 0, 1, 0, 0, 0, 0, 1),
        (1, 1, 0, 0, 1, 0, 1, 1, 0, 1),
        (1, 1, 0, 1, 1, 0, 1, 0, 0, 1),
        (1, 1, 0, 0, 0, 0, 1, 0, 1, 1),
        (1, 0, 0, 1, 1, 1, 1, 0, 0, 1),
        (1, 0, 1, 1, 1, 0, 0, 0, 0, 1),
        (1, 0, 0, 0, 1, 1, 1, 1, 0, 1),
        (0, 1, 1, 0, 1, 1, 1, 1, 0, 1),
    ),
    (
        (1, 0, 1, 1, 1, 1, 1, 1, 1, 1),
        (1, 0, 1, 0, 0, 0, 0, 0, 1, 1),
        (1, 0, 1, 1, 1, 1, 1, 0, 0, 1),
        (1, 0, 0, 0, 0, 1, 0, 0, 1, 1),
        (1, 1, 1, 1, 0, 1, 1, 0, 0, 1),
        (1, 0, 0, 1, 0, 0, 0, 0, 0, 1),
        (1, 0, 1, 1, 1, 1, 1, 0, 1, 1),
        (1, 0, 0, 0, 0, 0, 0, 0, 1, 1),
        (1, 1, 1, 1, 1, 1, 0, 0, 0, 1),
        (1, 1, 1, 1, 1, 1, 1, 1, 0, 1),
    ),
    (
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
        (1, 0, 0, 0, 0, 0, 1, 0, 0, 1),
        (1, 1, 0, 1, 1, 0, 1, 0, 1, 1),
        (1, 0, 0, 1, 0, 0, 0, 0, 0, 1),
        (1, 1, 0, 1, 1, 0, 1, 1, 0, 1),
        (0, 0, 0, 0, 1, 0, 1, 1, 0, 1),
        (1, 1, 1, 0, 1, 0, 0, 0, 0, 1),
        (1, 0, 0, 1, 1, 1, 1, 1, 0, 1),
        (1, 1, 1, 1, 0, 0, 0, 0, 0, 1),
        (1, 1, 1, 1, 1, 1, 1, 1, 0, 1),
    ),
    (
        (1, 0, 1, 1, 1, 1, 1, 1, 1, 1),
        (1, 0, 0, 0, 0, 1, 1, 1, 1, 1),
        (1, 1, 1, 0, 0, 1, 1, 1, 0, 0),
        (1, 1, 1, 0, 1, 1, 1, 1, 0, 1),
        (1, 1, 0, 0, 0, 0, 0, 1, 0, 1),
        (1, 0, 0, 1, 1, 1, 0, 1, 0, 1),
        (1, 0, 1, 1, 1, 0, 0, 0, 0, 1),
        (1, 0, 1, 0, 1, 0, 1, 1, 1, 1),
        (1, 1, 1, 0, 1, 1, 1, 0, 0, 1),
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    ),
)

_PROBLEMS: dict[int, tuple[Cell, Cell]] = {
    1: ((9, 3), (9, 8)),
    2: ((0, 1), (9, 8)),
    3: ((5, 0), (9, 8)),
    4: ((0, 1), (2, 9)),
}

# Up, down, left, right.
_MOVES: tuple[Cell, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

_RULE = "#############################################\n"
_STARS = "*********************************************\n"
_BLANK = "*                                           *\n"
_RESULTS = {
    ("BFS", True): "*       [BFS]  CAMINO ENCONTRADO!           *\n",
    ("DFS", True): "*       [DFS]  Camino encontrado!           *\n",
    ("BFS", False): "*       [BFS] No se encontro camino.        *\n",
    ("DFS", False): "*       [DFS]  No se encontro camino.       *\n",
}


@dataclass(frozen=True)
class SearchStep:
    """One expansion: the cell taken from the frontier, its path, and what is still waiting."""

    current: Cell
    path: tuple[Cell, ...]
    frontier: tuple[Cell, ...]


@dataclass
class SearchTrace:
    """Every step of a search and whether the goal was reached."""

    method: str
    steps: list[SearchStep] = field(default_factory=list)
    found: bool = False

    @property
    def path(self) -> tuple[Cell, ...] | None:
        """The path to the goal, or None when it was not reached."""
        if not self.found:
            return None
        return self.steps[-1].path


@dataclass
class MazeProblem:
    """A numbered maze with the rat's start and the cheese's position."""

    number: int
    board: Board
    start: Cell
    goal: Cell


def get_maze(index: int) -> Board:
    """Return a fresh copy of maze ``index`` (0-based); any other index gives the last maze."""
    chosen = _MAZES[index] if 0 <= index < len(_MAZES) - 1 else _MAZES[-1]
    return [list(row) for row in chosen]


def get_problem(number: int) -> MazeProblem:
    """Return maze problem ``number`` (1 to 4)."""
    try:
        start, goal = _PROBLEMS[number]
    except KeyError:
        raise ValueError(f"no maze numbered {number}") from None
    return MazeProblem(number, get_maze(number - 1), start, goal)


def is_open(board: Sequence[Sequence[int]], cell: Cell, visited: set[Cell]) -> bool:
    """Whether ``cell`` lies on the board, is a corridor and has not been visited."""
    x, y = cell
    return (
        0 <= x < len(board)
        and 0 <= y < len(board[x])
        and board[x][y] == 0
        and cell not in visited
    )


def render_maze(board: Sequence[Sequence[int]], path: Sequence[Cell], goal: Cell) -> str:
    """Draw the maze with walls '#', corridors '.', the path '*', the rat 'R' and the cheese 'Q'."""
    if not path:
        raise ValueError("path must contain at least the starting cell")
    grid = [["#" if value == 1 else "." for value in row] for row in board]
    for x, y in path:
        grid[x][y] = "*"
    start_x, start_y = path[0]
    grid[start_x][start_y] = "R"
    goal_x, goal_y = goal
    grid[goal_x][goal_y] = "Q"
    return "".join("".join(f"{ch} " for ch in row) + "\n" for row in grid)


def _cells(cells: Iterable[Cell]) -> str:
    return "".join(f"({x},{y}) " for x, y in cells)


def format_step(method: str, step: SearchStep, board: Sequence[Sequence[int]], goal: Cell) -> str:
    """Describe one search step and draw the maze with the current path."""
    x, y = step.current
    return (
        f"\n[{method}] Visitando: ({x},{y})\n"
        f"[{method}] Camino actual: {_cells(step.path)}"
        f"\n[{method}] Frontera: {_cells(step.frontier)}"
        f"\n[{method}] Estado del laberinto:\n"
        f"{render_maze(board, step.path, goal)}"
        "------------------------\n"
    )


def _search(board: Sequence[Sequence[int]], start: Cell, goal: Cell, method: str, lifo: bool) -> SearchTrace:
    trace = SearchTrace(method)
    frontier: deque[tuple[Cell, tuple[Cell, ...]]] = deque([(start, (start,))])
    visited = {start}
    moves = tuple(reversed(_MOVES)) if lifo else _MOVES
    while frontier:
        cell, path = frontier.pop() if lifo else frontier.popleft()
        waiting = reversed(frontier) if lifo else iter(frontier)
        trace.steps.append(SearchStep(cell, path, tuple(c for c, _ in waiting)))
        if cell == goal:
            trace.found = True
            return trace
        for dx, dy in moves:
            nxt = (cell[0] + dx, cell[1] + dy)
            if is_open(board, nxt, visited):
                visited.add(nxt)
                frontier.append((nxt, path + (nxt,)))
    return trace


def breadth_first_search(board: Sequence[Sequence[int]], start: Cell, goal: Cell) -> SearchTrace:
    """Search with a FIFO queue, expanding up, down, left, right."""
    return _search(board, start, goal, "BFS", lifo=False)


def depth_first_search(board: Sequence[Sequence[int]], start: Cell, goal: Cell) -> SearchTrace:
    """Search with a stack so that up is tried first, then down, left, right."""
    return _search(board, start, goal, "DFS", lifo=True)


def _result_banner(method: str, found: bool) -> str:
    return "\n" + _STARS + _BLANK + _RESULTS[(method, found)] + _BLANK + _STARS


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int | None:
    """Next integer token, -1 for a token that is not a number, None at end of input."""
    token = next(tokens, None)
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return -1


def main(argv: Sequence[str] | None = None) -> int:
    """Interactive menu: choose a maze and an algorithm, then watch it search."""
    tokens = _tokens(sys.stdin)
    while True:
        print(_RULE, end="")
        print("Seleccione el laberinto que desea resolver:")
        for number in _PROBLEMS:
            print(f"{number}. Laberinto {number}")
        print("5. Salir")
        print(_RULE, end="")
        print("Ingrese su opcion: ", end="")
        option = _read_int(tokens)
        if option is None or option == 5:
            print("Saliendo del programa...")
            return 0
        if option not in _PROBLEMS:
            print("Opcion invalida. Intente de nuevo.")
            continue

        print(_RULE, end="")
        print(f"Este es el laberinto numero: {option}")
        print(_RULE, end="")
        problem = get_problem(option)

        print("Seleccione el algoritmo que desea usar:")
        print("1. BFS (Breadth-First Search)")
        print("2. DFS (Depth-First Search)")
        print("Ingrese su opcion: ", end="")
        algorithm = _read_int(tokens)
        if algorithm == 1:
            search, title = breadth_first_search, "\n=========== BFS ===========\n"
        elif algorithm == 2:
            search, title = depth_first_search, "\n=========== DFS ===========\n"
        else:
            print("Opcion invalida. Regresando al menu principal.")
            if algorithm is None:
                print("Saliendo del programa...")
                return 0
            continue

        print(title, end="")
        trace = search(problem.board, problem.start, problem.goal)
        for step in trace.steps:
            print(format_step(trace.method, step, problem.board, problem.goal), end="")
        print(_result_banner(trace.method, trace.found), end="")
        print("----------------------------------------------")


if __name__ == "__main__":
    raise SystemExit(main())