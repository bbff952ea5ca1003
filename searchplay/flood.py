"""Breadth-first flood of a maze whose cells mark the rat (2) and the cheese (3)."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

Cell = tuple[int, int]
Board = list[list[int]]

WALL = 1
RAT = 2
CHEESE = 3

_MARKED_MAZES: tuple[tuple[tuple[int, ...], ...], ...] = (
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
        (0, 1, 1, 2, 1, 1, 1, 1, 3, 1),
    ),
    (
        (1, 2, 1, 1, 1, 1, 1, 1, 1, 1),
        (1, 0, 1, 0, 0, 0, 0, 0, 1, 1),
        (1, 0, 1, 1, 1, 1, 1, 0, 0, 1),
        (1, 0, 0, 0, 0, 1, 0, 0, 1, 1),
        (1, 1, 1, 1, 0, 1, 1, 0, 0, 1),
        (1, 0, 0, 1, 0, 0, 0, 0, 0, 1),
        (1, 0, 1, 1, 1, 1, 1, 0, 1, 1),
        (1, 0, 0, 0, 0, 0, 0, 0, 1, 1),
        (1, 1, 1, 1, 1, 1, 0, 0, 0, 1),
        (1, 1, 1, 1, 1, 1, 1, 1, 3, 1),
    ),
    (
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
        (1, 0, 0, 0, 0, 0, 1, 0, 0, 1),
        (1, 1, 0, 1, 1, 0, 1, 0, 1, 1),
        (1, 0, 0, 1, 0, 0, 0, 0, 0, 1),
        (1, 1, 0, 1, 1, 0, 1, 1, 0, 1),
        (2, 0, 0, 0, 1, 0, 1, 1, 0, 1),
        (1, 1, 1, 0, 1, 0, 0, 0, 0, 1),
        (1, 0, 0, 1, 1, 1, 1, 1, 0, 1),
        (1, 1, 1, 1, 0, 0, 0, 0, 0, 1),
        (1, 1, 1, 1, 1, 1, 1, 1, 3, 1),
    ),
    (
        (1, 2, 1, 1, 1, 1, 1, 1, 1, 1),
        (1, 0, 0, 0, 0, 1, 1, 1, 1, 1),
        (1, 1, 1, 0, 0, 1, 1, 1, 0, 3),
        (1, 1, 1, 0, 1, 1, 1, 1, 0, 1),
        (1, 1, 0, 0, 0, 0, 0, 1, 0, 1),
        (1, 0, 0, 1, 1, 1, 0, 1, 0, 1),
        (1, 0, 1, 1, 1, 0, 0, 0, 0, 1),
        (1, 0, 1, 0, 1, 0, 1, 1, 1, 1),
        (1, 1, 1, 0, 1, 1, 1, 0, 0, 1),
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    ),
)

_STARTS: tuple[Cell, ...] = ((9, 3), (0, 1), (5, 0), (0, 1))

# Up, down, left, right.
_MOVES: tuple[Cell, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class FloodStep:
    """One dequeued cell, numbered from 1, with the board as it stood when dequeued."""

    number: int
    position: Cell
    board: tuple[tuple[int, ...], ...]
    reached: bool


def get_marked_maze(index: int) -> Board:
    """Return a fresh copy of marked maze ``index`` (0-based); any other index gives the last."""
    chosen = (
        _MARKED_MAZES[index]
        if 0 <= index < len(_MARKED_MAZES) - 1
        else _MARKED_MAZES[-1]
    )
    return [list(row) for row in chosen]


def render_marked(board: Sequence[Sequence[int]]) -> str:
    """Draw the board with the rat as 'R', the cheese as 'Q' and other cells as digits."""
    symbols = {RAT: "R", CHEESE: "Q"}
    return "".join(
        "".join(f"{symbols.get(value, value)} " for value in row) + "\n"
        for row in board
    )


def flood_search(board: Sequence[Sequence[int]], start: Cell) -> Iterator[FloodStep]:
    """Flood outward from ``start``, marking each enqueued cell as the rat, until the cheese.

    The input board is left unchanged. The last step has ``reached`` set when the
    cheese was found.
    """
    grid = [list(row) for row in board]
    rows = len(grid)
    cols = len(grid[0]) if grid else 0
    visited = {start}
    visited.update(
        (i, j) for i, row in enumerate(grid) for j, value in enumerate(row) if value == WALL
    )
    queue: deque[Cell] = deque([start])
    number = 0
    while queue:
        x, y = queue.popleft()
        number += 1
        reached = grid[x][y] == CHEESE
        yield FloodStep(number, (x, y), tuple(tuple(row) for row in grid), reached)
        if reached:
            return
        for dx, dy in _MOVES:
            nx, ny = x + dx, y + dy
            if 0 <= nx < rows and 0 <= ny < cols and (nx, ny) not in visited:
                queue.append((nx, ny))
                if grid[nx][ny] != CHEESE:
                    grid[nx][ny] = RAT
                visited.add((nx, ny))


def main(argv: Sequence[str] | None = None) -> int:
    """Flood every marked maze in turn, printing each step."""
    for index, start in enumerate(_STARTS):
        print(f"TABLERO NUMERO: {index + 1}")
        reached = False
        for step in flood_search(get_marked_maze(index), start):
            x, y = step.position
            print(f"PASO: {step.number}")
            print(f"POSICION ACTUAL ({x},{y})")
            print(render_marked(step.board), end="")
            reached = step.reached
        print("LLEGO" if reached else "NO LLEGO")
        print("-------FIN------")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())