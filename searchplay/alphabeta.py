"""Noughts and crosses against a depth-limited minimax bot with alpha-beta pruning."""

from __future__ import annotations

import math
import sys
from collections.abc import Callable, Iterable, Sequence

Board = list[list[str]]
Move = tuple[int, int]
Trace = Callable[[str], None]

N = 3
MAX_DEPTH = 3
EMPTY = "."
HUMAN = "X"
BOT = "O"


def empty_board() -> Board:
    """A 3x3 board of empty cells."""
    return [[EMPTY] * N for _ in range(N)]


def is_win(board: Sequence[Sequence[str]], player: str) -> bool:
    """Whether ``player`` holds a full row, column or diagonal."""
    for i in range(N):
        if all(board[i][j] == player for j in range(N)):
            return True
        if all(board[j][i] == player for j in range(N)):
            return True
    return all(board[i][i] == player for i in range(N)) or all(
        board[i][N - 1 - i] == player for i in range(N)
    )


def is_full(board: Sequence[Sequence[str]]) -> bool:
    """Whether no empty cell is left."""
    return all(cell != EMPTY for row in board for cell in row)


def format_board(board: Sequence[Sequence[str]]) -> str:
    """Draw the board with numbered rows and columns."""
    parts = ["\n  0   1   2\n"]
    for i, row in enumerate(board):
        parts.append(f"{i} {' | '.join(row)}\n")
        if i < N - 1:
            parts.append("  ---------\n")
    parts.append("\n")
    return "".join(parts)


def format_evaluation(board: Sequence[Sequence[str]], depth: int, score: int) -> str:
    """Describe one evaluated position, indented by its depth."""
    indent = " " * (depth * 2)
    rows = "".join(indent + "".join(f"{cell} " for cell in row) + "\n" for row in board)
    return f"{indent}Evaluando (score = {score}):\n{rows}\n"


def _empty_cells(board: Sequence[Sequence[str]]) -> list[Move]:
    return [(i, j) for i, row in enumerate(board) for j, cell in enumerate(row) if cell == EMPTY]


def minimax(
    board: Board,
    maximizing: bool,
    alpha: float = -math.inf,
    beta: float = math.inf,
    depth: int = 0,
    trace: Trace | None = None,
) -> int:
    """Score the position for O: +1 O wins, -1 X wins, 0 otherwise or beyond the depth limit.

    The board is changed during the search and restored before returning. Each
    evaluated child is passed to ``trace`` as text when it is given.
    """
    if is_win(board, BOT):
        return 1
    if is_win(board, HUMAN):
        return -1
    if is_full(board) or depth >= MAX_DEPTH:
        return 0

    mark = BOT if maximizing else HUMAN
    best = -math.inf if maximizing else math.inf
    for i, j in _empty_cells(board):
        board[i][j] = mark
        try:
            score = minimax(board, not maximizing, alpha, beta, depth + 1, trace)
            if trace is not None:
                trace(format_evaluation(board, depth, score))
        finally:
            board[i][j] = EMPTY
        if maximizing:
            best = max(best, score)
            alpha = max(alpha, best)
        else:
            best = min(best, score)
            beta = min(beta, best)
        if beta <= alpha:
            break
    return int(best)


def find_best_move(board: Sequence[Sequence[str]], trace: Trace | None = None) -> Move:
    """The first empty cell with the highest minimax score for O; ValueError if none is empty."""
    grid = [list(row) for row in board]
    best_move: Move | None = None
    best_score = -math.inf
    for i, j in _empty_cells(grid):
        grid[i][j] = BOT
        score = minimax(grid, False, -math.inf, math.inf, 1, trace)
        grid[i][j] = EMPTY
        if score > best_score:
            best_score = score
            best_move = (i, j)
    if best_move is None:
        raise ValueError("the board has no empty cell left")
    return best_move


class _LineTokens:
    """Whitespace-separated tokens from a stream, with the rest of a line discardable."""

    def __init__(self, stream: Iterable[str]) -> None:
        self._lines = iter(stream)
        self._pending: list[str] = []

    def next(self) -> str | None:
        while not self._pending:
            line = next(self._lines, None)
            if line is None:
                return None
            self._pending = line.split()
        return self._pending.pop(0)

    def discard_line(self) -> None:
        self._pending = []


def _read_human_move(tokens: _LineTokens, board: Board) -> Move | None:
    """Prompt until a valid move is read; None at end of input."""
    while True:
        print("Tu turno (fila columna): ", end="")
        first, second = tokens.next(), None
        if first is not None:
            second = tokens.next()
        if first is None or second is None:
            print()
            return None
        try:
            row, col = int(first), int(second)
        except ValueError:
            row = col = -1
        if 0 <= row < N and 0 <= col < N and board[row][col] == EMPTY:
            return row, col
        tokens.discard_line()
        print("Movimiento invalido. Intenta de nuevo.")


def main(argv: Sequence[str] | None = None) -> int:
    """Play a game: the user is X and moves first, the bot plays O."""
    tokens = _LineTokens(sys.stdin)
    board = empty_board()
    current = HUMAN

    print("==============================")
    print(" Bienvenido a 3 en raya  ")
    print(" Tu eres el jugador X         ")
    print("==============================")
    print(format_board(board), end="")

    while True:
        if current == HUMAN:
            move = _read_human_move(tokens, board)
            if move is None:
                return 0
            board[move[0]][move[1]] = HUMAN
        else:
            move = find_best_move(board, trace=lambda text: print(text, end=""))
            board[move[0]][move[1]] = BOT
            print(f"El bot juega en ({move[0]}, {move[1]})")

        print(format_board(board), end="")
        if is_win(board, current):
            print(f"El jugador {current} gana!")
            return 0
        if is_full(board):
            print("Empate!")
            return 0
        current = BOT if current == HUMAN else HUMAN


if __name__ == "__main__":
    raise SystemExit(main())