"""Noughts and crosses against a one-ply look-ahead agent that prunes symmetric moves."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

Board = list[list[str]]
Move = tuple[int, int]

EMPTY = " "
MACHINE = "X"
HUMAN = "O"

_LINES: tuple[tuple[Move, Move, Move], ...] = (
    *(((i, 0), (i, 1), (i, 2)) for i in range(3)),
    *(((0, i), (1, i), (2, i)) for i in range(3)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


@dataclass(frozen=True)
class Reasoning:
    """The agent's chosen move, its value, every candidate it weighed and a printed trace."""

    move: Move
    value: int
    candidates: tuple[tuple[Move, int], ...]
    report: str


def empty_board() -> Board:
    """A 3x3 board with every cell blank."""
    return [[EMPTY] * 3 for _ in range(3)]


def rotate90(board: Sequence[Sequence[str]]) -> Board:
    """Rotate the board a quarter turn clockwise."""
    return [list(row) for row in zip(*reversed(board))]


def reflect(board: Sequence[Sequence[str]]) -> Board:
    """Mirror the board left to right."""
    return [list(reversed(row)) for row in board]


def board_variants(board: Sequence[Sequence[str]]) -> list[Board]:
    """The eight boards reached by rotations and reflections, starting with the board itself."""
    variants: list[Board] = []
    for base in ([list(row) for row in board], reflect(board)):
        current = base
        for _ in range(4):
            variants.append(current)
            current = rotate90(current)
    return variants


def board_key(board: Sequence[Sequence[str]]) -> str:
    """The board's cells read row by row as one string."""
    return "".join("".join(row) for row in board)


def symmetric_moves(board: Sequence[Sequence[str]]) -> list[Move]:
    """Empty cells in row order, keeping only the first of each set of symmetric moves."""
    seen: set[str] = set()
    moves: list[Move] = []
    for i, row in enumerate(board):
        for j, cell in enumerate(row):
            if cell != EMPTY:
                continue
            marked = apply_move(board, (i, j), "*")
            canonical = min(board_key(v) for v in board_variants(marked))
            if canonical not in seen:
                seen.add(canonical)
                moves.append((i, j))
    return moves


def count_open_lines(board: Sequence[Sequence[str]], player: str) -> int:
    """Number of lines holding only ``player``'s marks or blanks."""
    return sum(
        all(board[x][y] in (player, EMPTY) for x, y in line) for line in _LINES
    )


def evaluate(board: Sequence[Sequence[str]]) -> int:
    """Open lines for X minus open lines for O."""
    return count_open_lines(board, MACHINE) - count_open_lines(board, HUMAN)


def apply_move(board: Sequence[Sequence[str]], move: Move, mark: str) -> Board:
    """A new board with ``mark`` placed at ``move``."""
    result = [list(row) for row in board]
    result[move[0]][move[1]] = mark
    return result


def format_board(board: Sequence[Sequence[str]]) -> str:
    """Draw the board with rows A to C and columns 1 to 3."""
    parts = ["  1   2   3\n"]
    for i, row in enumerate(board):
        parts.append(f"{chr(ord('A') + i)} {' | '.join(row)}\n")
        if i < 2:
            parts.append("  --+---+--\n")
    parts.append("\n")
    return "".join(parts)


def has_winner(board: Sequence[Sequence[str]], player: str) -> bool:
    """Whether ``player`` holds a full row, column or diagonal."""
    return any(all(board[x][y] == player for x, y in line) for line in _LINES)


def is_draw(board: Sequence[Sequence[str]]) -> bool:
    """Whether no blank cell is left."""
    return all(cell != EMPTY for row in board for cell in row)


def _cells(row: Iterable[str]) -> str:
    return "".join(f"[{c}]" for c in row)


def agent_reasoning(board: Sequence[Sequence[str]]) -> Reasoning:
    """Choose X's move by looking at O's replies.

    The first candidate is weighed against every symmetric reply; later ones only
    against their first reply. Raises ValueError when the board has no blank cell.
    """
    max_moves = symmetric_moves(board)
    if not max_moves:
        raise ValueError("the board has no blank cell left")

    lines = [
        "--------------{ La máquina está pensando... }--------------\n",
        "Raíz (Estado Inicial - Ei)\n",
    ]
    lines.extend(_cells(row) + "\n" for row in board)

    candidates: list[tuple[Move, int]] = []
    best_move = max_moves[0]
    best_value: int | None = None
    for index, move in enumerate(max_moves):
        after_max = apply_move(board, move, MACHINE)
        replies = symmetric_moves(after_max)
        if index > 0:
            replies = replies[:1]
        min_boards = [apply_move(after_max, reply, HUMAN) for reply in replies]
        min_values = [evaluate(b) for b in min_boards]
        value = min(min_values) if min_values else evaluate(after_max)
        candidates.append((move, value))

        branch = "└──" if index == len(max_moves) - 1 else "├──"
        lines.append(f"{branch} MAX: ({move[0]},{move[1]}) → Valor = {value}\n")
        lines.extend(f"│   {_cells(row)}\n" for row in after_max)
        for min_board, min_value in zip(min_boards, min_values):
            lines.extend(f"│   │   {_cells(row)}\n" for row in min_board)
            lines.append(
                f"│   │   → f(v) = {count_open_lines(min_board, MACHINE)}"
                f" - {count_open_lines(min_board, HUMAN)} = {min_value}\n"
            )

        if best_value is None or value > best_value:
            best_value = value
            best_move = move

    assert best_value is not None
    lines.append(
        f"\nEl valor Beta es: {best_value} en nodo MAX: ({best_move[0]}, {best_move[1]})\n"
    )
    lines.append(f"Mejor jugada sugerida: ({best_move[0]}, {best_move[1]})\n")
    lines.append("Fin del razonamiento del agente.\n\n")
    return Reasoning(best_move, best_value, tuple(candidates), "".join(lines))


def parse_move(text: str, board: Sequence[Sequence[str]]) -> Move:
    """Read a move such as 'A3' or 'b2' for a blank cell; raise ValueError otherwise."""
    if len(text) != 2:
        raise ValueError("Formato inválido.")
    row, col = text[0].upper(), text[1]
    if not ("A" <= row <= "C") or not ("1" <= col <= "3"):
        raise ValueError("Coordenada fuera de rango. Usa formato A1, B2, etc.")
    move = (ord(row) - ord("A"), ord(col) - ord("1"))
    if board[move[0]][move[1]] != EMPTY:
        raise ValueError("Movimiento inválido. Intenta nuevamente.")
    return move


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Play a game: the machine is X and moves first, the user plays O."""
    tokens = _tokens(sys.stdin)
    board = empty_board()
    print("¡Bienvenido al 3 en raya!\n")
    print(format_board(board), end="")
    while True:
        reasoning = agent_reasoning(board)
        print(reasoning.report, end="")
        board = apply_move(board, reasoning.move, MACHINE)
        print(format_board(board), end="")
        if has_winner(board, MACHINE):
            print("La máquina ha ganado.")
            return 0
        if is_draw(board):
            print("Empate.")
            return 0

        while True:
            print("Introduce tu movimiento (ejemplo: A3): ", end="")
            token = next(tokens, None)
            if token is None:
                print()
                return 0
            try:
                move = parse_move(token, board)
            except ValueError as error:
                print(error)
            else:
                break
        board = apply_move(board, move, HUMAN)
        print(format_board(board), end="")
        if has_winner(board, HUMAN):
            print("¡Felicidades! Has ganado.")
            return 0
        if is_draw(board):
            print("Empate.")
            return 0


if __name__ == "__main__":
    raise SystemExit(main())