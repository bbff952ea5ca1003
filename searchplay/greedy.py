"""Noughts and crosses against a bot that picks the move with the best immediate score."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Iterator, Sequence

Move = tuple[int, int]
Log = Callable[[str], None]

EMPTY = 0
FIRST = 1
SECOND = 2

WIN_SCORE = 100
INVALID_SCORE = -1000
CENTRE_BONUS = 5
CORNER_BONUS = 3
OWN_PAIR_BONUS = 10
BLOCK_BONUS = 20

_SYMBOLS = {EMPTY: " ", FIRST: "X", SECOND: "O"}
_CORNERS = frozenset({(0, 0), (0, 2), (2, 0), (2, 2)})
_SEPARATOR = "-------------\n"


class InvalidMove(ValueError):
    """Raised for a move off the board or onto an occupied cell."""


class Board:
    """A 3x3 board holding 0 for empty, 1 for the first player and 2 for the second."""

    def __init__(self) -> None:
        self._cells = [[EMPTY] * 3 for _ in range(3)]
        self._turn = FIRST

    def copy(self) -> Board:
        """An independent copy of this board, including whose turn it is."""
        other = Board()
        other._cells = [list(row) for row in self._cells]
        other._turn = self._turn
        return other

    def make_move(self, row: int, col: int) -> None:
        """Place the current player's mark and pass the turn; raise InvalidMove if not allowed."""
        if not (0 <= row <= 2 and 0 <= col <= 2):
            raise InvalidMove(f"({row}, {col}) is off the board")
        if self._cells[row][col] != EMPTY:
            raise InvalidMove(f"({row}, {col}) is already taken")
        self._cells[row][col] = self._turn
        self._turn = SECOND if self._turn == FIRST else FIRST

    def is_full(self) -> bool:
        """Whether no empty cell is left."""
        return all(cell != EMPTY for row in self._cells for cell in row)

    def winner(self) -> int:
        """The player holding a full line, or 0 when nobody does."""
        c = self._cells
        lines = [
            *(tuple(row) for row in c),
            *(tuple(c[i][j] for i in range(3)) for j in range(3)),
            (c[0][0], c[1][1], c[2][2]),
            (c[0][2], c[1][1], c[2][0]),
        ]
        for a, b, d in lines:
            if a != EMPTY and a == b == d:
                return a
        return EMPTY

    def game_over(self) -> bool:
        """Whether someone has won or the board is full."""
        return self.winner() != EMPTY or self.is_full()

    def turn(self) -> int:
        """The player to move next: 1 or 2."""
        return self._turn

    def cell(self, row: int, col: int) -> int:
        """The value held at (row, col)."""
        return self._cells[row][col]

    def possible_moves(self) -> list[Move]:
        """Every empty cell in row order."""
        return [
            (i, j)
            for i, row in enumerate(self._cells)
            for j, value in enumerate(row)
            if value == EMPTY
        ]

    def render(self) -> str:
        """Draw the board in a boxed grid with X and O."""
        parts = [_SEPARATOR]
        for row in self._cells:
            parts.append("| " + "".join(f"{_SYMBOLS[v]} | " for v in row) + "\n")
            parts.append(_SEPARATOR)
        parts.append("\n")
        return "".join(parts)


def _line_bonus(values: Iterable[int], player: int, opponent: int) -> int:
    values = list(values)
    own = values.count(player)
    other = values.count(opponent)
    bonus = 0
    if own == 2 and other == 0:
        bonus += OWN_PAIR_BONUS
    if other == 2 and own == 0:
        bonus += BLOCK_BONUS
    return bonus


def evaluate_move(board: Board, row: int, col: int) -> int:
    """Score placing the current player's mark at (row, col) without looking further ahead."""
    player = board.turn()
    trial = board.copy()
    try:
        trial.make_move(row, col)
    except InvalidMove:
        return INVALID_SCORE
    if trial.winner() == player:
        return WIN_SCORE

    opponent = SECOND if player == FIRST else FIRST
    score = 0
    if (row, col) == (1, 1):
        score += CENTRE_BONUS
    if (row, col) in _CORNERS:
        score += CORNER_BONUS

    def value(i: int, j: int) -> int:
        return player if (i, j) == (row, col) else board.cell(i, j)

    score += _line_bonus((value(row, j) for j in range(3)), player, opponent)
    score += _line_bonus((value(i, col) for i in range(3)), player, opponent)
    if row == col:
        score += _line_bonus((value(i, i) for i in range(3)), player, opponent)
    if row + col == 2:
        score += _line_bonus((value(i, 2 - i) for i in range(3)), player, opponent)
    return score


def best_greedy_move(board: Board, log: Log | None = None) -> Move:
    """The first empty cell with the highest score; ValueError if the board is full."""
    moves = board.possible_moves()
    if not moves:
        raise ValueError("the board has no empty cell left")
    if log is not None:
        log("\nEvaluando movimientos con estrategia greedy:")
    best_move = moves[0]
    best_score = INVALID_SCORE
    for row, col in moves:
        score = evaluate_move(board, row, col)
        if log is not None:
            log(f"Movimiento [{row}, {col}] tiene un puntaje de: {score}")
        if score > best_score:
            best_score = score
            best_move = (row, col)
    return best_move


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Play a game against the greedy bot; the user chooses whether to move first."""
    tokens = _tokens(sys.stdin)
    board = Board()
    print("Bienvenido al juego del Tres en Raya con algoritmo Greedy")
    print("¿Quieres jugar primero? (s/n): ", end="")
    answer = next(tokens, None)
    if answer is None:
        print()
        return 0
    human_turn = answer[0] in ("s", "S")
    print(f"Juegas con {'X' if human_turn else 'O'}")

    while not board.game_over():
        print(board.render(), end="")
        if human_turn:
            while True:
                print("Tu turno. Ingresa fila (0-2) y columna (0-2): ", end="")
                first = next(tokens, None)
                second = next(tokens, None) if first is not None else None
                if first is None or second is None:
                    print()
                    return 0
                try:
                    board.make_move(int(first), int(second))
                except ValueError:
                    print("Movimiento inválido. Intenta de nuevo.")
                else:
                    break
        else:
            print("Turno de la IA (usando estrategia greedy)...")
            row, col = best_greedy_move(board, log=print)
            board.make_move(row, col)
            print(f"La IA ha elegido la posición: [{row}, {col}]")
        human_turn = not human_turn

    print(board.render(), end="")
    winner = board.winner()
    if winner == EMPTY:
        print("¡Empate!")
    else:
        print(f"¡{_SYMBOLS[winner]} ha ganado!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())