import pytest

from searchplay.symmetry import (
    agent_reasoning,
    apply_move,
    board_key,
    board_variants,
    count_open_lines,
    empty_board,
    evaluate,
    format_board,
    has_winner,
    is_draw,
    parse_move,
    reflect,
    rotate90,
    symmetric_moves,
)


def _board(text):
    return [list(text[i : i + 3]) for i in range(0, 9, 3)]


def test_rotate90_moves_top_left_to_top_right():
    board = _board("X        ")
    assert rotate90(board) == _board("  X      ")


def test_four_rotations_are_identity():
    board = _board("XO  X O X")
    result = board
    for _ in range(4):
        result = rotate90(result)
    assert result == board


def test_reflect_twice_is_identity_and_mirrors():
    board = _board("XO  X O  ")
    assert reflect(board)[0] == [" ", "O", "X"]
    assert reflect(reflect(board)) == board


def test_board_variants_of_empty_board():
    variants = board_variants(empty_board())
    assert len(variants) == 8
    assert all(v == empty_board() for v in variants)


def test_board_variants_start_with_the_board():
    board = _board("XO       ")
    variants = board_variants(board)
    assert variants[0] == board
    assert variants[4] == reflect(board)


def test_board_key_reads_row_by_row():
    assert board_key(_board("XO  X   O")) == "XO  X   O"


def test_symmetric_moves_on_empty_board():
    assert symmetric_moves(empty_board()) == [(0, 0), (0, 1), (1, 1)]


def test_symmetric_moves_are_blank_cells():
    board = _board("X   O    ")
    moves = symmetric_moves(board)
    assert moves
    assert all(board[i][j] == " " for i, j in moves)
    assert moves == sorted(moves)


def test_count_open_lines_on_empty_board():
    assert count_open_lines(empty_board(), "X") == 8
    assert evaluate(empty_board()) == 0


def test_evaluate_is_antisymmetric_under_swapping_marks():
    board = _board("X O  X O ")
    swapped = [[{"X": "O", "O": "X"}.get(c, c) for c in row] for row in board]
    assert evaluate(swapped) == -evaluate(board)


def test_apply_move_leaves_original_untouched():
    board = empty_board()
    result = apply_move(board, (1, 2), "X")
    assert result[1][2] == "X"
    assert board == empty_board()


def test_format_board_empty():
    expected = (
        "  1   2   3\n"
        "A   |   |  \n"
        "  --+---+--\n"
        "B   |   |  \n"
        "  --+---+--\n"
        "C   |   |  \n"
        "\n"
    )
    assert format_board(empty_board()) == expected


def test_has_winner_rows_columns_diagonals():
    assert has_winner(_board("XXX      "), "X")
    assert has_winner(_board("O  O  O  "), "O")
    assert has_winner(_board("  X X X  "), "X")
    assert not has_winner(_board("XX O     "), "X")


def test_is_draw():
    assert is_draw(_board("XOXXOOOXX"))
    assert not is_draw(_board("XOXXOOOX "))


def test_parse_move_accepts_lower_case():
    assert parse_move("b2", empty_board()) == (1, 1)


@pytest.mark.parametrize(
    "text, message",
    [
        ("A", "Formato inválido."),
        ("A12", "Formato inválido."),
        ("D1", "Coordenada fuera de rango. Usa formato A1, B2, etc."),
        ("A4", "Coordenada fuera de rango. Usa formato A1, B2, etc."),
    ],
)
def test_parse_move_rejects_bad_text(text, message):
    with pytest.raises(ValueError) as excinfo:
        parse_move(text, empty_board())
    assert str(excinfo.value) == message


def test_parse_move_rejects_occupied_cell():
    board = apply_move(empty_board(), (0, 0), "X")
    with pytest.raises(ValueError, match="Movimiento inválido"):
        parse_move("A1", board)


def test_agent_reasoning_picks_first_best_candidate():
    board = _board("O   X    ")
    reasoning = agent_reasoning(board)
    moves = [move for move, _ in reasoning.candidates]
    assert moves == symmetric_moves(board)
    best = max(value for _, value in reasoning.candidates)
    assert reasoning.value == best
    first_best = next(m for m, v in reasoning.candidates if v == best)
    assert reasoning.move == first_best
    assert f"Mejor jugada sugerida: ({first_best[0]}, {first_best[1]})" in reasoning.report


def test_agent_reasoning_on_empty_board_picks_blank_cell():
    reasoning = agent_reasoning(empty_board())
    assert reasoning.move in symmetric_moves(empty_board())
    assert reasoning.report.startswith("--------------{ La máquina está pensando... }")


def test_agent_reasoning_full_board_raises():
    with pytest.raises(ValueError):
        agent_reasoning(_board("XOXXOOOXX"))