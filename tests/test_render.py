from sudoku_wfc import config
from sudoku_wfc.csp.search import solve
from sudoku_wfc.postprocess.render_image import render_board, save_board_image, tile_origin
from sudoku_wfc.postprocess.render_result import (
    board_to_dataframe,
    build_result,
    candidates_frame,
    render_text,
)


def test_board_to_dataframe_marks_unresolved_as_zero(board):
    board.collapse(2, 1, 6)
    df = board_to_dataframe(board)
    assert df.shape == (9, 9)
    assert df.loc[1, 2] == 7
    assert df.loc[0, 0] == 0


def test_candidates_frame(board):
    board.collapse(0, 0, 0)
    frame = candidates_frame(board)
    assert frame.loc[0, 0] == "1"
    assert frame.loc[0, 1] == "23456789"
    assert frame.loc[5, 5] == "123456789"


def test_build_result_on_fresh_board(board):
    result = build_result(board)
    assert result["shape"] == (9, 9)
    assert result["entropy"] == 729
    assert result["solved"] is False
    assert result["rounds"] == 0
    assert result["conflicts"] == []
    assert len(result["solved_board"]) == 9
    assert result["candidates"][4][4] == "123456789"


def test_build_result_after_solve(board, rng):
    solve_result = solve(board, rng=rng)
    result = build_result(board, solve_result)
    assert result["entropy"] == 81
    assert result["rounds"] == solve_result.rounds
    assert result["solved"] == solve_result.solved
    assert all(0 < d <= 9 for row in result["solved_board"] for d in row)


def test_build_result_lists_conflicts(board):
    board.collapse(0, 0, 0)
    board.collapse(0, 5, 0)
    result = build_result(board)
    assert result["conflicts"] == [{"first": [0, 0], "second": [0, 5], "digit": 1}]


def test_render_text_layout(board):
    board.collapse(0, 0, 4)
    text = render_text(board)
    lines = text.splitlines()
    assert len(lines) == 11
    assert lines[0].startswith(" 5 . .")
    assert lines[3] == "-------+-------+-------"


def test_render_text_with_candidate_counts(board):
    board.collapse(0, 0, 4)
    lines = render_text(board, show_candidates=True).splitlines()
    assert lines[0].startswith(" 5 8 8 | 8 8 8 | 8 8 8")
    assert lines[4].startswith(" 8 9 9 | 9 9 9")


def test_render_board_image_size(board):
    board.collapse(0, 0, 0)
    image = render_board(board)
    assert image.size == (config.BOARD_IMAGE_WIDTH, config.BOARD_IMAGE_WIDTH)
    assert image.mode == "RGB"


def test_tile_origin():
    assert tile_origin(0, 0) == (config.BOARD_PADDING, config.BOARD_PADDING)
    assert tile_origin(1, 2) == (
        config.TILE_SIZE + config.BOARD_PADDING,
        2 * config.TILE_SIZE + config.BOARD_PADDING,
    )


def test_save_board_image(board, tmp_path):
    board.collapse(4, 4, 8)
    path = save_board_image(board, tmp_path / "out" / "board.png")
    assert path.exists()
    assert path.stat().st_size > 0
