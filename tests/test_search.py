import pytest

import ttt_engine.search as search
from ttt_engine.board import BoardState, Player
from ttt_engine.errors import InvalidInputError
from ttt_engine.search import analyse_each_move, evaluate_score, suggest_next_move

P1, P2 = Player.PLAYER1, Player.PLAYER2


def board(enc: str) -> BoardState:
    return BoardState.from_encoding(enc)


def test_evaluate_returns_int():
    assert isinstance(evaluate_score(board("111000000"), P1), int)


@pytest.mark.parametrize("enc,player,expected", [
    ("111000000", P1, 1),
    ("111000000", P2, -1),
    ("222000000", P2, 1),
    ("222000000", P1, -1),
    ("111212221", P1, 1),
])
def test_evaluate_someone_has_won(enc, player, expected):
    assert evaluate_score(board(enc), player) == expected


@pytest.mark.parametrize("player", [P1, P2])
def test_evaluate_draw_on_full_board(player):
    assert evaluate_score(board("121212212"), player) == 0


@pytest.mark.parametrize("player", [P1, P2])
def test_evaluate_trusts_find_winner(monkeypatch, player):
    monkeypatch.setattr(search, "find_winner", lambda b: player)
    assert evaluate_score(BoardState(), player) == 1


@pytest.mark.parametrize("player", [P1, P2])
def test_evaluate_loses_when_opponent_has_won(monkeypatch, player):
    opponent = P2 if player == P1 else P1
    monkeypatch.setattr(search, "find_winner", lambda b: opponent)
    assert evaluate_score(BoardState(), player) == -1


def test_single_empty_cell():
    assert evaluate_score(board("121212210"), P1) == 1
    assert evaluate_score(board("121212210"), P2) == 0


def test_two_empty_cells():
    # player one wins at 8 on the main diagonal
    assert evaluate_score(board("122211010"), P1) == 1
    # whichever cell player two takes, player one completes a line with the other
    assert evaluate_score(board("121112020"), P2) == -1


def test_evaluate_rejects_invalid_player():
    with pytest.raises(InvalidInputError):
        evaluate_score(board("121212210"), 3)


def test_analyse_each_move_scores_every_empty_cell():
    scores = analyse_each_move(board("012022011"), P1)
    assert scores == {0: -1, 3: -1, 6: 1}
    assert list(scores) == [0, 3, 6]


def test_analyse_each_move_callback_can_stop_the_scan():
    seen = []

    def cb(idx, score):
        seen.append((idx, score))
        return True

    scores = analyse_each_move(board("012022011"), P1, cb)
    assert scores == {0: -1}
    assert seen == [(0, -1)]


def test_analyse_each_move_leaves_board_untouched():
    b = board("012022011")
    analyse_each_move(b, P1)
    assert b.encoding() == "012022011"


@pytest.mark.parametrize("player", [P1, P2])
def test_suggest_on_full_board_is_none(player):
    assert suggest_next_move(board("121212121"), player) is None


@pytest.mark.parametrize("enc,expected", [
    ("021212121", 0),
    ("120212121", 2),
    ("121202121", 4),
    ("121212101", 7),
    ("121212110", 8),
])
@pytest.mark.parametrize("player", [P1, P2])
def test_suggest_only_available_cell(enc, expected, player):
    assert suggest_next_move(board(enc), player) == expected


def test_suggest_single_cell_skips_search(monkeypatch):
    def boom(*a, **k):
        raise AssertionError("search should not run")

    monkeypatch.setattr(search, "analyse_each_move", boom)
    assert suggest_next_move(board("021212121"), P1) == 0


@pytest.mark.parametrize("enc,expected", [
    ("012022011", 6),
    ("021012021", 0),
    ("121221010", 8),
    ("210001212", 4),
])
def test_suggest_spots_immediate_win(enc, expected):
    assert suggest_next_move(board(enc), P1) == expected


@pytest.mark.parametrize("enc,expected", [
    ("200000000", 4),
    ("000020000", 0),
])
def test_suggest_non_obvious_best_move(enc, expected):
    assert suggest_next_move(board(enc), P1) == expected


def test_suggest_breaks_ties_by_lowest_index():
    # every move loses for player two, so the lowest index is kept
    assert analyse_each_move(board("121112020"), P2) == {6: -1, 8: -1}
    assert suggest_next_move(board("121112020"), P2) == 6


@pytest.mark.slow
@pytest.mark.parametrize("player", [P1, P2])
def test_suggest_on_empty_board_is_first_cell(player):
    assert suggest_next_move(BoardState(), player) == 0
