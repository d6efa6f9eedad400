import pytest

from blackwall import savefile
from blackwall.constants import SAVE_VERSION
from blackwall.game import Game


def _progress(game):
    game.lines = 123456.789
    game.buffs = 1.3000000000000003
    game.buffs_bought = 3
    game.lps_to_click = 0.02
    game.click_shares_bought = 2
    game.buildings[0].count = 7
    game.buildings[4].count = 2
    game.update_lps()


def test_round_trip(game, tmp_path):
    _progress(game)
    assert game.save_game()

    other = Game(seed=2, save_path=game.save_path)
    assert other.load_game()
    assert other.lines == game.lines
    assert other.buffs == game.buffs
    assert other.buffs_bought == 3
    assert other.click_shares_bought == 2
    assert other.lps_to_click == game.lps_to_click
    assert [b.count for b in other.buildings] == [b.count for b in game.buildings]
    assert other.lines_per_second == pytest.approx(game.lines_per_second)


def test_layout_version_first(game):
    _progress(game)
    rows = savefile.dump_lines(game)
    assert rows[0] == str(SAVE_VERSION)
    assert len(rows) == 7 + len(game.buildings)
    assert rows[7] == "7"


def test_version_mismatch_leaves_state(game):
    rows = savefile.dump_lines(game)
    rows[0] = str(SAVE_VERSION - 1)
    rows[1] = "99999.0"
    game.save_path.write_text("\n".join(rows))
    game.lines = 5.0
    assert not game.load_game()
    assert game.lines == 5.0


def test_missing_file(game):
    assert not game.load_game()
    assert game.lines == 0
    assert game.event_log == []


@pytest.mark.parametrize(
    "corrupt",
    [
        lambda rows: rows[:5],
        lambda rows: rows[:1] + ["not-a-number"] + rows[2:],
        lambda rows: rows[:7] + ["-3"] + rows[8:],
        lambda rows: [],
        lambda rows: rows[:1] + ["-500.0"] + rows[2:],
        lambda rows: rows[:1] + ["nan"] + rows[2:],
        lambda rows: rows[:2] + ["inf"] + rows[3:],
        lambda rows: rows[:6] + ["-0.5"] + rows[7:],
    ],
)
def test_malformed_save_leaves_state(game, corrupt):
    game.lines = 100.0
    game.buildings[0].count = 1
    rows = savefile.dump_lines(game)
    game.save_path.write_text("\n".join(corrupt(list(rows))))
    game.lines = 7.0
    game.buildings[0].count = 2
    assert not game.load_game()
    assert game.lines == 7.0
    assert game.buildings[0].count == 2


def test_stored_rate_is_recomputed(game):
    game.buildings[1].count = 2
    rows = savefile.dump_lines(game)
    rows[3] = "123456.0"
    game.save_path.write_text("\n".join(rows))
    assert game.load_game()
    assert game.lines_per_second == pytest.approx(2.0)


def test_save_failure_is_reported(tmp_path):
    game = Game(seed=1, save_path=tmp_path)
    assert not game.save_game()
    assert game.autosave_feedback_timer == 0


def test_load_logs_event(game):
    game.save_game(notify=False)
    assert game.load_game()
    assert game.event_log[-1] == "Progress restored"


def test_undecodable_save_leaves_state(game):
    game.save_path.write_bytes(b"\xff\xfe\x00garbage\n")
    game.lines = 7.0
    assert not game.load_game()
    assert game.lines == 7.0


def test_nan_bank_rejected_so_purchases_stay_gated(game):
    rows = savefile.dump_lines(game)
    rows[1] = "nan"
    game.save_path.write_text("\n".join(rows))
    assert not game.load_game()
    assert game.lines == 0
    assert not game.buy_building(len(game.buildings) - 1)
