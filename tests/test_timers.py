import pytest


def _make_cache_available(game):
    game.cache.spawn_timer = 0.1
    game.update(0.2)
    assert game.cache.available


def test_passive_accrual_uses_overclock(game):
    game.buildings[1].count = 3
    game.update_lps()
    game.buffs = 1.5
    game.update(2.0)
    assert game.lines == pytest.approx(3.0 * 2.0 * 1.5)


def test_negative_dt_ignored(game):
    game.buildings[1].count = 3
    game.update_lps()
    game.feedback_timer = 0.3
    game.update(-5.0)
    assert game.lines == 0
    assert game.feedback_timer == pytest.approx(0.3)


def test_feedback_timer_clamped_at_zero(game):
    game.register_click()
    game.update_timers(1.0)
    assert game.feedback_timer == 0


def test_autosave_after_interval(game):
    game.lines = 42.0
    game.update_timers(29.0)
    assert not game.save_path.exists()
    game.update_timers(1.0)
    assert game.save_path.exists()
    assert game.autosave_timer == 0
    assert game.autosave_feedback_timer == pytest.approx(2.0)
    game.update_timers(2.5)
    assert game.autosave_feedback_timer == 0


def test_autosave_disabled(game):
    game.autosave = False
    game.update_timers(31.0)
    assert not game.save_path.exists()
    assert game.autosave_timer == 0


def test_catch_cache_applies_boost(game):
    _make_cache_available(game)
    assert game.catch_cache()
    assert game.click_boost == 777.0
    assert game.cache_buff_timer == pytest.approx(30.0)
    assert game.feedback_timer == pytest.approx(2.0)
    assert "777x" in game.active_alert
    assert game.register_click() == pytest.approx(777.0)


def test_cache_boost_reverts_after_duration(game):
    _make_cache_available(game)
    game.catch_cache()
    game.update_timers(29.0)
    assert game.click_boost == 777.0
    game.update_timers(1.5)
    assert game.click_boost == 1.0
    assert game.cache_buff_timer == 0
    assert game.active_alert == ""
    assert game.register_click() == 1.0


def test_catch_cache_without_signal(game):
    game.cache.spawn_timer = 50.0
    assert not game.catch_cache()
    assert game.click_boost == 1.0


def test_world_advances_with_update(game):
    game.update(0.5)
    game.update(0.75)
    assert game.world.tick_count == 2
    assert game.world.elapsed == pytest.approx(1.25)
