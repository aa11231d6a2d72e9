"""
Game Engine Tests

Tests for the screen state machine, the per-tick update rule and the
scoring/high score bookkeeping.

Run with: pytest tests/test_game_engine.py -v
"""

import random

import pytest

from game.balloon import Balloon
from game.constants import CLAW_START_X, CLAW_Y
from game.game_engine import GameEngine, GameState
from game.high_scores import HighScoreTracker


def tick_until(engine, condition, limit=10000):
    """Run ticks until condition() holds; return the collected events."""
    history = []
    while not condition():
        assert len(history) < limit, "condition never reached"
        history.append(engine.update())
    return history


def drop_arrow(engine):
    """Fire and tick until the arrow is retracted again."""
    assert engine.fire()
    return tick_until(engine, lambda: not engine.arrow.dropping)


@pytest.fixture
def engine():
    return GameEngine(800, 600, balloon_count=10, claw_speed=4, rng=random.Random(3))


@pytest.fixture
def playing(engine):
    engine.start_or_restart()
    return engine


class TestCreation:
    """Tests for a freshly created engine."""

    def test_starts_on_start_screen(self, engine):
        assert engine.state == GameState.START
        assert engine.score == 0
        assert engine.high_score == 0
        assert engine.arrow.dropping is False

    def test_initial_layout_spawned(self, engine):
        assert len(engine.balloons) == 10

    def test_invalid_viewport_rejected(self):
        with pytest.raises(ValueError):
            GameEngine(0, 600)
        engine = GameEngine(800, 600)
        with pytest.raises(ValueError):
            engine.set_viewport(800, -1)

    def test_negative_balloon_count_rejected(self):
        with pytest.raises(ValueError):
            GameEngine(800, 600, balloon_count=-1)


class TestNonPlayingTicks:
    """Ticks on the start and end screens change nothing."""

    def test_start_screen_tick_is_noop(self, engine):
        before = engine.get_game_state()

        events = engine.update()

        assert engine.get_game_state() == before
        assert events['cues'] == []
        assert events['screen_changed'] is False

    def test_game_over_tick_is_noop(self, playing):
        playing.session.balloons = [Balloon(700, 300, 'violet')]
        drop_arrow(playing)
        assert playing.state == GameState.GAME_OVER
        before = playing.get_game_state()

        for _ in range(10):
            playing.update()

        assert playing.get_game_state() == before


class TestClawMovement:
    """Tests for the claw sweep while the arrow is retracted."""

    def test_moves_by_speed(self, playing):
        playing.update()
        assert playing.claw.x == CLAW_START_X + 4
        assert playing.claw.direction == 1

    def test_claw_height_fixed(self, playing):
        for _ in range(50):
            playing.update()
        assert playing.claw.y == CLAW_Y

    def test_bounces_off_right_edge_inclusive(self, playing):
        playing.claw.x = 796
        playing.update()

        assert playing.claw.x == 800
        assert playing.claw.direction == -1

        playing.update()
        assert playing.claw.x == 796

    def test_bounces_past_right_edge(self, playing):
        playing.claw.x = 798
        playing.update()

        assert playing.claw.x == 802
        assert playing.claw.direction == -1

    def test_bounces_off_left_edge(self, playing):
        playing.claw.x = 2
        playing.claw.direction = -1
        playing.update()

        assert playing.claw.x == -2
        assert playing.claw.direction == 1

        playing.update()
        assert playing.claw.x == 2

    def test_step_rule_over_many_ticks(self, playing):
        """x' = x + speed*dir, flipping iff x' is on or past a bound."""
        for _ in range(1000):
            x, direction = playing.claw.x, playing.claw.direction
            playing.update()
            expected = x + 4 * direction
            assert playing.claw.x == expected
            flipped = expected <= 0 or expected >= 800
            assert playing.claw.direction == (-direction if flipped else direction)

    def test_claw_frozen_while_dropping(self, playing):
        playing.update()
        x = playing.claw.x
        playing.fire()

        playing.update()

        assert playing.claw.x == x

    def test_follows_viewport_resize(self, playing):
        playing.set_viewport(100, 600)
        playing.claw.x = 96
        playing.update()

        assert playing.claw.direction == -1


class TestFire:
    """Tests for the fire() action."""

    def test_fire_drops_from_claw(self, playing):
        assert playing.fire() is True
        assert playing.arrow.dropping is True
        assert playing.arrow.y == playing.claw.y

    def test_second_fire_ignored(self, playing):
        playing.fire()
        playing.update()
        y = playing.arrow.y

        assert playing.fire() is False
        assert playing.arrow.y == y

    def test_fire_ignored_off_screen(self, engine):
        assert engine.fire() is False
        assert engine.arrow.dropping is False

    def test_arrow_steps_by_five(self, playing):
        playing.session.balloons = [Balloon(700, 500, 'violet')]
        playing.fire()

        playing.update()
        assert playing.arrow.y == CLAW_Y + 5
        playing.update()
        assert playing.arrow.y == CLAW_Y + 10


class TestScoring:
    """Tests for hits, wins and losses."""

    def test_hit_scores_and_retracts(self, playing):
        playing.session.balloons = [
            Balloon(CLAW_START_X, 200, 'violet'),
            Balloon(700, 200, 'skyblue'),
        ]

        history = drop_arrow(playing)

        assert playing.score == 10
        assert playing.state == GameState.PLAYING
        assert playing.arrow.y == playing.claw.y
        assert len(playing.balloons) == 1
        assert history[-1]['cues'] == ['pop']
        assert history[-1]['balloons_popped'] == 1
        assert history[-1]['score_change'] == 10

    def test_overlapping_balloons_pop_together(self, playing):
        playing.session.balloons = [
            Balloon(CLAW_START_X, 200, 'violet'),
            Balloon(CLAW_START_X + 5, 200, 'skyblue'),
            Balloon(700, 200, 'lightcyan'),
        ]

        history = drop_arrow(playing)

        assert playing.score == 20
        assert history[-1]['balloons_popped'] == 2
        assert history[-1]['cues'] == ['pop']

    def test_miss_ends_game(self, playing):
        playing.session.balloons = [Balloon(700, 300, 'violet')]

        history = drop_arrow(playing)

        assert playing.state == GameState.GAME_OVER
        assert playing.arrow.dropping is False
        assert history[-1]['cues'] == ['loss']
        assert history[-1]['screen_changed'] is True
        # 10 + 5 * 119 = 605 is the first position past the bottom
        assert len(history) == 119

    def test_loss_updates_high_score(self, playing):
        playing.session.balloons = [
            Balloon(CLAW_START_X, 200, 'violet'),
            Balloon(700, 300, 'skyblue'),
        ]
        drop_arrow(playing)
        drop_arrow(playing)

        assert playing.state == GameState.GAME_OVER
        assert playing.score == 10
        assert playing.high_score == 10

    def test_clearing_board_wins(self, playing):
        playing.session.balloons = [Balloon(CLAW_START_X, 200, 'violet')]

        history = drop_arrow(playing)

        assert playing.state == GameState.WON
        assert playing.high_score == 10
        assert history[-1]['cues'] == ['pop', 'win']
        assert playing.arrow.dropping is False

    def test_win_beats_loss_in_same_tick(self):
        engine = GameEngine(800, 100, balloon_count=1)
        engine.start_or_restart()
        # First overlap is at y=105, already past the bottom
        engine.session.balloons = [Balloon(CLAW_START_X, 120, 'violet')]

        history = drop_arrow(engine)

        assert engine.arrow.y == CLAW_Y
        assert engine.state == GameState.WON
        assert history[-1]['cues'] == ['pop', 'win']

    def test_high_score_never_decreases(self):
        tracker = HighScoreTracker()
        engine = GameEngine(800, 600, balloon_count=3, high_scores=tracker)
        highs = []

        for hits in [2, 0, 3, 1]:
            engine.restart_and_resume()
            engine.session.balloons = (
                [Balloon(CLAW_START_X, 100 + 50 * i, 'violet') for i in range(hits)]
                + [Balloon(700, 300, 'skyblue')]
            )
            for _ in range(hits):
                drop_arrow(engine)
            drop_arrow(engine)
            assert engine.state == GameState.GAME_OVER
            highs.append(engine.high_score)

        assert highs == [20, 20, 30, 30]
        assert tracker.best == 30


class TestRestartFlows:
    """Tests for the start/restart actions."""

    def _lose(self, engine):
        engine.session.balloons = [Balloon(700, 300, 'violet')]
        drop_arrow(engine)
        assert engine.state == GameState.GAME_OVER

    def test_start_enters_playing(self, engine):
        assert engine.start_or_restart() is True
        assert engine.state == GameState.PLAYING

    def test_start_ignored_while_playing(self, playing):
        playing.update()
        x = playing.claw.x

        assert playing.start_or_restart() is False
        assert playing.claw.x == x

    def test_reset_from_game_over(self, playing):
        self._lose(playing)
        playing.claw.direction = -1

        assert playing.start_or_restart() is True

        assert playing.state == GameState.PLAYING
        assert playing.score == 0
        assert playing.arrow.dropping is False
        assert playing.arrow.y == playing.claw.y
        assert len(playing.balloons) == 10
        assert playing.claw.x == CLAW_START_X
        assert playing.claw.direction == 1

    def test_reset_regenerates_layout(self, playing):
        old = list(playing.balloons)
        self._lose(playing)

        playing.start_or_restart()

        assert not any(a is b for a in old for b in playing.balloons)

    def test_reset_uses_current_viewport(self, playing):
        self._lose(playing)
        playing.set_viewport(200, 100)

        playing.start_or_restart()

        for b in playing.balloons:
            assert 20 <= b.x <= 180
            assert 30 <= b.y <= 80

    def test_two_step_restart(self, playing):
        self._lose(playing)

        assert playing.request_restart() is True
        assert playing.state == GameState.START
        assert playing.start_or_restart() is True
        assert playing.state == GameState.PLAYING

    def test_request_restart_only_from_finished_game(self, engine):
        assert engine.request_restart() is False
        engine.start_or_restart()
        assert engine.request_restart() is False
        assert engine.state == GameState.PLAYING

    def test_restart_and_resume_from_won(self, playing):
        playing.session.balloons = [Balloon(CLAW_START_X, 200, 'violet')]
        drop_arrow(playing)
        assert playing.state == GameState.WON

        assert playing.restart_and_resume() is True

        assert playing.state == GameState.PLAYING
        assert playing.score == 0
        assert playing.high_score == 10

    def test_restart_and_resume_from_start(self, engine):
        assert engine.restart_and_resume() is True
        assert engine.state == GameState.PLAYING

    def test_restart_and_resume_ignored_while_playing(self, playing):
        assert playing.restart_and_resume() is False


class TestRendering:
    """Tests for the render snapshot and overlay text."""

    def test_start_overlay(self, engine):
        assert engine.get_overlay_lines() == [
            "CLAW OF CODE", "", "Tap anywhere or press ENTER to Start"]

    def test_game_over_overlay(self, playing):
        playing.session.balloons = [Balloon(700, 300, 'violet')]
        drop_arrow(playing)

        assert playing.get_overlay_lines() == [
            "GAME OVER", "Score: 0 | High: 0", "Tap or press R to Restart"]

    def test_won_overlay(self, playing):
        playing.session.balloons = [Balloon(CLAW_START_X, 200, 'violet')]
        drop_arrow(playing)

        assert playing.get_overlay_lines() == [
            "YOU WON!", "Score: 10 | High: 10", "Tap or press R to Restart"]

    def test_no_overlay_while_playing(self, playing):
        assert playing.get_overlay_lines() == []

    def test_snapshot_contents(self, playing):
        playing.session.balloons = [Balloon(50, 60, 'violet')]

        snapshot = playing.get_game_state()

        assert snapshot['state'] == GameState.PLAYING
        assert snapshot['claw'] == {'x': CLAW_START_X, 'y': CLAW_Y}
        assert snapshot['arrow'] == {'dropping': False, 'y': CLAW_Y}
        assert snapshot['balloons'] == [{'x': 50, 'y': 60, 'color': 'violet'}]
        assert snapshot['score'] == 0
        assert snapshot['high_score'] == 0
        assert snapshot['viewport'] == (800, 600)


def test_single_balloon_scenario():
    """Sweep to a lone balloon, fire once and win."""
    engine = GameEngine(800, 600, balloon_count=1, claw_speed=4)
    engine.start_or_restart()
    engine.session.balloons = [Balloon(400, 300, 'hotpink')]

    tick_until(engine, lambda: engine.claw.x >= 375)
    assert engine.claw.x == 376
    assert abs(engine.claw.x - 400) < 25

    history = drop_arrow(engine)

    # 10 + 5 * 55 = 285 is the first step within 17.5 of 300
    assert len(history) == 55
    assert engine.score == 10
    assert engine.state == GameState.WON
    assert engine.high_score == 10
    assert history[-1]['cues'] == ['pop', 'win']
