"""
Unit tests for the game loop driver

Tests the Running -> Ended state machine, frame timing, render pushes and restart.
"""

import pytest

from crazy_pong.core.entities import GamePhase, PaddleSide
from crazy_pong.core.game_loop import GameLoop
from crazy_pong.core.physics import PhysicsEngine
from crazy_pong.utils.config import GameConfig


@pytest.fixture
def game_loop(fraction_random, fake_renderer, clock):
    # Heading 0: the ball starts flying right at 150 px/s
    engine = PhysicsEngine(rng=fraction_random(0.0))
    return GameLoop(engine, fake_renderer, clock=clock)


class TestGameLoop:
    """Test the frame driver"""

    def test_starts_running(self, game_loop):
        assert game_loop.running
        assert game_loop.state.ball.position.to_tuple() == (400.0, 300.0)

    def test_tick_uses_elapsed_wall_clock(self, game_loop, clock, fake_renderer):
        clock.now = 1000.0

        result = game_loop.tick()

        assert game_loop.state.ball.position.x == pytest.approx(550.0)
        assert len(fake_renderer.frames) == 1
        snapshot = fake_renderer.frames[0]
        assert snapshot is result["snapshot"]
        assert snapshot.ball == pytest.approx((540.0, 290.0, 20.0, 20.0, 10.0))
        assert snapshot.paddles[PaddleSide.LEFT] == pytest.approx((10.0, 260.0, 10.0, 80.0))
        assert snapshot.speed == 150

    def test_consecutive_ticks_use_deltas(self, game_loop, clock):
        clock.now = 500.0
        game_loop.tick()
        clock.now = 600.0
        game_loop.tick()

        # 600 ms in total at 150 px/s
        assert game_loop.state.ball.position.x == pytest.approx(490.0)
        assert game_loop.frame_count == 2

    def test_game_over_is_shown_once(self, game_loop, clock, fake_renderer):
        clock.now = 3000.0

        result = game_loop.tick()

        assert result["events"]["game_over"] is True
        assert game_loop.state.phase == GamePhase.ENDED
        assert len(fake_renderer.game_over_frames) == 1
        assert fake_renderer.frames == []

        clock.now = 4000.0
        game_loop.tick()
        game_loop.tick()

        assert len(fake_renderer.game_over_frames) == 1
        assert fake_renderer.frames == []
        assert game_loop.frame_count == 1

    def test_no_physics_after_end(self, game_loop, clock):
        clock.now = 3000.0
        game_loop.tick()
        position = game_loop.state.ball.position.copy()

        clock.now = 9000.0
        result = game_loop.tick()

        assert result["events"] == {}
        assert game_loop.state.ball.position == position
        assert result["snapshot"].phase == GamePhase.ENDED

    def test_restart_reinitialises_everything(self, game_loop, clock):
        game_loop.move_paddles("up")
        game_loop.state.collision_count = 7
        clock.now = 3000.0
        game_loop.tick()
        old_state = game_loop.state

        game_loop.restart()

        assert game_loop.state is not old_state
        assert game_loop.running
        assert game_loop.state.collision_count == 0
        assert game_loop.state.paddle_ratio == pytest.approx(260 / 600)
        assert game_loop.state.ball.position.to_tuple() == (400.0, 300.0)
        assert game_loop.state.ball.speed == 150.0
        assert game_loop.last_update_time == 3000.0
        assert game_loop.frame_count == 0

    def test_restart_rebinds_input(self, game_loop):
        game_loop.restart()

        game_loop.move_paddles("down")

        assert game_loop.state.paddle_ratio == pytest.approx(270 / 600)

    def test_input_uses_container_size(self, game_loop, fake_renderer):
        fake_renderer.resize(1600, 1200)

        game_loop.point_paddles(600)

        assert game_loop.state.paddle_ratio * 1200 == pytest.approx(520.0)

    def test_input_ignored_after_end(self, game_loop, clock):
        clock.now = 3000.0
        game_loop.tick()
        ratio = game_loop.state.paddle_ratio

        assert game_loop.move_paddles("down") == ratio
        assert game_loop.point_paddles(0) == ratio
        assert game_loop.state.paddle_ratio == ratio

    def test_get_stats(self, game_loop, clock):
        clock.now = 16.0
        game_loop.tick()

        stats = game_loop.get_stats()

        assert stats["bounce_count"] == 0
        assert stats["speed"] == 150
        assert stats["frames"] == 1
        assert stats["time_elapsed"] == pytest.approx(0.016)

    def test_input_follows_engine_config(self, fraction_random, fake_renderer, clock):
        """Paddle input uses the same configuration as the physics engine"""
        config = GameConfig(KEY_MOVE_DISTANCE=50.0)
        engine = PhysicsEngine(rng=fraction_random(0.0), config=config)
        game_loop = GameLoop(engine, fake_renderer, clock=clock)

        game_loop.move_paddles("down")

        assert game_loop.state.paddle_ratio * 600 == pytest.approx(310.0)

        game_loop.restart()
        game_loop.move_paddles("up")

        assert game_loop.state.paddle_ratio * 600 == pytest.approx(210.0)
