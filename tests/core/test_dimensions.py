"""
Unit tests for dimension scaling
"""

import pytest

from crazy_pong.core.dimensions import clamp_paddle_top, compute_geometry
from crazy_pong.core.entities import PaddleSide
from crazy_pong.utils.config import game_config_tmp


class TestComputeGeometry:
    """Test geometry derived from the container size"""

    def test_reference_size(self):
        geometry = compute_geometry(800, 600, 260 / 600)

        assert geometry.scale == 1.0
        assert geometry.paddle_width == 10.0
        assert geometry.paddle_height == 80.0
        assert geometry.ball_radius == 10.0
        assert geometry.left_paddle_x == 10.0
        assert geometry.right_paddle_x == 780.0
        assert geometry.paddle_top == pytest.approx(260.0)

    @pytest.mark.parametrize("width", [400, 800, 1200, 1920])
    def test_sizes_scale_linearly_with_width(self, width):
        geometry = compute_geometry(width, 600, 0.1)
        scale = width / 800

        assert geometry.scale == pytest.approx(scale)
        assert geometry.paddle_width == pytest.approx(10 * scale)
        assert geometry.paddle_height == pytest.approx(80 * scale)
        assert geometry.ball_radius == pytest.approx(10 * scale)
        assert geometry.paddle_offset == pytest.approx(10 * scale)
        assert geometry.right_paddle_x == pytest.approx(width - 20 * scale)

    def test_height_does_not_change_scale(self):
        tall = compute_geometry(800, 1000, 0.0)
        short = compute_geometry(800, 300, 0.0)

        assert tall.scale == short.scale == 1.0
        assert tall.ball_radius == short.ball_radius

    def test_paddle_top_follows_ratio(self):
        geometry = compute_geometry(800, 1000, 0.25)

        assert geometry.paddle_top == pytest.approx(250.0)

    def test_paddle_top_clamped_to_arena(self):
        """A ratio stored for a taller arena never pushes the paddles out"""
        geometry = compute_geometry(800, 600, 0.95)

        assert geometry.paddle_top == pytest.approx(520.0)
        assert geometry.paddle_top + geometry.paddle_height <= geometry.height

    def test_is_idempotent(self):
        assert compute_geometry(1024, 768, 0.3) == compute_geometry(1024, 768, 0.3)

    def test_uses_reference_from_config(self):
        with game_config_tmp(REF_BALL_RADIUS=20.0):
            geometry = compute_geometry(800, 600, 0.0)

        assert geometry.ball_radius == 20.0

    def test_paddles(self):
        geometry = compute_geometry(1600, 1200, 0.5)

        left, right = geometry.paddles()

        assert left.side == PaddleSide.LEFT
        assert left.get_rect() == pytest.approx((20.0, 600.0, 20.0, 160.0))
        assert right.side == PaddleSide.RIGHT
        assert right.get_rect() == pytest.approx((1560.0, 600.0, 20.0, 160.0))


class TestClampPaddleTop:
    """Test paddle clamping"""

    @pytest.mark.parametrize(
        "top,expected",
        [
            (-30.0, 0.0),
            (0.0, 0.0),
            (300.0, 300.0),
            (520.0, 520.0),
            (700.0, 520.0),
        ],
    )
    def test_clamp(self, top, expected):
        geometry = compute_geometry(800, 600, 0.0)

        assert clamp_paddle_top(top, geometry) == expected
