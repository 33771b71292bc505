"""Unit tests for the shattered mosaic fill."""

import random

import pytest

from chaoticbadge.config import ShatterConfig
from chaoticbadge.core.shading import (
    shade_bounds,
    shade_channel,
    shade_color,
    shatter_block,
    working_size,
)
from chaoticbadge.domain import BLACK, DEFAULT_LEFT_COLOR, PASSING_COLOR, WHITE, Color, Group, Polygon, Rect


class TestShadeBounds:
    """Tests for shade_bounds function."""

    def test_black(self) -> None:
        """Test darkest color only brightens."""
        bot, top = shade_bounds(BLACK)
        assert bot == 0.0
        assert top == pytest.approx(67 / 3)

    def test_white(self) -> None:
        """Test lightest color only darkens."""
        bot, top = shade_bounds(WHITE)
        assert bot == pytest.approx(704 / 768)
        assert top == 1.0

    def test_mid_gray(self) -> None:
        """Test a mid color gets a symmetric range."""
        bot, top = shade_bounds(Color(100, 100, 100))
        assert bot == pytest.approx(239 / 303)
        assert top == pytest.approx(367 / 303)

    def test_chuck(self) -> None:
        """Test a zero chuck disables variation."""
        assert shade_bounds(DEFAULT_LEFT_COLOR, chuck=0) == (1.0, 1.0)


class TestShadeColor:
    """Tests for channel shading."""

    def test_shade_channel(self) -> None:
        """Test the (channel + 1) * scale rule."""
        assert shade_channel(100, 1.0) == 101
        assert shade_channel(0, 0.0) == 0
        assert shade_channel(255, 1.0) == 255
        assert shade_channel(200, 2.0) == 255

    @pytest.mark.parametrize("seed", range(5))
    def test_channels_in_range(self, seed: int) -> None:
        """Test shaded channels stay within 0-255 across the scale range."""
        rng = random.Random(seed)
        for _ in range(200):
            color = Color(rng.randrange(256), rng.randrange(256), rng.randrange(256))
            bot, top = shade_bounds(color)
            for scale in (bot, top, rng.uniform(bot, top)):
                shaded = shade_color(color, scale)
                assert all(0 <= c <= 255 for c in shaded.to_tuple())


class TestWorkingSize:
    """Tests for working_size function."""

    config = ShatterConfig()

    def test_small_block_unchanged(self) -> None:
        """Test blocks under the caps keep their size."""
        assert working_size(60, 20, self.config) == (60, 20)

    def test_wide_block(self) -> None:
        """Test wide blocks are capped by width."""
        fx, fy = working_size(240, 20, self.config)
        assert fx == pytest.approx(120)
        assert fy == pytest.approx(10)

    def test_tall_block(self) -> None:
        """Test tall blocks are capped by height."""
        fx, fy = working_size(100, 160, self.config)
        assert fx == pytest.approx(50)
        assert fy == pytest.approx(80)

    def test_both_caps(self) -> None:
        """Test the tighter cap wins and aspect ratio is kept."""
        fx, fy = working_size(300, 100, self.config)
        assert fx <= 120
        assert fy <= 80
        assert fx / fy == pytest.approx(3.0)


class TestShatterBlock:
    """Tests for shatter_block function."""

    def test_zero_width(self) -> None:
        """Test a block without area is a plain rectangle."""
        block = shatter_block(0, 20, PASSING_COLOR, rng=random.Random(1))
        assert block == Rect(width=0, height=20, fill=PASSING_COLOR)

    def test_negative_height(self) -> None:
        """Test negative sizes are clamped to zero."""
        block = shatter_block(30, -5, PASSING_COLOR, rng=random.Random(1))
        assert isinstance(block, Rect)
        assert block.height == 0

    def test_structure(self) -> None:
        """Test base rectangle followed by polygons."""
        block = shatter_block(60, 20, PASSING_COLOR, rng=random.Random(2))
        assert isinstance(block, Group)
        assert block.children[0] == Rect(width=60, height=20, fill=PASSING_COLOR)
        shards = block.children[1:]
        assert shards
        assert all(isinstance(shard, Polygon) and len(shard.points) == 3 for shard in shards)

    def test_shards_cover_true_size(self) -> None:
        """Test shard vertices are rescaled from the working size."""
        block = shatter_block(240, 20, DEFAULT_LEFT_COLOR, rng=random.Random(3))
        xs = [x for shard in block.children[1:] for x, _ in shard.points]
        ys = [y for shard in block.children[1:] for _, y in shard.points]
        assert min(xs) == pytest.approx(0)
        assert max(xs) == pytest.approx(240)
        assert min(ys) == pytest.approx(0)
        assert max(ys) == pytest.approx(20)

    def test_shard_colors_within_bounds(self) -> None:
        """Test shard fills stay near the base color."""
        color = Color(100, 100, 100)
        bot, top = shade_bounds(color)
        block = shatter_block(60, 20, color, rng=random.Random(4))
        low = shade_color(color, bot)
        high = shade_color(color, top)
        for shard in block.children[1:]:
            assert low.r <= shard.fill.r <= high.r

    def test_reproducible(self) -> None:
        """Test the same seed yields the same mosaic."""
        a = shatter_block(80, 20, PASSING_COLOR, rng=random.Random(5))
        b = shatter_block(80, 20, PASSING_COLOR, rng=random.Random(5))
        assert a == b

    def test_custom_config(self) -> None:
        """Test a denser separation produces more shards."""
        sparse = shatter_block(60, 20, PASSING_COLOR, ShatterConfig(base_sep=20), random.Random(6))
        dense = shatter_block(60, 20, PASSING_COLOR, ShatterConfig(base_sep=5), random.Random(6))
        assert len(dense.children) > len(sparse.children)
