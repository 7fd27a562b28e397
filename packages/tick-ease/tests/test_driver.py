"""Tests for the settle() step loop."""

import logging

import pytest
from tick_ease import Animatable, Tweener, TweenerGroup, settle


class Forever(Animatable):
    """Never comes to rest."""

    def update(self) -> bool:
        return True


class TestSettle:
    """Test running an animatable to rest."""

    def test_returns_moving_step_count(self):
        """Counts the calls that reported motion, snap step included."""
        tw = Tweener(0, 0.5, 0)
        tw.set_target(10)
        assert settle(tw) == 11
        assert tw.current == 10.0

    def test_already_at_rest(self):
        """An idle animatable takes zero moving steps."""
        assert settle(Tweener(3)) == 0
        assert settle(TweenerGroup()) == 0

    def test_on_step_sees_every_call(self):
        """on_step gets 1-based step numbers, including the final idle call."""
        steps = []
        tw = Tweener(0, 0.5, 0)
        tw.set_target(10)
        settle(tw, on_step=steps.append)
        assert steps == list(range(1, 13))

    def test_max_steps_caps_the_loop(self):
        """The loop stops at max_steps even if still moving."""
        assert settle(Forever(), max_steps=25) == 25

    def test_cap_is_logged(self, caplog):
        """Hitting the cap logs a warning."""
        with caplog.at_level(logging.WARNING, logger="tick_ease.driver"):
            settle(Forever(), max_steps=3)
        assert "still moving after 3 steps" in caplog.text

    @pytest.mark.parametrize("max_steps", [0, -1])
    def test_non_positive_max_steps_raises(self, max_steps):
        with pytest.raises(ValueError, match="max_steps must be positive"):
            settle(Forever(), max_steps=max_steps)

    def test_partial_settle_resumes(self):
        """A capped run can be continued later."""
        tw = Tweener(0, 0.5, 0)
        tw.set_target(10)
        assert settle(tw, max_steps=2) == 2
        assert tw.current == 7.5
        assert settle(tw) == 9
        assert tw.current == 10.0
