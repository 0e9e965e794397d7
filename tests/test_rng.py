"""
Tests for the serve direction RNG.
"""

from collections import Counter

from tiltball.core.rng import ServeRng


class TestServeRng:
    """Test the uniform two-way pick."""

    def test_deterministic_with_seed(self):
        """Same seed should produce same sequence."""
        r1 = ServeRng(seed=42)
        r2 = ServeRng(seed=42)

        assert [r1.pick_direction(4) for _ in range(50)] == \
            [r2.pick_direction(4) for _ in range(50)]

    def test_only_two_values(self):
        """Picks are always +speed or -speed."""
        rng = ServeRng(seed=1)
        assert {rng.pick_direction(4) for _ in range(200)} == {-4, 4}

    def test_roughly_uniform(self):
        """Both directions appear about equally often."""
        rng = ServeRng(seed=42)
        counts = Counter(rng.pick_direction(1.0) for _ in range(2000))
        assert 800 < counts[1.0] < 1200
        assert 800 < counts[-1.0] < 1200

    def test_reset_restores_sequence(self):
        """Reset with same seed should restore sequence."""
        rng = ServeRng(seed=42)
        initial = [rng.pick_direction(4) for _ in range(10)]

        rng.reset(seed=42)

        assert [rng.pick_direction(4) for _ in range(10)] == initial
        assert rng.seed == 42

    def test_reset_without_seed_continues(self):
        """Reset without a seed keeps drawing from the same stream."""
        rng = ServeRng(seed=42)
        reference = ServeRng(seed=42)
        first = [rng.pick_direction(4) for _ in range(10)]
        rng.reset()
        rest = [rng.pick_direction(4) for _ in range(10)]

        assert first + rest == [reference.pick_direction(4) for _ in range(20)]
