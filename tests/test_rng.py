"""
Tests for the random source.
"""

import unittest
import numpy as np

from bitga.rng import RandomSource


class TestRandomSource(unittest.TestCase):
    """Test uniform integers and coin flips."""

    def test_randint_range(self):
        rng = RandomSource(1)
        draws = [rng.randint(7) for _ in range(2000)]
        self.assertEqual(min(draws), 0)
        self.assertEqual(max(draws), 6)

    def test_randint_zero(self):
        rng = RandomSource(1)
        self.assertEqual(rng.randint(0), 0)

    def test_same_seed_same_stream(self):
        first = RandomSource(42)
        second = RandomSource(42)
        self.assertEqual([first.randint(1000) for _ in range(50)],
                         [second.randint(1000) for _ in range(50)])
        np.testing.assert_array_equal(first.flips(30, 100),
                                      second.flips(30, 100))

    def test_time_seed(self):
        rng = RandomSource()
        self.assertIsInstance(rng.seed, int)

    def test_flip_extremes(self):
        rng = RandomSource(2)
        self.assertTrue(all(rng.flip(100) for _ in range(100)))
        self.assertFalse(any(rng.flip(0) for _ in range(100)))

    def test_flip_boundary_is_inclusive(self):
        # A draw from 0..99 is always <= 99
        rng = RandomSource(2)
        self.assertTrue(all(rng.flip(99) for _ in range(500)))

    def test_flip_rate(self):
        rng = RandomSource(9)
        hits = sum(rng.flip(30) for _ in range(5000))
        self.assertGreater(hits, 1300)
        self.assertLess(hits, 1800)

    def test_flips(self):
        rng = RandomSource(4)
        outcome = rng.flips(50, 1000)
        self.assertEqual(outcome.shape, (1000,))
        self.assertEqual(outcome.dtype, bool)
        self.assertTrue(400 < outcome.sum() < 600)
        self.assertTrue(rng.flips(100, 10).all())
        self.assertFalse(rng.flips(0, 10).any())


if __name__ == '__main__':
    unittest.main()
