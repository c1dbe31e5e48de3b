#!/usr/bin/env python3
"""
Unit tests for RandomSource
Tests seeding, draw ranges and weighted sampling
"""

import unittest
import random
import os
import sys

import numpy as np

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from scalar_ga import RandomSource, InvalidConfiguration


class TestRandomSource(unittest.TestCase):
    """Test RandomSource class functionality"""

    def setUp(self):
        """Set up test fixtures"""
        self.rng = RandomSource(42)

    def test_same_seed_same_sequence(self):
        """Test two sources with the same seed produce identical draws"""
        other = RandomSource(42)
        draws_a = [self.rng.random() for _ in range(5)] + list(self.rng.uniform(-1, 1, 5))
        draws_b = [other.random() for _ in range(5)] + list(other.uniform(-1, 1, 5))
        self.assertEqual(draws_a, draws_b)

    def test_different_seeds_differ(self):
        """Test different seeds give different sequences"""
        other = RandomSource(43)
        self.assertNotEqual(list(self.rng.uniform(0, 1, 10)), list(other.uniform(0, 1, 10)))

    def test_independent_of_global_random_state(self):
        """Test draws are not affected by the global random modules"""
        expected = RandomSource(7).uniform(0, 1, 5)

        random.seed(0)
        np.random.seed(0)
        source = RandomSource(7)
        random.random()
        np.random.random()
        np.testing.assert_array_equal(source.uniform(0, 1, 5), expected)

    def test_uniform_range(self):
        """Test uniform draws stay inside the interval"""
        values = self.rng.uniform(-2.0, 3.0, 1000)
        self.assertEqual(len(values), 1000)
        self.assertTrue(np.all(values >= -2.0))
        self.assertTrue(np.all(values <= 3.0))
        self.assertIsInstance(self.rng.uniform(0.0, 1.0), float)

    def test_gaussian_moments(self):
        """Test gaussian draws have roughly the requested mean and spread"""
        values = self.rng.gaussian(5.0, 2.0, 20000)
        self.assertAlmostEqual(float(np.mean(values)), 5.0, delta=0.1)
        self.assertAlmostEqual(float(np.std(values)), 2.0, delta=0.1)

    def test_gaussian_zero_stddev(self):
        """Test zero standard deviation returns the mean"""
        self.assertEqual(self.rng.gaussian(1.5, 0.0), 1.5)

    def test_gaussian_negative_stddev_rejected(self):
        """Test negative standard deviation raises"""
        with self.assertRaises(InvalidConfiguration):
            self.rng.gaussian(0.0, -1.0)

    def test_integers_range(self):
        """Test index draws stay in [0, high)"""
        values = self.rng.integers(4, 500)
        self.assertEqual(set(values.tolist()), {0, 1, 2, 3})
        self.assertIsInstance(self.rng.integers(4), int)

    def test_integers_empty_range(self):
        """Test drawing from an empty range raises"""
        with self.assertRaises(InvalidConfiguration):
            self.rng.integers(0)

    def test_permutation_prefix_distinct(self):
        """Test distinct index draws"""
        values = self.rng.permutation_prefix(5, 5)
        self.assertEqual(sorted(values.tolist()), [0, 1, 2, 3, 4])
        with self.assertRaises(InvalidConfiguration):
            self.rng.permutation_prefix(3, 4)

    def test_weighted_indices_respects_zero_weight(self):
        """Test indices with zero weight are never drawn"""
        indices = self.rng.weighted_indices([0.0, 1.0, 0.0, 3.0], 1000)
        self.assertEqual(len(indices), 1000)
        self.assertTrue(set(indices.tolist()) <= {1, 3})

    def test_weighted_indices_unnormalized(self):
        """Test weights need not sum to one"""
        indices = self.rng.weighted_indices([10.0, 30.0], 20000)
        share = float(np.mean(indices == 1))
        self.assertAlmostEqual(share, 0.75, delta=0.02)

    def test_weighted_indices_invalid_weights(self):
        """Test invalid weight vectors raise"""
        for weights in ([], [-1.0, 2.0], [0.0, 0.0], [float('nan'), 1.0]):
            with self.subTest(weights=weights):
                with self.assertRaises(InvalidConfiguration):
                    self.rng.weighted_indices(weights, 3)

    def test_seed_exposed(self):
        """Test seed is kept for reporting"""
        self.assertEqual(self.rng.seed, 42)
        self.assertIsNone(RandomSource().seed)


if __name__ == '__main__':
    unittest.main()
