#!/usr/bin/env python3
"""
Unit tests for GA Mutation
Tests the Gaussian mutation function and operator
"""

import unittest
import os
import sys

import numpy as np

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from scalar_ga import mutate, GaussianMutation, RandomSource, InvalidConfiguration


class TestMutateFunction(unittest.TestCase):
    """Test the mutate() function"""

    def setUp(self):
        """Set up test fixtures"""
        self.rng = RandomSource(42)
        self.genomes = [-7.5, -1.0, 0.0, 0.25, 3.0, 9.99]

    def test_zero_probability_is_identity(self):
        """Test mutation_probability = 0 never changes a genome"""
        for genome in self.genomes * 50:
            self.assertEqual(mutate(genome, 0.0, -10.0, 10.0, 2.0, self.rng), genome)

    def test_certain_mutation_changes_genome(self):
        """Test mutation_probability = 1 with positive stddev always perturbs"""
        for genome in self.genomes * 50:
            self.assertNotEqual(mutate(genome, 1.0, -10.0, 10.0, 0.5, self.rng), genome)

    def test_zero_stddev_is_identity(self):
        """Test a zero step leaves the genome unchanged"""
        for genome in self.genomes:
            self.assertEqual(mutate(genome, 1.0, -10.0, 10.0, 0.0, self.rng), genome)

    def test_mutation_rate_observed(self):
        """Test the fraction of mutated genomes matches the probability"""
        results = [mutate(1.0, 0.3, -10.0, 10.0, 1.0, self.rng) for _ in range(10000)]
        mutated = sum(1 for r in results if r != 1.0)
        self.assertAlmostEqual(mutated / 10000, 0.3, delta=0.02)

    def test_perturbation_distribution(self):
        """Test perturbations are zero-mean with the configured spread"""
        steps = np.array([mutate(0.0, 1.0, -10.0, 10.0, 0.5, self.rng) for _ in range(20000)])
        self.assertAlmostEqual(float(steps.mean()), 0.0, delta=0.02)
        self.assertAlmostEqual(float(steps.std()), 0.5, delta=0.02)

    def test_unclamped_can_leave_bounds(self):
        """Test genomes are not clamped by default"""
        results = [mutate(0.9, 1.0, 0.0, 1.0, 5.0, self.rng) for _ in range(200)]
        self.assertTrue(any(r > 1.0 or r < 0.0 for r in results))

    def test_clamped_stays_in_bounds(self):
        """Test clamping keeps genomes inside the bounds"""
        results = [mutate(0.9, 1.0, 0.0, 1.0, 5.0, self.rng, clamp_to_bounds=True)
                   for _ in range(200)]
        self.assertTrue(all(0.0 <= r <= 1.0 for r in results))
        self.assertIn(1.0, results)

    def test_invalid_parameters(self):
        """Test bad hyperparameters raise InvalidConfiguration"""
        bad_calls = [
            dict(mutation_probability=-0.1),
            dict(mutation_probability=1.5),
            dict(mutation_probability=float('nan')),
            dict(min_bound=5.0, max_bound=-5.0),
            dict(step_stddev=-1.0),
            dict(step_stddev=float('inf')),
        ]
        for overrides in bad_calls:
            params = dict(mutation_probability=0.5, min_bound=-1.0, max_bound=1.0, step_stddev=0.1)
            params.update(overrides)
            with self.subTest(**overrides):
                with self.assertRaises(InvalidConfiguration):
                    mutate(0.0, rng=self.rng, **params)

    def test_reproducible(self):
        """Test the same seed gives the same mutations"""
        first = [mutate(g, 0.5, -10.0, 10.0, 1.0, RandomSource(8)) for g in self.genomes]
        second = [mutate(g, 0.5, -10.0, 10.0, 1.0, RandomSource(8)) for g in self.genomes]
        self.assertEqual(first, second)


class TestGaussianMutation(unittest.TestCase):
    """Test GaussianMutation operator"""

    def setUp(self):
        """Set up test fixtures"""
        self.operator = GaussianMutation(mutation_probability=1.0, min_bound=-2.0,
                                         max_bound=2.0, step_stddev=0.25)

    def test_mutate_all_preserves_length_and_order(self):
        """Test every genome gets its own mutation in order"""
        genomes = [-1.0, 0.0, 1.0]
        rng = RandomSource(4)
        mutated = self.operator.mutate_all(genomes, rng)
        self.assertEqual(len(mutated), 3)
        # The first genome consumes the first draws of a fresh source
        self.assertEqual(mutated[0], mutate(-1.0, 1.0, -2.0, 2.0, 0.25, RandomSource(4)))
        for before, after in zip(genomes, mutated):
            self.assertNotEqual(before, after)
            self.assertLess(abs(after - before), 2.0)

    def test_matches_function(self):
        """Test the operator draws exactly like mutate()"""
        rng_a, rng_b = RandomSource(21), RandomSource(21)
        for genome in (-1.5, 0.0, 1.5):
            self.assertEqual(self.operator.mutate(genome, rng_a),
                             mutate(genome, 1.0, -2.0, 2.0, 0.25, rng_b))

    def test_identity_when_disabled(self):
        """Test a disabled operator returns its input"""
        operator = GaussianMutation(mutation_probability=0.0, step_stddev=3.0)
        genomes = [0.5, -4.0, 8.0]
        self.assertEqual(operator.mutate_all(genomes, RandomSource(0)), genomes)

    def test_validated_at_construction(self):
        """Test invalid hyperparameters fail at construction"""
        with self.assertRaises(InvalidConfiguration):
            GaussianMutation(mutation_probability=2.0)
        with self.assertRaises(InvalidConfiguration):
            GaussianMutation(min_bound=1.0, max_bound=0.0)
        with self.assertRaises(InvalidConfiguration):
            GaussianMutation(step_stddev=-0.5)


if __name__ == '__main__':
    unittest.main()
