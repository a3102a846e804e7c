"""Tests for the simulation driver and the Monte Carlo runner."""

import math

import numpy as np
import pytest

from pvalsim.analysis import MonteCarloRunner, SimulationResults, run_simulation
from pvalsim.models import SimulationRequest


class TestRunSimulation:
    """Length, reproducibility and calibration of the p-value loop."""

    @pytest.mark.parametrize("trials", [0, 1, 7, 100])
    def test_length_matches_trials(self, trials):
        p_values = run_simulation(0.5, 1.0, 10, trials, rng=np.random.default_rng(0))
        assert len(p_values) == trials

    def test_zero_trials_is_empty(self):
        assert run_simulation(0.0, 1.0, 30, 0) == []

    def test_negative_trials_is_empty(self):
        assert run_simulation(0.0, 1.0, 30, -5) == []

    def test_seeded_runs_reproduce(self):
        first = run_simulation(0.2, 1.5, 12, 40, rng=np.random.default_rng(123))
        second = run_simulation(0.2, 1.5, 12, 40, rng=np.random.default_rng(123))
        assert first == second

    def test_null_calibration(self):
        """Under the null about 5% of p-values fall below 0.05."""
        p_values = run_simulation(0.0, 1.0, 30, 1000, rng=np.random.default_rng(2024))
        rate = sum(p < 0.05 for p in p_values) / len(p_values)
        assert rate == pytest.approx(0.05, abs=0.03)

    def test_null_p_values_are_roughly_uniform(self):
        p_values = run_simulation(0.0, 1.0, 20, 1000, rng=np.random.default_rng(8))
        assert np.mean(p_values) == pytest.approx(0.5, abs=0.05)

    def test_large_effect_has_high_power(self):
        p_values = run_simulation(1.0, 1.0, 30, 200, rng=np.random.default_rng(4))
        rate = sum(p < 0.05 for p in p_values) / len(p_values)
        assert rate > 0.85

    def test_single_observation_groups_give_nan(self):
        p_values = run_simulation(0.0, 1.0, 1, 5, rng=np.random.default_rng(1))
        assert len(p_values) == 5
        assert all(math.isnan(p) for p in p_values)

    def test_negative_sample_size_gives_nan(self):
        p_values = run_simulation(0.0, 1.0, -3, 2, rng=np.random.default_rng(1))
        assert len(p_values) == 2
        assert all(math.isnan(p) for p in p_values)


class TestMonteCarloRunner:
    """Per-trial seeding, process fan-out and result aggregation."""

    def test_sequential_run(self):
        request = SimulationRequest(delta=0.0, sigma=1.0, n=15, trials=25)
        results = MonteCarloRunner(request, seed=42).run_quick()
        assert isinstance(results, SimulationResults)
        assert results.num_trials == 25
        assert results.seed == 42
        assert all(0.0 <= p <= 1.0 for p in results.p_values)

    def test_parallel_matches_sequential(self):
        request = SimulationRequest(delta=0.4, sigma=2.0, n=10, trials=30)
        sequential = MonteCarloRunner(request, seed=7).run(parallel=False)
        parallel = MonteCarloRunner(request, seed=7).run(
            parallel=True, max_workers=2, chunksize=4
        )
        assert parallel.p_values == sequential.p_values

    def test_same_seed_reproduces(self):
        request = SimulationRequest(delta=0.1, sigma=1.0, n=8, trials=10)
        first = MonteCarloRunner(request, seed=3).run_quick()
        second = MonteCarloRunner(request, seed=3).run_quick()
        assert first.p_values == second.p_values

    def test_random_seed_when_unset(self):
        request = SimulationRequest(delta=0.0, sigma=1.0, n=5, trials=3)
        runner = MonteCarloRunner(request)
        assert 0 <= runner.base_seed < 2**31

    def test_empty_request(self):
        request = SimulationRequest(delta=0.0, sigma=1.0, n=30, trials=0)
        results = MonteCarloRunner(request, seed=1).run()
        assert results.p_values == []
        assert results.rejection_rate() == 0.0


class TestSimulationResults:
    """Aggregate statistics over a fixed set of p-values."""

    @pytest.fixture
    def results(self):
        request = SimulationRequest(delta=0.0, sigma=1.0, n=10, trials=6)
        return SimulationResults(
            request=request,
            seed=0,
            p_values=[0.01, 0.04, 0.2, 0.5, 0.9, math.nan],
        )

    def test_nan_count(self, results):
        assert results.nan_count == 1

    def test_rejection_rate_ignores_nan(self, results):
        assert results.rejection_rate(0.05) == pytest.approx(2 / 5)
        assert results.rejection_rate(0.001) == 0.0

    def test_histogram(self, results):
        counts, edges = results.p_value_histogram(bins=10)
        assert counts.sum() == 5
        assert edges[0] == 0.0
        assert edges[-1] == 1.0
        assert counts[0] == 2

    def test_summary(self, results):
        summary = results.summary()
        assert summary["trials"] == 6
        assert summary["nan_count"] == 1
        assert summary["rejection_rate"] == pytest.approx(0.4)
        assert summary["median_p_value"] == pytest.approx(0.2)
        assert summary["mean_p_value"] == pytest.approx(np.mean([0.01, 0.04, 0.2, 0.5, 0.9]))

    def test_summary_of_empty_results(self):
        request = SimulationRequest(delta=0.0, sigma=1.0, n=10, trials=0)
        summary = SimulationResults(request=request, seed=0).summary()
        assert summary["trials"] == 0
        assert math.isnan(summary["mean_p_value"])
