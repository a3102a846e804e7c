"""Monte Carlo p-value simulation runner and statistics."""

import logging
import math
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from pvalsim.models import SimulationRequest
from pvalsim.stats.sampler import NormalSampler
from pvalsim.stats.ttest import t_test_p_value

logger = logging.getLogger(__name__)


def simulate_trial(
    sampler: NormalSampler,
    delta: float,
    sigma: float,
    n: int,
) -> float:
    """Draw one null and one shifted sample and test them.

    Args:
        sampler: Source of normal variates
        delta: Mean of the second population
        sigma: Standard deviation of both populations
        n: Sample size per group

    Returns:
        Two-sided p-value of the pooled t-test
    """
    size = max(n, 0)
    group_a = sampler.sample(0.0, sigma, size)
    group_b = sampler.sample(delta, sigma, size)
    return t_test_p_value(group_a, group_b)


def run_simulation(
    delta: float,
    sigma: float,
    n: int,
    trials: int,
    rng: np.random.Generator | None = None,
) -> list[float]:
    """Run repeated t-tests on synthetic samples.

    All trials share one generator, so a seeded ``rng`` reproduces the
    sequence exactly.

    Args:
        delta: True mean difference under the alternative
        sigma: Shared standard deviation
        n: Sample size per group
        trials: Number of repetitions
        rng: Random number generator (creates new if None)

    Returns:
        One p-value per trial, in trial order
    """
    sampler = NormalSampler(rng)
    return [simulate_trial(sampler, delta, sigma, n) for _ in range(trials)]


def _run_single_trial(args: tuple) -> float:
    """Run a single trial with its own seed (for multiprocessing).

    Args:
        args: Tuple of (delta, sigma, n, seed)

    Returns:
        P-value of the trial
    """
    delta, sigma, n, seed = args
    sampler = NormalSampler(np.random.default_rng(seed))
    return simulate_trial(sampler, delta, sigma, n)


@dataclass
class SimulationResults:
    """Results from a Monte Carlo p-value simulation."""

    request: SimulationRequest
    seed: int
    p_values: list[float] = field(default_factory=list)
    elapsed: float = 0.0

    @property
    def num_trials(self) -> int:
        """Number of p-values produced."""
        return len(self.p_values)

    @property
    def nan_count(self) -> int:
        """Trials whose p-value is undefined."""
        return sum(1 for p in self.p_values if math.isnan(p))

    def _finite(self) -> np.ndarray:
        values = np.asarray(self.p_values, dtype=np.float64)
        return values[np.isfinite(values)]

    def rejection_rate(self, alpha: float = 0.05) -> float:
        """Fraction of defined p-values below alpha.

        With ``delta == 0`` this is the empirical type I error rate,
        otherwise the empirical power.
        """
        finite = self._finite()
        if finite.size == 0:
            return 0.0
        return float(np.mean(finite < alpha))

    def p_value_histogram(self, bins: int = 20) -> tuple[np.ndarray, np.ndarray]:
        """Histogram of p-values over [0, 1].

        Returns:
            Tuple of (counts, bin_edges)
        """
        return np.histogram(self._finite(), bins=bins, range=(0.0, 1.0))

    def summary(self, alpha: float = 0.05) -> dict[str, Any]:
        """Aggregate statistics of the run."""
        finite = self._finite()
        return {
            "trials": self.num_trials,
            "delta": self.request.delta,
            "sigma": self.request.sigma,
            "n": self.request.n,
            "seed": self.seed,
            "alpha": alpha,
            "rejection_rate": self.rejection_rate(alpha),
            "mean_p_value": float(np.mean(finite)) if finite.size else math.nan,
            "median_p_value": float(np.median(finite)) if finite.size else math.nan,
            "nan_count": self.nan_count,
        }


class MonteCarloRunner:
    """Runs simulated t-test experiments, optionally across processes."""

    def __init__(
        self,
        request: SimulationRequest,
        seed: int | None = None,
    ):
        """Initialize Monte Carlo runner.

        Args:
            request: Simulation parameters
            seed: Base random seed; trial i uses ``seed + i``
        """
        self.request = request
        self.base_seed = (
            seed if seed is not None else int(np.random.default_rng().integers(0, 2**31))
        )

    def run(
        self,
        parallel: bool = True,
        max_workers: int | None = None,
        chunksize: int = 64,
    ) -> SimulationResults:
        """Run all trials of the request.

        Each trial owns a generator seeded from its index, so the parallel
        and sequential paths return identical p-values in the same order.

        Args:
            parallel: Whether to use parallel processing
            max_workers: Maximum parallel workers (None = CPU count)
            chunksize: Trials handed to a worker at a time

        Returns:
            SimulationResults with the p-values in trial order
        """
        request = self.request
        args_list = [
            (request.delta, request.sigma, request.n, self.base_seed + i)
            for i in range(max(request.trials, 0))
        ]

        logger.info(
            "Simulating %d trials (delta=%s, sigma=%s, n=%d, seed=%d)",
            len(args_list),
            request.delta,
            request.sigma,
            request.n,
            self.base_seed,
        )
        start = time.perf_counter()

        if parallel and len(args_list) > 1:
            logger.debug("Dispatching to process pool (max_workers=%s)", max_workers)
            with ProcessPoolExecutor(max_workers=max_workers) as executor:
                p_values = list(
                    executor.map(_run_single_trial, args_list, chunksize=chunksize)
                )
        else:
            p_values = [_run_single_trial(args) for args in args_list]

        elapsed = time.perf_counter() - start
        logger.info("Simulation completed in %.2fs", elapsed)

        return SimulationResults(
            request=request,
            seed=self.base_seed,
            p_values=p_values,
            elapsed=elapsed,
        )

    def run_quick(self) -> SimulationResults:
        """Run without parallelization.

        Useful for testing or when running in environments
        where multiprocessing is problematic.
        """
        return self.run(parallel=False)
