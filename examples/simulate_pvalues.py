#!/usr/bin/env python3
"""Example: Simulate p-values of repeated two-sample t-tests.

Draws two groups per trial, one from Normal(0, sigma) and one from
Normal(delta, sigma), and reports the distribution of the resulting
p-values. With delta = 0 the rejection rate estimates the type I error,
otherwise the power of the test.

Usage:
    python examples/simulate_pvalues.py [--delta D] [--sigma S] [-n N] [--trials T]

Examples:
    python examples/simulate_pvalues.py --delta 0 --trials 1000
    python examples/simulate_pvalues.py --delta 0.5 -n 50 --worker
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pvalsim.analysis import MonteCarloRunner, SimulationResults
from pvalsim.models import SimulationRequest
from pvalsim.output import ConsoleOutput
from pvalsim.worker import SimulationWorker


def main():
    parser = argparse.ArgumentParser(description="Simulate t-test p-values with Monte Carlo")
    parser.add_argument(
        "--delta",
        type=float,
        default=0.0,
        help="True mean difference (default: 0.0)",
    )
    parser.add_argument(
        "--sigma",
        type=float,
        default=1.0,
        help="Shared standard deviation (default: 1.0)",
    )
    parser.add_argument(
        "-n",
        type=int,
        default=30,
        help="Sample size per group (default: 30)",
    )
    parser.add_argument(
        "--trials",
        "-t",
        type=int,
        default=1000,
        help="Number of simulated experiments (default: 1000)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed (default: 42)",
    )
    parser.add_argument(
        "--alpha",
        type=float,
        default=0.05,
        help="Significance level (default: 0.05)",
    )
    parser.add_argument(
        "--parallel",
        action="store_true",
        default=True,
        help="Use parallel processing (default: True)",
    )
    parser.add_argument(
        "--no-parallel",
        action="store_false",
        dest="parallel",
        help="Disable parallel processing",
    )
    parser.add_argument(
        "--worker",
        action="store_true",
        help="Run through a background worker using the message protocol",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    request = SimulationRequest(
        delta=args.delta,
        sigma=args.sigma,
        n=args.n,
        trials=args.trials,
    )

    print("T-Test P-Value Simulation")
    print(f"{'=' * 40}")
    print(f"Delta: {request.delta}")
    print(f"Sigma: {request.sigma}")
    print(f"N per group: {request.n}")
    print(f"Trials: {request.trials}")
    print()

    if args.worker:
        print("Posting request to background worker...")
        with SimulationWorker(seed=args.seed) as worker:
            response = worker.post_message(request.model_dump()).result()
        results = SimulationResults(
            request=request,
            seed=args.seed,
            p_values=response["pValues"],
        )
    else:
        runner = MonteCarloRunner(request, seed=args.seed)
        results = runner.run(parallel=args.parallel)

    ConsoleOutput.print_simulation_summary(results, alpha=args.alpha)
    return 0


if __name__ == "__main__":
    sys.exit(main())
