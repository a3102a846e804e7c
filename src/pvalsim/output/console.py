"""Console output formatting."""

import math

from pvalsim.analysis.montecarlo import SimulationResults


class ConsoleOutput:
    """Formats simulation results for console display."""

    @staticmethod
    def format_p_value(p: float) -> str:
        """Format a p-value, switching to scientific notation when tiny."""
        if math.isnan(p):
            return "nan"
        if p < 1e-4:
            return f"{p:.2e}"
        return f"{p:.4f}"

    @staticmethod
    def print_simulation_summary(
        results: SimulationResults,
        alpha: float = 0.05,
        bins: int = 20,
    ) -> None:
        """Print Monte Carlo simulation summary.

        Args:
            results: Simulation results
            alpha: Significance level for the rejection rate
            bins: Number of histogram bins over [0, 1]
        """
        summary = results.summary(alpha)

        print("\n" + "=" * 60)
        print("P-VALUE SIMULATION RESULTS")
        print(
            f"(delta={summary['delta']}, sigma={summary['sigma']}, "
            f"n={summary['n']}, {summary['trials']} trials, seed={summary['seed']})"
        )
        print("=" * 60)

        rate = summary["rejection_rate"] * 100
        label = "TYPE I ERROR RATE" if summary["delta"] == 0 else "POWER"
        print(f"\n{label} (p < {alpha}): {rate:5.1f}%")
        print(f"  Mean p-value:   {ConsoleOutput.format_p_value(summary['mean_p_value'])}")
        print(f"  Median p-value: {ConsoleOutput.format_p_value(summary['median_p_value'])}")
        if summary["nan_count"]:
            print(f"  Undefined:      {summary['nan_count']} trials")

        if not results.num_trials:
            print("=" * 60)
            return

        print("\nP-VALUE DISTRIBUTION:")
        print("-" * 60)
        counts, edges = results.p_value_histogram(bins)
        total = max(int(counts.sum()), 1)
        for count, low, high in zip(counts, edges[:-1], edges[1:]):
            share = count / total * 100
            bar = "#" * int(share)
            print(f"  [{low:.2f}, {high:.2f}) {share:5.1f}% {bar}")

        print("=" * 60)
