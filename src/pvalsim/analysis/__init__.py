"""Monte Carlo analysis and statistics."""

from .montecarlo import MonteCarloRunner, SimulationResults, run_simulation

__all__ = ["MonteCarloRunner", "SimulationResults", "run_simulation"]
