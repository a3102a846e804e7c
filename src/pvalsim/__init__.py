"""Monte Carlo p-values for repeated two-sample t-tests."""

from .analysis import MonteCarloRunner, SimulationResults, run_simulation
from .models import SimulationRequest, SimulationResponse, TestResult
from .stats import student_t_cdf, t_test_p_value, two_sample_t_test
from .worker import SimulationWorker, handle_message

__all__ = [
    "MonteCarloRunner",
    "SimulationRequest",
    "SimulationResponse",
    "SimulationResults",
    "SimulationWorker",
    "TestResult",
    "handle_message",
    "run_simulation",
    "student_t_cdf",
    "t_test_p_value",
    "two_sample_t_test",
]
