"""Data models for p-value simulation."""

from .request import SimulationRequest
from .result import SimulationResponse, TestResult

__all__ = [
    "SimulationRequest",
    "SimulationResponse",
    "TestResult",
]
