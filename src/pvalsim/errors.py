"""Exceptions raised at the worker message boundary."""


class SimulationError(RuntimeError):
    """Base class for simulation dispatch failures."""

    error_code = "PVS_SIMULATION"

    def __init__(self, message: str):
        super().__init__(f"{self.error_code}: {message}")


class InvalidMessageError(SimulationError):
    """Raised when an inbound message cannot be read as a simulation request."""

    error_code = "PVS_INVALID_MESSAGE"


class WorkerClosedError(SimulationError):
    """Raised when a message is posted to a terminated worker."""

    error_code = "PVS_WORKER_CLOSED"
