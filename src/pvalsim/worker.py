"""Background worker that answers simulation request messages.

A worker owns one separate process. Each inbound message
``{"delta", "sigma", "n", "trials"}`` produces exactly one outbound message
``{"pValues": [...]}`` once the whole loop has finished. Messages posted to
the same worker are handled one at a time, in posting order.
"""

import logging
from collections.abc import Callable, Mapping
from concurrent.futures import Future, ProcessPoolExecutor
from typing import Any

import numpy as np
from pydantic import ValidationError

from pvalsim.analysis.montecarlo import run_simulation
from pvalsim.errors import InvalidMessageError, WorkerClosedError
from pvalsim.models import SimulationRequest, SimulationResponse

logger = logging.getLogger(__name__)

Message = dict[str, Any]


def parse_message(message: Mapping[str, Any]) -> SimulationRequest:
    """Read an inbound message as a simulation request.

    Raises:
        InvalidMessageError: If a field is missing or has the wrong type
    """
    try:
        return SimulationRequest.model_validate(message)
    except ValidationError as exc:
        raise InvalidMessageError(str(exc)) from exc


def handle_message(message: Mapping[str, Any], seed: int | None = None) -> Message:
    """Run the simulation described by one inbound message.

    Args:
        message: Inbound request message
        seed: Seed for the trial generator (None for fresh entropy)

    Returns:
        Outbound message with one p-value per trial
    """
    request = parse_message(message)
    p_values = run_simulation(
        request.delta,
        request.sigma,
        request.n,
        request.trials,
        rng=np.random.default_rng(seed),
    )
    return SimulationResponse(p_values=p_values).to_message()


class SimulationWorker:
    """Runs simulations off the calling thread, one message at a time."""

    def __init__(
        self,
        seed: int | None = None,
        on_message: Callable[[Message], None] | None = None,
    ):
        """Initialize the worker.

        Args:
            seed: Seed applied to every message (None for fresh entropy)
            on_message: Called with each outbound message once it is ready
        """
        self.seed = seed
        self.on_message = on_message
        self._executor: ProcessPoolExecutor | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def post_message(self, message: Mapping[str, Any]) -> "Future[Message]":
        """Dispatch one request message.

        The message is validated before it leaves the calling process.

        Args:
            message: Inbound request message

        Returns:
            Future resolving to the outbound message

        Raises:
            InvalidMessageError: If the message is not a valid request
            WorkerClosedError: If the worker was terminated
        """
        if self._closed:
            raise WorkerClosedError("cannot post to a terminated worker")

        try:
            request = parse_message(message)
        except InvalidMessageError:
            logger.warning("Rejected malformed simulation message: %r", message)
            raise

        if self._executor is None:
            self._executor = ProcessPoolExecutor(max_workers=1)

        logger.debug("Posting simulation request: %s", request)
        future = self._executor.submit(handle_message, request.model_dump(), self.seed)
        future.add_done_callback(self._deliver)
        return future

    def _deliver(self, future: "Future[Message]") -> None:
        if future.cancelled() or future.exception() is not None:
            return
        response = future.result()
        logger.debug("Simulation finished with %d p-values", len(response["pValues"]))
        if self.on_message is not None:
            self.on_message(response)

    def terminate(self) -> None:
        """Stop the worker, dropping messages that have not started."""
        self._closed = True
        if self._executor is not None:
            self._executor.shutdown(wait=False, cancel_futures=True)
            self._executor = None

    def __enter__(self) -> "SimulationWorker":
        return self

    def __exit__(self, *exc_info) -> None:
        self._closed = True
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
