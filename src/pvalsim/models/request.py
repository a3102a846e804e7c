"""Simulation request parameters."""

from pydantic import BaseModel, Field


class SimulationRequest(BaseModel):
    """Parameters for one batch of simulated two-sample t-tests.

    Values are coerced to their types but not range-checked; a negative
    ``trials`` yields an empty result and a non-positive ``sigma`` yields
    whatever the arithmetic produces.
    """

    delta: float = Field(
        ...,
        description="True mean difference of the alternative population",
    )
    sigma: float = Field(
        ...,
        description="Standard deviation shared by both populations",
    )
    n: int = Field(
        ...,
        description="Sample size per group",
    )
    trials: int = Field(
        ...,
        description="Number of simulated experiments",
    )

    @property
    def degrees_of_freedom(self) -> int:
        """Degrees of freedom of each simulated test."""
        return 2 * self.n - 2
