"""Test and simulation result models."""

from pydantic import BaseModel, ConfigDict, Field


class TestResult(BaseModel):
    """Outcome of a pooled two-sample t-test."""

    __test__ = False  # not a pytest test class

    t: float = Field(..., description="t-statistic (mean A minus mean B)")
    df: int = Field(..., description="Degrees of freedom, n1 + n2 - 2")
    p: float = Field(..., description="Two-sided p-value")


class SimulationResponse(BaseModel):
    """P-values produced by one simulation request, in trial order."""

    model_config = ConfigDict(populate_by_name=True)

    p_values: list[float] = Field(
        default_factory=list,
        alias="pValues",
        description="One p-value per trial",
    )

    def to_message(self) -> dict[str, list[float]]:
        """Serialize to the outbound message shape."""
        return self.model_dump(by_alias=True)
