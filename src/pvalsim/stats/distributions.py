"""Student-t cumulative distribution function."""

import numpy as np

from pvalsim.stats.special import incomplete_beta


def student_t_cdf(t: float, v: float) -> float:
    """CDF of Student's t distribution.

    Uses ``F(t) = 1 - I_x(v/2, 1/2) / 2`` with ``x = v / (v + t**2)`` for
    non-negative t and the symmetry ``F(-t) = 1 - F(t)`` otherwise.

    Args:
        t: Value at which to evaluate the CDF
        v: Degrees of freedom (> 0)

    Returns:
        P(T <= t)
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        x = np.float64(v) / (v + np.float64(t) * t)

    ib = incomplete_beta(float(x), v / 2.0, 0.5)
    if t >= 0:
        return 1.0 - 0.5 * ib
    return 0.5 * ib
