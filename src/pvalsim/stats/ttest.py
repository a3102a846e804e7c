"""Pooled two-sample Student's t-test."""

from collections.abc import Sequence

import numpy as np

from pvalsim.models import TestResult
from pvalsim.stats.distributions import student_t_cdf


def _mean_and_sum_of_squares(sample: np.ndarray) -> tuple[np.float64, np.float64]:
    """Sample mean and sum of squared deviations, (n - 1) times the variance."""
    mean = sample.sum() / np.float64(sample.size)
    return mean, ((sample - mean) ** 2).sum()


def two_sample_t_test(
    group_a: Sequence[float] | np.ndarray,
    group_b: Sequence[float] | np.ndarray,
) -> TestResult:
    """Two-sided t-test for equal means, assuming equal variances.

    Degenerate groups are not rejected: with ``n1 + n2 == 2`` (df = 0) or
    zero spread the division by zero surfaces as NaN or infinity in ``t``
    and ``p``.

    Args:
        group_a: First sample
        group_b: Second sample

    Returns:
        TestResult with the t-statistic of ``mean(a) - mean(b)``, the
        degrees of freedom and the two-sided p-value
    """
    a = np.asarray(group_a, dtype=np.float64)
    b = np.asarray(group_b, dtype=np.float64)
    n1 = np.float64(a.size)
    n2 = np.float64(b.size)
    df = a.size + b.size - 2

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        mean1, ss1 = _mean_and_sum_of_squares(a)
        mean2, ss2 = _mean_and_sum_of_squares(b)

        # pooled variance ((n1 - 1) var1 + (n2 - 1) var2) / df
        pooled = (ss1 + ss2) / np.float64(df)
        se = np.sqrt(pooled * (1.0 / n1 + 1.0 / n2))
        t = float((mean1 - mean2) / se)

    cdf = student_t_cdf(t, df)
    p = 2.0 * (1.0 - (cdf if t >= 0 else 1.0 - cdf))

    return TestResult(t=t, df=df, p=p)


def t_test_p_value(
    group_a: Sequence[float] | np.ndarray,
    group_b: Sequence[float] | np.ndarray,
) -> float:
    """Two-sided p-value of :func:`two_sample_t_test`."""
    return two_sample_t_test(group_a, group_b).p
