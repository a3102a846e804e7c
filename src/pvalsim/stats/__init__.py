"""Statistical core: sampling, special functions and the t-test."""

from .distributions import student_t_cdf
from .sampler import NormalSampler, random_normal
from .special import betacf, incomplete_beta, log_gamma
from .ttest import t_test_p_value, two_sample_t_test

__all__ = [
    "NormalSampler",
    "betacf",
    "incomplete_beta",
    "log_gamma",
    "random_normal",
    "student_t_cdf",
    "t_test_p_value",
    "two_sample_t_test",
]
