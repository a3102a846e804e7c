"""Tests for the Student-t CDF."""

import math

import pytest

from pvalsim.stats.distributions import student_t_cdf


class TestStudentTCdf:
    """Symmetry and closed-form checks of the t distribution CDF."""

    @pytest.mark.parametrize("v", [1, 2, 3, 8, 30, 58, 1000])
    def test_median_is_zero(self, v):
        assert student_t_cdf(0.0, v) == pytest.approx(0.5, abs=1e-12)

    @pytest.mark.parametrize("t", [0.1, 0.7, 1.96, 3.0, 12.5])
    @pytest.mark.parametrize("v", [1, 4, 9, 58])
    def test_point_symmetry(self, t, v):
        assert student_t_cdf(t, v) + student_t_cdf(-t, v) == pytest.approx(1.0, abs=1e-6)

    @pytest.mark.parametrize("t", [-5.0, -1.0, 0.3, 2.0, 40.0])
    def test_cauchy_for_one_degree_of_freedom(self, t):
        """With v = 1 the t distribution is standard Cauchy."""
        expected = 0.5 + math.atan(t) / math.pi
        assert student_t_cdf(t, 1) == pytest.approx(expected, abs=1e-6)

    @pytest.mark.parametrize("t", [-3.0, -0.5, 1.0, 4.0])
    def test_closed_form_for_two_degrees_of_freedom(self, t):
        expected = 0.5 + t / (2.0 * math.sqrt(2.0 + t * t))
        assert student_t_cdf(t, 2) == pytest.approx(expected, abs=1e-6)

    def test_known_quantile(self):
        """The 97.5% quantile of t(8) is 2.306."""
        assert student_t_cdf(2.306004, 8) == pytest.approx(0.975, abs=1e-5)

    def test_monotone(self):
        values = [student_t_cdf(t / 4, 10) for t in range(-20, 21)]
        assert values == sorted(values)

    def test_infinite_tails(self):
        assert student_t_cdf(math.inf, 5) == 1.0
        assert student_t_cdf(-math.inf, 5) == 0.0

    def test_zero_degrees_of_freedom_at_zero_is_nan(self):
        assert math.isnan(student_t_cdf(0.0, 0))
