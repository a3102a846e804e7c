"""Normal random variates via the Box-Muller transform."""

import numpy as np


class NormalSampler:
    """Draws independent normal variates from a uniform random source."""

    def __init__(self, rng: np.random.Generator | None = None):
        """Initialize the sampler.

        Args:
            rng: Random number generator (creates new if None)
        """
        self.rng = rng if rng is not None else np.random.default_rng()

    def sample(
        self,
        mu: float = 0.0,
        sigma: float = 1.0,
        size: int | None = None,
    ) -> float | np.ndarray:
        """Draw from Normal(mu, sigma**2).

        Each variate consumes two uniforms; the sine partner of the
        transform is discarded.

        Args:
            mu: Mean of the distribution
            sigma: Standard deviation of the distribution
            size: Number of draws (None for a single float)

        Returns:
            A float, or an array of ``size`` draws
        """
        u1 = self.rng.random(size)
        u2 = self.rng.random(size)

        # u1 == 0 gives an infinite radius; it is propagated, not redrawn
        with np.errstate(divide="ignore", invalid="ignore"):
            radius = np.sqrt(-2.0 * np.log(u1))
            draws = mu + sigma * radius * np.cos(2.0 * np.pi * u2)

        if size is None:
            return float(draws)
        return draws


def random_normal(
    mu: float = 0.0,
    sigma: float = 1.0,
    rng: np.random.Generator | None = None,
) -> float:
    """Draw a single normal variate."""
    return NormalSampler(rng).sample(mu, sigma)
