"""Standard normal CDF approximations.

The default is the classical Zelen-Severo rational approximation
(Abramowitz & Stegun 26.2.17, popularised by Hart):

    Phi(x) = 1 - phi(x) * (a1 t + a2 t^2 + a3 t^3 + a4 t^4 + a5 t^5),
    t = 1 / (1 + gamma x),  x >= 0

with an absolute error below 7.5e-8. Negative arguments use the symmetry
Phi(-x) = 1 - Phi(x).
"""

import math

from effort_pricing.model.interfaces import NormalDistribution

A1 = 0.319381530
A2 = -0.356563782
A3 = 1.781477937
A4 = -1.821255978
A5 = 1.330274429
GAMMA = 0.2316419
INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)

# Beyond this distance the polynomial is no longer trusted
TAIL_CUTOFF = 7.0


class HartNormalDistribution(NormalDistribution):
    """Polynomial approximation of the standard normal CDF."""

    def cumulative_distribution(self, x: float) -> float:
        """Evaluate Phi(x), saturating to 0 or 1 for |x| > 7.
        
        Args:
            x: Point at which to evaluate Phi
            
        Returns:
            Probability in [0, 1]
        """
        if x < -TAIL_CUTOFF:
            return 0.0
        if x > TAIL_CUTOFF:
            return 1.0
        
        negative = x < 0
        z = -x if negative else x
        
        t = 1.0 / (1.0 + GAMMA * z)
        poly = t * (A1 + t * (A2 + t * (A3 + t * (A4 + t * A5))))
        density = INV_SQRT_2PI * math.exp(-0.5 * z * z)
        
        result = 1.0 - density * poly
        return 1.0 - result if negative else result


class ErfNormalDistribution(NormalDistribution):
    """Standard normal CDF via the error function."""

    def cumulative_distribution(self, x: float) -> float:
        return 0.5 * (1.0 + math.erf(x / math.sqrt(2.0)))


def cumulative_distribution(x: float) -> float:
    """Phi(x) using the default polynomial approximation."""
    return _DEFAULT.cumulative_distribution(x)


_DEFAULT = HartNormalDistribution()
