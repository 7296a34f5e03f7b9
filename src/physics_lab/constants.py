# MIT License (see LICENSE)
"""
Physical and mathematical constants shared by the models and special functions.

Numeric knobs of the algorithms (subdivision counts, iteration caps,
tolerances) are not here: they live in config.NumericsConfig so they can be
tuned without editing code.
"""
from __future__ import annotations

# Standard gravity in m/s². Default for every pendulum and the wave basin.
G: float = 9.81

# Euler-Mascheroni constant γ, used by the Bessel Y0 representations.
EULER_GAMMA: float = 0.5772156649015329

# Ratio of specific heats for diatomic gas (air). Gas-dynamic functions
# τ, π, ε, q, φ, y are all parametrized by it.
ADIABATIC_INDEX: float = 1.4

# Default pendulum time step in seconds.
DEFAULT_DT: float = 0.05

# Lower integration limit for the Y0 integral representation. The integrand
# has a logarithmic singularity at θ = 0.
BESSEL_LOWER_LIMIT: float = 1e-6
