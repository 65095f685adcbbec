"""
Numeric defaults shared by the distribution classes.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Defaults:
    # slack allowed when checking that masses sum to one
    tolerance: float = 1e-9

    # cumulative cutoffs used to bound an infinite discrete support
    tail_low: float = 0.0001
    tail_high: float = 0.9999

    # discretization of normal distributions
    normal_num_sigmas: float = 4.0
    normal_steps: int = 1000

    # default KDE bandwidth is max(values) / bandwidth_divisor
    bandwidth_divisor: float = 10000.0

    credible_mass: float = 0.9

    # points per bounded density when rendering
    render_steps: int = 10000


DEFAULTS = Defaults()
