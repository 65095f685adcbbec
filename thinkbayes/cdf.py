"""
Cumulative distribution functions.
"""
import bisect

import numpy as np

from thinkbayes.config import DEFAULTS
from thinkbayes.errors import EmptyDistributionError, ZeroMassError
from thinkbayes.factory import accumulate, check_weight


def make_cdf_from_items(items, name=''):
    """Makes a cdf from an unsorted sequence of (value, frequency) pairs.
    Args:
        items: unsorted sequence of (value, frequency) pairs
        name: string name for this CDF
    Returns:
        Cdf object
    Raises:
        ZeroMassError: if there are values but all of them have weight 0
    """
    runsum = 0.0
    xs = []
    cs = []

    for value, count in sorted(items, key=lambda item: item[0]):
        runsum += check_weight(value, count)
        xs.append(value)
        cs.append(runsum)

    if xs and runsum == 0.0:
        raise ZeroMassError('total probability is zero.')

    ps = [c / runsum for c in cs]
    return Cdf(xs, ps, name)


class Cdf(object):
    """Represents a cumulative distribution function.

    A Cdf is read-only. It is a snapshot of the distribution it was made
    from and doesn't follow later changes to it.

    Attributes:
        xs: sorted tuple of values
        ps: tuple of cumulative probabilities, non-decreasing
        name: string used as a graph label.
    """

    def __init__(self, xs=None, ps=None, name=''):
        self.xs = () if xs is None else tuple(xs)
        self.ps = () if ps is None else tuple(ps)
        self.name = name
        if len(self.xs) != len(self.ps):
            raise ValueError('xs and ps must have the same length')

    @classmethod
    def from_pmf(cls, pmf, name=None):
        """Makes a CDF from a Pmf object.
        Args:
            pmf: Pmf object with totally ordered values
            name: string name for the data.
        """
        if name is None:
            name = pmf.name
        return make_cdf_from_items(pmf.items(), name)

    @classmethod
    def from_values(cls, values, name=''):
        """Creates a CDF from an unsorted sequence of sortable values."""
        return make_cdf_from_items(accumulate((v, 1) for v in values).items(), name)

    def __len__(self):
        return len(self.xs)

    def __iter__(self):
        return iter(self.items())

    def __repr__(self):
        return 'Cdf(%r, %r, name=%r)' % (self.xs, self.ps, self.name)

    def copy(self, name=None):
        """Returns a copy of this Cdf.
        Args:
            name: string name for the new Cdf
        """
        if name is None:
            name = self.name
        return Cdf(self.xs, self.ps, name)

    def make_pmf(self, name=None):
        """Makes a Pmf."""
        from thinkbayes.pmf import Pmf
        return Pmf().factory.from_cdf(self, name=name)

    def values(self):
        """Returns a sorted list of values."""
        return list(self.xs)

    def items(self):
        """Returns a sorted list of (value, probability) pairs."""
        return list(zip(self.xs, self.ps))

    def shift(self, term):
        """Adds a term to the xs.
        term: how much to add
        """
        return Cdf([x + term for x in self.xs], self.ps, self.name)

    def scale(self, factor):
        """Multiplies the xs by a factor.
        factor: what to multiply by
        """
        return Cdf([x * factor for x in self.xs], self.ps, self.name)

    def prob(self, x):
        """Returns CDF(x), the probability of a value at or below x.
        Args:
            x: number
        Returns:
            float probability; 0 below the first value, the last cumulative
            probability (1 when normalized) from the last value on
        """
        if not self.xs or x < self.xs[0]:
            return 0.0
        if x >= self.xs[-1]:
            last = self.ps[-1]
            return 1.0 if abs(last - 1.0) <= DEFAULTS.tolerance else last
        index = bisect.bisect(self.xs, x)
        return self.ps[index - 1]

    def percentile(self, p):
        """Returns InverseCDF(p), the smallest value whose cumulative
        probability is at least p.
        Args:
            p: number in the range [0, 1]
        Returns:
            number value
        """
        if not self.xs:
            raise EmptyDistributionError('Cdf contains no values.')
        if not 0 <= p <= 1:
            raise ValueError('Probability p must be in range [0, 1]')

        index = bisect.bisect_left(self.ps, p)
        # the last cumulative probability can fall short of 1 by rounding
        return self.xs[min(index, len(self.xs) - 1)]

    value = percentile

    def credible_interval(self, mass=None):
        """Computes the central credible interval.
        If mass=0.9, computes the 90% CI.
        Args:
            mass: float between 0 and 1
        Returns:
            sequence of two values, low and high
        """
        if mass is None:
            mass = DEFAULTS.credible_mass
        return self.percentile((1 - mass) / 2), self.percentile((1 + mass) / 2)

    def sample(self, u):
        """Inverse transform sampling.
        Args:
            u: uniform random number in [0, 1)
        Returns:
            value from the distribution
        """
        return self.percentile(u)

    def random(self, rng=None):
        """Chooses a random value from this distribution.
        rng: numpy Generator; a fresh one is made if omitted
        """
        rng = np.random.default_rng() if rng is None else rng
        return self.sample(rng.random())

    def samples(self, n, rng=None):
        """Generates a random sample of length n from this distribution."""
        rng = np.random.default_rng() if rng is None else rng
        return [self.sample(u) for u in rng.random(n)]

    def mean(self):
        """Computes the mean of a CDF.
        Returns:
            float mean
        """
        old_p = 0
        total = 0.0
        for x, new_p in zip(self.xs, self.ps):
            p = new_p - old_p
            total += p * x
            old_p = new_p
        return total

    def render(self):
        """Generates a sequence of points suitable for plotting.
        An empirical CDF is a step function; linear interpolation can be misleading.
        Returns:
            tuple of (xs, ps)
        """
        if not self.xs:
            return [], []
        xs = [self.xs[0]]
        ps = [0.0]
        for i, p in enumerate(self.ps):
            xs.append(self.xs[i])
            ps.append(p)

            if i + 1 < len(self.xs):
                xs.append(self.xs[i + 1])
                ps.append(p)
        return xs, ps

    def max(self, k):
        """Computes the CDF of the maximum of k selections from this dist.
        k: int
        returns: new Cdf
        """
        return Cdf(self.xs, [p ** k for p in self.ps], self.name)
