"""
Probability mass functions.

A Pmf maps values (any hashable type) to probabilities. Pmfs are values:
every operation returns a new Pmf, built through the factory of the Pmf it
was called on, so subclasses get the whole set of operations back with
their own type.
"""
import copy
import operator
from collections.abc import Mapping

import numpy as np

from thinkbayes.cdf import Cdf
from thinkbayes.config import DEFAULTS
from thinkbayes.errors import EmptyDistributionError, ZeroMassError
from thinkbayes.factory import PmfFactory, accumulate


def odds(p):
    """Computes odds for a given probability.
    Example: p=0.75 means 75 for and 25 against, or 3:1 odds in favor.
    Note: when p=1, the formula for odds divides by zero, which is
    normally undefined.  But I think it is reasonable to define Odds(1)
    to be infinity, so that's what this function does.
    p: float 0-1
    Returns: float odds
    """
    if p == 1:
        return float('inf')
    return p / (1 - p)


def probability(yes, no=1):
    """Computes the probability corresponding to given odds.
    Example: yes=2, no=1 means 2:1 odds in favor, or 2/3 probability.

    yes, no: int or float odds in favor
    """
    return float(yes) / (yes + no)


class Pmf(Mapping):
    """Represents a probability mass function.

    Values can be any hashable type; probabilities are floating-point.
    Pmfs are not necessarily normalized: the result of incorporate, for
    example, holds unnormalized likelihoods until normalize is called.
    Looking up a value that isn't there gives probability 0.
    """

    def __init__(self, values=None, name=''):
        """Initializes the Pmf.
        Args:
            values: map from value to weight, or sequence of
                (value, weight) pairs; weights of repeated values are summed
            name: string name used as a label
        Raises:
            InvalidWeightError: if a weight is negative
        """
        self.name = name
        self._d = {}

        if values is None:
            return
        if isinstance(values, Mapping):
            values = values.items()
        self._d = accumulate(values)

    @classmethod
    def from_pairs(cls, pairs, name='', **kwargs):
        """Makes an unnormalized Pmf from (value, weight) pairs.
        kwargs are passed to the constructor of cls.
        """
        return cls(name=name, **kwargs).factory.from_pairs(pairs)

    @classmethod
    def from_dict(cls, d, name='', **kwargs):
        """Makes a normalized Pmf from a map from values to weights."""
        return cls(name=name, **kwargs).factory.from_dict(d)

    @classmethod
    def from_values(cls, values, name='', **kwargs):
        """Makes a normalized Pmf from an unsorted sequence of values."""
        return cls(name=name, **kwargs).factory.from_values(values)

    @property
    def factory(self):
        """Factory that makes new Pmfs of the same type as this one."""
        return PmfFactory(self._with_masses({}))

    def _with_masses(self, masses, name=None):
        """Returns a shallow copy of this object that holds masses instead."""
        new = copy.copy(self)
        new._d = masses
        new.name = self.name if name is None else name
        return new

    def copy(self, name=None):
        """Returns a copy, optionally with a new name."""
        return self._with_masses(dict(self._d), name)

    def __getitem__(self, x):
        return self._d[x]

    def __iter__(self):
        return iter(self._d)

    def __len__(self):
        return len(self._d)

    def __eq__(self, other):
        if not isinstance(other, Pmf):
            return NotImplemented
        return type(self) is type(other) and self._d == other._d

    def __hash__(self):
        return hash((type(self), frozenset(self._d.items())))

    def __repr__(self):
        return '%s(%r, name=%r)' % (type(self).__name__, self._d, self.name)

    def prob(self, x, default=0):
        """Gets the probability associated with the value x.
        Args:
            x: random variable
            default: value to return if the key is not there
        Returns:
            float probability
        """
        return self._d.get(x, default)

    def probs(self, xs):
        """Gets probabilities for a sequence of values."""
        return [self.prob(x) for x in xs]

    def total(self):
        """Returns the total of the probabilities in the map."""
        return sum(self._d.values())

    def is_normalized(self):
        return abs(self.total() - 1.0) <= DEFAULTS.tolerance

    def max_like(self):
        """Returns the largest probability in the map."""
        return max(self._d.values())

    def normalize(self, fraction=1.0):
        """Normalizes this PMF so the sum of all probs is fraction.
        Args:
            fraction: what the total should be after normalization
        Returns:
            new Pmf
        Raises:
            ZeroMassError: if the total probability is zero
        """
        total = self.total()
        if total == 0.0:
            raise ZeroMassError('total probability is zero.')

        fraction = float(fraction)
        # 1 / total overflows when total is subnormal
        return self.map_items(lambda x, p: (x, p * fraction / total))

    def map_keys(self, f):
        """Applies f to every value. Probabilities of values that f sends to
        the same result are summed; nothing is renormalized.
        """
        return self.factory.from_pairs((f(x), p) for x, p in self.items())

    map = map_keys

    def map_items(self, f):
        """Applies f(value, prob) -> (value, weight) to every entry."""
        return self.factory.from_pairs(f(x, p) for x, p in self.items())

    def filter(self, predicate):
        """Keeps the values for which predicate is true, without renormalizing."""
        return self.factory.from_pairs((x, p) for x, p in self.items() if predicate(x))

    def incorporate(self, likelihood_of):
        """Multiplies the probability of each value by likelihood_of(value).

        This is the unnormalized half of a Bayesian update; call normalize
        on the result to get the posterior.
        """
        return self.factory.from_pairs((x, p * likelihood_of(x)) for x, p in self.items())

    def combine(self, other, op):
        """Distribution of op(v1, v2) for v1 drawn from self and v2 from other,
        assuming the two are independent.
        """
        builder = self.factory.builder()
        for v1, p1 in self.items():
            for v2, p2 in other.items():
                builder.add((op(v1, v2), p1 * p2))
        return builder.finalize()

    def scale(self, factor):
        """Multiplies the values by a factor.
        factor: what to multiply by
        Returns: new object
        """
        return self.map_keys(lambda x: x * factor)

    def __add__(self, other):
        """Computes the Pmf of the sum of values drawn from self and other.
        other: another Pmf or a number
        returns: new Pmf
        """
        if isinstance(other, Pmf):
            return self.combine(other, operator.add)
        return self.map_keys(lambda x: x + other)

    def __radd__(self, other):
        return self.map_keys(lambda x: other + x)

    def __sub__(self, other):
        """Computes the Pmf of the diff of values drawn from self and other.
        other: another Pmf or a number
        returns: new Pmf
        """
        if isinstance(other, Pmf):
            return self.combine(other, operator.sub)
        return self.map_keys(lambda x: x - other)

    def mixture(self, name=None):
        """Reduces a Pmf whose values are Pmfs to a single Pmf.

        The probability of x is the sum over the inner Pmfs of the outer
        probability times the inner probability of x; values missing from an
        inner Pmf contribute nothing.
        """
        builder = self.factory.builder(name)
        for inner, weight in self.items():
            for x, p in inner.items():
                builder.add((x, weight * p))
        return builder.finalize()

    def make_cdf(self, name=None):
        """Makes a Cdf. The values must be totally ordered."""
        return Cdf.from_pmf(self, name=name)

    def prob_greater(self, x):
        """Probability that a sample from this Pmf exceeds x.
        x: number
        returns: float probability
        """
        t = [prob for (val, prob) in self.items() if val > x]
        return sum(t)

    def prob_less(self, x):
        """Probability that a sample from this Pmf is less than x.
        x: number
        returns: float probability
        """
        t = [prob for (val, prob) in self.items() if val < x]
        return sum(t)

    def random(self, rng=None):
        """Chooses a random element from this PMF.
        Args:
            rng: numpy Generator; a fresh one is made if omitted
        Returns:
            value from the Pmf
        """
        if len(self) == 0:
            raise EmptyDistributionError('Pmf contains no values.')
        rng = np.random.default_rng() if rng is None else rng

        target = rng.random() * self.total()
        total = 0.0
        for x, p in self.items():
            total += p
            if total >= target:
                return x

        # rounding left target just above the running total
        return x

    def mean(self):
        """Computes the mean of a PMF.
        Returns:
            float mean
        """
        mu = 0.0
        for x, p in self.items():
            mu += p * x
        return mu

    def var(self, mu=None):
        """Computes the variance of a PMF.
        Args:
            mu: the point around which the variance is computed;
                if omitted, computes the mean
        Returns:
            float variance
        """
        if mu is None:
            mu = self.mean()

        var = 0.0
        for x, p in self.items():
            var += p * (x - mu) ** 2
        return var

    def maximum_likelihood(self):
        """Returns the value with the highest probability."""
        if len(self) == 0:
            raise EmptyDistributionError('Pmf contains no values.')
        val, _ = max(self.items(), key=operator.itemgetter(1))
        return val

    def credible_interval(self, mass=None):
        """Computes the central credible interval.
        If mass=0.9, computes the 90% CI.
        Args:
            mass: float between 0 and 1
        Returns:
            sequence of two values, low and high
        """
        return self.make_cdf().credible_interval(mass)

    def max(self, k):
        """Computes the CDF of the maximum of k selections from this dist.
        k: int
        returns: new Cdf
        """
        return self.make_cdf().max(k)

    def render(self):
        """Generates a sequence of points suitable for plotting.
        Returns:
            tuple of (sorted value sequence, prob sequence)
        """
        if not self._d:
            return (), ()
        xs, ps = zip(*sorted(self.items()))
        return xs, ps


def mixture(pmf_of_pmfs, name=None):
    """Mixes the Pmfs that are the values of pmf_of_pmfs, weighted by their
    probabilities.
    """
    return pmf_of_pmfs.mixture(name)


def pmf_prob_less(pmf1, pmf2):
    """Probability that a value from pmf1 is less than a value from pmf2.
    Args:
        pmf1: Pmf object
        pmf2: Pmf object
    Returns:
        float probability
    """
    total = 0.0
    for v1, p1 in pmf1.items():
        for v2, p2 in pmf2.items():
            if v1 < v2:
                total += p1 * p2
    return total


def pmf_prob_greater(pmf1, pmf2):
    """Probability that a value from pmf1 is greater than a value from pmf2."""
    total = 0.0
    for v1, p1 in pmf1.items():
        for v2, p2 in pmf2.items():
            if v1 > v2:
                total += p1 * p2
    return total


def pmf_prob_equal(pmf1, pmf2):
    """Probability that a value from pmf1 equals a value from pmf2."""
    total = 0.0
    for v1, p1 in pmf1.items():
        for v2, p2 in pmf2.items():
            if v1 == v2:
                total += p1 * p2
    return total
