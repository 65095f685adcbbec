"""
Construction of distributions.

Generic operations never instantiate a concrete class directly. They ask the
receiver for its factory, which builds new instances of the receiver's own
type (a Suite keeps its likelihood, a Joint stays a Joint).
"""
import math

from thinkbayes.errors import BuilderFinalizedError, InvalidWeightError


def check_weight(value, weight):
    """Returns weight as a float.
    Raises InvalidWeightError if the weight is negative or NaN.
    """
    weight = float(weight)
    if math.isnan(weight) or weight < 0:
        raise InvalidWeightError('invalid weight %r for value %r' % (weight, value))
    return weight


def accumulate(pairs, masses=None):
    """Sums the weights of (value, weight) pairs.
    Args:
        pairs: iterable of (value, weight) pairs
        masses: dict to add into; a new one is made if omitted
    Returns:
        dict that maps value to total weight
    """
    masses = {} if masses is None else masses
    for value, weight in pairs:
        masses[value] = masses.get(value, 0.0) + check_weight(value, weight)
    return masses


class PmfBuilder(object):
    """Accumulates weighted values and produces one distribution.

    The builder starts from the masses of its seed and hands the result to
    the seed's type on finalize. It serves a single construction and is not
    thread-safe.
    """

    def __init__(self, seed, name=None):
        self._seed = seed
        self.name = seed.name if name is None else name
        self._masses = dict(seed.items())
        self._finalized = False

    def __len__(self):
        return len(self._masses)

    def _check_open(self):
        if self._finalized:
            raise BuilderFinalizedError('builder has already been finalized')

    def add(self, pair):
        """Adds the weight of a (value, weight) pair.
        Returns: this builder
        """
        self._check_open()
        value, weight = pair
        self._masses[value] = self._masses.get(value, 0.0) + check_weight(value, weight)
        return self

    def add_all(self, pairs):
        """Adds a sequence of (value, weight) pairs.

        Either all pairs are added or, if one of them has an invalid weight,
        none of them.
        """
        self._check_open()
        self._masses = accumulate(pairs, dict(self._masses))
        return self

    def clear(self):
        """Drops everything added since the builder was made."""
        self._check_open()
        self._masses = dict(self._seed.items())

    def finalize(self):
        """Returns the built distribution. The builder can't be used afterwards."""
        self._check_open()
        self._finalized = True
        return self._seed._with_masses(self._masses, self.name)


class PmfFactory(object):
    """Makes distributions of the same concrete type as a template.

    template: an empty distribution; its type and any extra state it carries
        are copied into every distribution made by this factory
    """

    def __init__(self, template):
        if len(template):
            template = template._with_masses({})
        self.template = template

    def empty(self, name=None):
        """Returns the distribution with no values."""
        if name is None:
            return self.template
        return self.template._with_masses({}, name)

    def builder(self, name=None):
        """Returns a new builder seeded with the empty distribution."""
        return PmfBuilder(self.empty(), name)

    def from_pairs(self, pairs, name=None):
        """Makes a distribution from a sequence of (value, weight) pairs.
        Weights of repeated values are summed; the result isn't normalized.
        """
        return self.builder(name).add_all(pairs).finalize()

    def from_dict(self, d, name=None):
        """Makes a normalized distribution from a map from values to weights."""
        return self.from_pairs(d.items(), name).normalize()

    def from_values(self, values, name=None):
        """Makes a normalized distribution from a sequence of values.
        Each occurrence of a value counts once, so repeated values are
        proportionally more likely.
        """
        return self.from_pairs(((value, 1) for value in values), name).normalize()

    def from_cdf(self, cdf, name=None):
        """Makes a distribution from a Cdf object.
        Args:
            cdf: Cdf object
            name: string name for the new distribution
        """
        builder = self.builder(cdf.name if name is None else name)

        prev = 0.0
        for val, prob in cdf.items():
            builder.add((val, prob - prev))
            prev = prob
        return builder.finalize()
