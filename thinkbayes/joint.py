"""
Joint distributions of several variables.
"""
import operator

from thinkbayes.config import DEFAULTS
from thinkbayes.pmf import Pmf


def make_joint(pmf1, pmf2, name=''):
    """Joint distribution of values from pmf1 and pmf2.
    Args:
        pmf1: Pmf object
        pmf2: Pmf object
    Returns:
        Joint pmf of value pairs
    """
    pairs = (((v1, v2), p1 * p2)
             for v1, p1 in pmf1.items()
             for v2, p2 in pmf2.items())
    return Joint(pairs, name)


class Joint(Pmf):
    """Represents a joint distribution.
    The values are sequences (usually tuples)
    """

    def marginal(self, i, name=''):
        """Gets the marginal distribution of the indicated variable.
        i: index of the variable we want
        Returns: Pmf
        """
        return Pmf(((vs[i], prob) for vs, prob in self.items()), name)

    def conditional(self, i, j, val, name=''):
        """Gets the conditional distribution of the indicated variable.
        Distribution of vs[i], conditioned on vs[j] = val.
        i: index of the variable we want
        j: which variable is conditioned on
        val: the value the jth variable has to have
        Returns: normalized Pmf
        """
        pmf = Pmf(((vs[i], prob) for vs, prob in self.items() if vs[j] == val), name)
        return pmf.normalize()

    def max_like_interval(self, mass=None):
        """Returns the maximum-likelihood credible interval.
        If mass=0.9, finds the most likely values that together hold at
        least 90% of the probability.
        mass: float between 0 and 1
        Returns: list of values from the suite
        """
        if mass is None:
            mass = DEFAULTS.credible_mass

        interval = []
        total = 0
        for val, prob in sorted(self.items(), key=operator.itemgetter(1), reverse=True):
            interval.append(val)
            total += prob
            if total >= mass:
                break

        return interval
