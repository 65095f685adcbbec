"""
Adapters from scipy.stats distributions to Pmf and Pdf.

The adapters are explicit: pass a frozen scipy.stats distribution, get back
a Pmf or a Pdf.
"""
import logging
import math

import numpy as np
import scipy.stats

from thinkbayes.config import DEFAULTS
from thinkbayes.pdf import BoundedPdf, EstimatedPdf, Pdf
from thinkbayes.pmf import Pmf

logger = logging.getLogger(__name__)


class ContinuousPdf(Pdf):
    """Pdf backed by a frozen scipy.stats continuous distribution."""

    def __init__(self, dist):
        self.dist = dist

    def density(self, x):
        return float(self.dist.pdf(x))


class BoundedContinuousPdf(ContinuousPdf, BoundedPdf):
    """ContinuousPdf over a distribution with finite support."""

    def __init__(self, dist):
        ContinuousPdf.__init__(self, dist)
        lower, upper = dist.support()
        BoundedPdf.__init__(self, float(lower), float(upper))


def integer_distribution_as_pmf(dist, name=''):
    """Makes a Pmf from a frozen scipy.stats discrete distribution.

    An infinite end of the support is cut at the DEFAULTS.tail_low or
    DEFAULTS.tail_high quantile. The result is not renormalized, so it
    misses the probability of the cut tails.
    """
    lower, upper = dist.support()
    if math.isinf(lower):
        lower = dist.ppf(DEFAULTS.tail_low)
        logger.debug('lower end of support cut at %g', lower)
    if math.isinf(upper):
        upper = dist.ppf(DEFAULTS.tail_high)
        logger.debug('upper end of support cut at %g', upper)

    ks = np.arange(int(lower), int(upper) + 1)
    return Pmf(zip(ks.tolist(), dist.pmf(ks).tolist()), name)


def real_distribution_as_pdf(dist):
    """Makes a Pdf from a frozen scipy.stats continuous distribution.
    Returns a BoundedPdf when both ends of the support are finite.
    """
    lower, upper = dist.support()
    if np.isfinite(lower) and np.isfinite(upper):
        return BoundedContinuousPdf(dist)
    return ContinuousPdf(dist)


def estimate_pdf(values, bandwidth=None):
    """Estimates a Pdf from samples with a Gaussian KDE.
    values: sequence of numbers
    bandwidth: defaults to max(values) / DEFAULTS.bandwidth_divisor
    """
    return EstimatedPdf(values, bandwidth)


def normal_pdf(mean, stdev):
    return real_distribution_as_pdf(scipy.stats.norm(mean, stdev))


def normal_pmf(mean, stdev, num_sigmas=None, steps=None, name=''):
    """Makes a normalized Pmf that approximates a normal distribution.
    mean, stdev: parameters of the distribution
    num_sigmas: how many standard deviations to cover on each side
    steps: number of intervals between the lowest and highest value
    """
    if num_sigmas is None:
        num_sigmas = DEFAULTS.normal_num_sigmas
    if steps is None:
        steps = DEFAULTS.normal_steps

    low = mean - num_sigmas * stdev
    high = mean + num_sigmas * stdev
    xs = np.linspace(low, high, steps + 1).tolist()
    return normal_pdf(mean, stdev).make_pmf(xs, name).normalize()


def poisson_pmf(lam, name=''):
    return integer_distribution_as_pmf(scipy.stats.poisson(lam), name)
