"""
Probability density functions and their discrete versions.
"""
import bisect
import math

import numpy as np
import scipy.stats

from thinkbayes.config import DEFAULTS
from thinkbayes.errors import (EmptyDistributionError, UnimplementedMethodException,
                               ZeroMassError)
from thinkbayes.factory import check_weight
from thinkbayes.pmf import Pmf


class Interpolator(object):
    """Represents a mapping between sorted sequences; performs linear interp.
    Attributes:
        xs: sorted list
        ys: sorted list
    """

    def __init__(self, xs, ys):
        if len(xs) == 0 or len(xs) != len(ys):
            raise ValueError('xs and ys must be non-empty and of the same length')
        self.xs = xs
        self.ys = ys

    def lookup(self, x):
        """Looks up x and returns the corresponding value of y."""
        return self._bisect(x, self.xs, self.ys)

    def reverse(self, y):
        """Looks up y and returns the corresponding value of x."""
        return self._bisect(y, self.ys, self.xs)

    def _bisect(self, x, xs, ys):
        """Helper function."""
        if x <= xs[0]:
            return ys[0]
        if x >= xs[-1]:
            return ys[-1]
        i = bisect.bisect(xs, x)
        frac = 1.0 * (x - xs[i - 1]) / (xs[i] - xs[i - 1])
        y = ys[i - 1] + frac * 1.0 * (ys[i] - ys[i - 1])
        return y


class Pdf(object):
    """Represents a probability density function (PDF).

    Densities are never negative but need not integrate to exactly 1.
    """

    def density(self, x):
        """Evaluates this Pdf at x.
        Returns: float probability density
        """
        raise UnimplementedMethodException()

    def make_pmf(self, xs, name=''):
        """Makes a discrete version of this Pdf, evaluated at xs.
        The result is not normalized; the spacing of xs decides how good
        an approximation it is.
        xs: sorted sequence of values
        Returns: new Pmf
        """
        return Pmf(name=name).factory.from_pairs((x, self.density(x)) for x in xs)


class BoundedPdf(Pdf):
    """A Pdf whose support is the closed interval [lower_bound, upper_bound]."""

    def __init__(self, lower_bound, upper_bound):
        if lower_bound > upper_bound:
            raise ValueError('lower bound %r exceeds upper bound %r' % (lower_bound, upper_bound))
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound

    def render(self, steps=None):
        """Evaluates the density at evenly spaced points over the support.
        Returns:
            tuple of (xs, densities)
        """
        if steps is None:
            steps = DEFAULTS.render_steps
        xs = np.linspace(self.lower_bound, self.upper_bound, steps + 1).tolist()
        return xs, [self.density(x) for x in xs]


class GaussianPdf(Pdf):
    """Represents the PDF of a Gaussian distribution."""

    def __init__(self, mu, sigma):
        """Constructs a Gaussian Pdf with given mu and sigma.
        mu: mean
        sigma: standard deviation
        """
        self.mu = mu
        self.sigma = sigma

    def density(self, x):
        return eval_gaussian_pdf(x, self.mu, self.sigma)


class KernelEstimator(object):
    """Gaussian kernel density estimate built from weighted samples.

    The kernel standard deviation is the larger of bandwidth / 6 and the
    range of the samples over the square root of their total weight. The
    scipy estimator is refit on the first query after samples are added, so
    samples must not be added while another thread is querying.
    """

    def __init__(self, bandwidth):
        if not bandwidth > 0:
            raise ValueError('bandwidth must be positive, got %r' % (bandwidth,))
        self.bandwidth = float(bandwidth)
        self._values = []
        self._weights = []
        self._kde = None

    def __len__(self):
        return len(self._values)

    def add_sample(self, x, weight=1.0):
        """Adds a sample with the given weight."""
        self._weights.append(check_weight(x, weight))
        self._values.append(float(x))
        self._kde = None

    def kernel_std(self):
        """Standard deviation of each kernel."""
        spread = max(self._values) - min(self._values)
        return max(self.bandwidth / 6.0, spread / math.sqrt(sum(self._weights)))

    def _fit(self):
        if len(set(self._values)) < 2:
            raise ValueError('a density estimate needs at least two distinct samples')
        if sum(self._weights) == 0.0:
            raise ZeroMassError('all samples have weight zero')

        values = np.asarray(self._values)
        weights = np.asarray(self._weights)
        data_std = math.sqrt(np.cov(values, aweights=weights))
        if data_std == 0.0:
            raise ValueError('a density estimate needs samples with positive weight '
                             'at two distinct values')
        # gaussian_kde scales the data covariance by the square of the factor
        return scipy.stats.gaussian_kde(values, bw_method=self.kernel_std() / data_std,
                                        weights=weights)

    def _estimator(self):
        if self._kde is None:
            self._kde = self._fit()
        return self._kde

    def density(self, x):
        """Evaluates the estimate at x."""
        return float(self._estimator().evaluate(x)[0])

    def densities(self, xs):
        """Evaluates the estimate at each of xs; returns a numpy array."""
        return self._estimator().evaluate(np.asarray(xs, dtype=float))


class EstimatedPdf(Pdf):
    """Represents a PDF estimated by KDE."""

    def __init__(self, sample, bandwidth=None):
        """Estimates the density function based on a sample.
        sample: sequence of data
        bandwidth: KDE bandwidth; defaults to the largest sample magnitude
            divided by DEFAULTS.bandwidth_divisor
        """
        sample = list(sample)
        if not sample:
            raise EmptyDistributionError('cannot estimate a density from no samples')
        if bandwidth is None:
            bandwidth = max(abs(x) for x in sample) / DEFAULTS.bandwidth_divisor

        self.kde = KernelEstimator(bandwidth)
        for x in sample:
            self.kde.add_sample(x)

    def density(self, x):
        """Evaluates this Pdf at x.
        Returns: float probability density
        """
        return self.kde.density(x)

    def make_pmf(self, xs, name=''):
        xs = list(xs)
        ps = self.kde.densities(xs)
        return Pmf(name=name).factory.from_pairs(zip(xs, ps.tolist()))


def eval_gaussian_pdf(x, mu, sigma):
    """Computes the PDF of the normal distribution.
    x: value
    mu: mean
    sigma: standard deviation

    returns: float probability density
    """
    return float(scipy.stats.norm.pdf(x, mu, sigma))
