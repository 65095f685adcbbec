"""
Suites of hypotheses for Bayesian updating.
"""
import logging

from thinkbayes.errors import UnimplementedMethodException, ZeroMassError
from thinkbayes.pmf import Pmf

logger = logging.getLogger(__name__)


class Suite(Pmf):
    """Represents a suite of hypotheses and their probabilities.

    The likelihood of the data under a hypothesis comes either from the
    likelihood function given to the constructor or from a subclass that
    overrides likelihood. Updates return a new Suite and leave this one as
    it was.

    Updating with several pieces of data gives the same posterior in any
    order only if the likelihood of each datum doesn't depend on the data
    seen before it. The suite doesn't check this; it is a property of the
    likelihood function.
    """

    def __init__(self, values=None, name='', likelihood=None):
        """Initializes the suite.
        Args:
            values: prior, as accepted by Pmf
            name: string name
            likelihood: function of (data, hypo) returning a non-negative float
        """
        super(Suite, self).__init__(values, name)
        self._likelihood = likelihood

    def likelihood(self, data, hypo):
        """Computes the likelihood of the data under the hypothesis.
        hypo: some representation of the hypothesis
        data: some representation of the data
        """
        if self._likelihood is None:
            raise UnimplementedMethodException(
                'pass a likelihood function or override Suite.likelihood')
        return self._likelihood(data, hypo)

    @property
    def pmf(self):
        """The hypotheses and their probabilities as a plain Pmf."""
        return Pmf(self, self.name)

    def _observe(self, data):
        return self.incorporate(lambda hypo: self.likelihood(data, hypo))

    def _posterior(self, unnormalized, data):
        total = unnormalized.total()
        if total == 0.0:
            raise ZeroMassError(
                'data %r has zero likelihood under every hypothesis' % (data,))
        logger.debug('%s: normalizing constant %g', self.name or 'suite', total)
        return unnormalized.normalize()

    def normalizing_constant(self, data):
        """Total probability of the data, summed over the hypotheses."""
        return self._observe(data).total()

    def update(self, data):
        """Updates each hypothesis based on the data.
        data: any representation of the data
        returns: new, normalized Suite
        """
        return self._posterior(self._observe(data), data)

    def update_set(self, dataset):
        """Updates each hypothesis based on the dataset.
        This is more efficient than calling update repeatedly because
        it waits until the end to normalize.
        dataset: a sequence of data
        returns: new, normalized Suite
        """
        dataset = list(dataset)
        posterior = self
        for data in dataset:
            posterior = posterior._observe(data)
        return self._posterior(posterior, dataset)
