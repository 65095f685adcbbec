"""
Exceptions raised by the distribution classes.
"""


class ThinkBayesError(Exception):
    """Base class for all errors raised by this package."""


class InvalidWeightError(ThinkBayesError, ValueError):
    """A negative or NaN weight was given for a value."""


class ZeroMassError(ThinkBayesError, ValueError):
    """The total mass of a distribution is zero, so it cannot be normalized."""


class EmptyDistributionError(ThinkBayesError, ValueError):
    """A query needs at least one value but the distribution has none."""


class BuilderFinalizedError(ThinkBayesError, RuntimeError):
    """A builder was used after its result was finalized."""


class UnimplementedMethodException(ThinkBayesError, NotImplementedError):
    """Exception if someone calls a method that should be overridden."""
