"""
Discrete and continuous Bayesian probability: Pmfs, Cdfs, suites of
hypotheses and densities, after Allen Downey's Think Bayes.
"""
from thinkbayes.cdf import Cdf, make_cdf_from_items
from thinkbayes.errors import (BuilderFinalizedError, EmptyDistributionError, InvalidWeightError,
                               ThinkBayesError, UnimplementedMethodException, ZeroMassError)
from thinkbayes.factory import PmfBuilder, PmfFactory
from thinkbayes.joint import Joint, make_joint
from thinkbayes.pdf import BoundedPdf, EstimatedPdf, GaussianPdf, Interpolator, KernelEstimator, Pdf
from thinkbayes.pmf import (Pmf, mixture, odds, pmf_prob_equal, pmf_prob_greater, pmf_prob_less,
                            probability)
from thinkbayes.suite import Suite
