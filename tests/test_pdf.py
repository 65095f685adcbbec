import math

import numpy as np
import pytest
import scipy.integrate
import scipy.stats

from thinkbayes import (BoundedPdf, EmptyDistributionError, EstimatedPdf, GaussianPdf,
                        Interpolator, InvalidWeightError, KernelEstimator, Pdf,
                        UnimplementedMethodException)


class TrianglePdf(BoundedPdf):

    def __init__(self):
        super(TrianglePdf, self).__init__(0.0, 2.0)

    def density(self, x):
        return max(0.0, 1.0 - abs(x - 1.0))


# region Pdf
def test_pdf_density_must_be_overridden():
    with pytest.raises(UnimplementedMethodException):
        Pdf().density(0.0)


def test_gaussian_density():
    pdf = GaussianPdf(2.0, 0.5)

    assert pdf.density(2.0) == pytest.approx(1 / (math.sqrt(2 * math.pi) * 0.5))


def test_make_pmf_is_not_normalized():
    pmf = TrianglePdf().make_pmf([0.0, 0.5, 1.0, 1.5, 2.0], name='triangle')

    assert sorted(pmf) == [0.0, 0.5, 1.0, 1.5, 2.0]
    assert pmf.prob(1.0) == pytest.approx(1.0)
    assert pmf.total() == pytest.approx(2.0)
    assert pmf.name == 'triangle'
    assert pmf.normalize().prob(0.5) == pytest.approx(0.25)


def test_discretized_gaussian_mean():
    pdf = GaussianPdf(3.0, 1.0)
    pmf = pdf.make_pmf(np.linspace(-1, 7, 401).tolist()).normalize()

    assert pmf.mean() == pytest.approx(3.0)


def test_bounded_pdf_render():
    xs, ds = TrianglePdf().render(steps=4)

    assert xs == pytest.approx([0.0, 0.5, 1.0, 1.5, 2.0])
    assert ds == pytest.approx([0.0, 0.5, 1.0, 0.5, 0.0])


def test_bounded_pdf_rejects_reversed_bounds():
    with pytest.raises(ValueError):
        BoundedPdf(2.0, 1.0)
# endregion


# region kernel estimation
def test_kernel_std():
    kde = KernelEstimator(bandwidth=6.0)
    kde.add_sample(0.0)
    kde.add_sample(10.0)

    assert kde.kernel_std() == pytest.approx(10 / math.sqrt(2))


def test_kernel_estimator_density():
    kde = KernelEstimator(bandwidth=6.0)
    kde.add_sample(0.0)
    kde.add_sample(10.0)
    std = kde.kernel_std()

    assert kde.density(5.0) == pytest.approx(scipy.stats.norm.pdf(5.0, 0.0, std), rel=1e-6)
    assert kde.density(0.0) > kde.density(-20.0)


def test_kernel_estimator_weights():
    kde = KernelEstimator(bandwidth=1.0)
    kde.add_sample(0.0, weight=3.0)
    kde.add_sample(10.0, weight=1.0)

    assert kde.density(0.0) > kde.density(10.0)


def test_kernel_estimator_refits_after_new_samples():
    kde = KernelEstimator(bandwidth=1.0)
    kde.add_sample(0.0)
    kde.add_sample(1.0)
    before = kde.density(20.0)
    kde.add_sample(20.0)

    assert kde.density(20.0) > before
    assert len(kde) == 3


def test_kernel_estimator_integrates_to_one():
    kde = KernelEstimator(bandwidth=1.0)
    for x in [1.0, 2.0, 2.5, 4.0, 7.0]:
        kde.add_sample(x)
    xs = np.linspace(-30, 40, 2001)

    assert scipy.integrate.trapezoid(kde.densities(xs), xs) == pytest.approx(1.0, abs=1e-3)


def test_kernel_estimator_needs_distinct_samples():
    kde = KernelEstimator(bandwidth=1.0)
    kde.add_sample(3.0)
    kde.add_sample(3.0)

    with pytest.raises(ValueError):
        kde.density(3.0)


def test_kernel_estimator_rejects_bad_input():
    with pytest.raises(ValueError):
        KernelEstimator(bandwidth=0.0)
    with pytest.raises(InvalidWeightError):
        KernelEstimator(bandwidth=1.0).add_sample(1.0, weight=-1.0)


def test_estimated_pdf_default_bandwidth():
    pdf = EstimatedPdf([1.0, 2.0, 5.0])

    assert pdf.kde.bandwidth == pytest.approx(5.0 / 10000)
    assert pdf.density(2.0) > pdf.density(50.0)


def test_estimated_pdf_make_pmf():
    pdf = EstimatedPdf([1.0, 2.0, 5.0], bandwidth=0.5)
    xs = [0.0, 1.0, 2.0, 3.0]
    pmf = pdf.make_pmf(xs)

    assert sorted(pmf) == xs
    assert pmf.prob(2.0) == pytest.approx(pdf.density(2.0))


def test_estimated_pdf_empty_sample():
    with pytest.raises(EmptyDistributionError):
        EstimatedPdf([])
# endregion


def test_interpolator():
    interp = Interpolator([0.0, 1.0, 3.0], [0.0, 10.0, 20.0])

    assert interp.lookup(0.5) == pytest.approx(5.0)
    assert interp.lookup(2.0) == pytest.approx(15.0)
    assert interp.lookup(-1.0) == 0.0
    assert interp.lookup(9.0) == 20.0
    assert interp.reverse(15.0) == pytest.approx(2.0)
