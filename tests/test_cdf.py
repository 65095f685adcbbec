import numpy as np
import pytest

from thinkbayes import Cdf, EmptyDistributionError, Pmf, ZeroMassError, make_cdf_from_items


def get_test_cdf():
    # quarters at 1..4
    return Pmf.from_values([4, 2, 3, 1]).make_cdf(name='quarters')


def test_cdf_from_pmf_is_sorted():
    cdf = get_test_cdf()

    assert cdf.xs == (1, 2, 3, 4)
    assert cdf.ps == pytest.approx((0.25, 0.5, 0.75, 1.0))
    assert cdf.name == 'quarters'


def test_cdf_normalizes_unnormalized_pmf():
    cdf = Pmf({'a': 1, 'b': 3}).make_cdf()

    assert cdf.prob('a') == pytest.approx(0.25)


def test_cdf_from_values():
    cdf = Cdf.from_values([3, 1, 1, 2])

    assert cdf.xs == (1, 2, 3)
    assert cdf.prob(1) == pytest.approx(0.5)


def test_cdf_from_all_zero_items_raises():
    with pytest.raises(ZeroMassError):
        make_cdf_from_items([(1, 0), (2, 0)])


def test_cdf_requires_matching_lengths():
    with pytest.raises(ValueError):
        Cdf([1, 2], [1.0])


def test_prob_outside_support():
    cdf = get_test_cdf()

    assert cdf.prob(0) == 0.0
    assert cdf.prob(2.5) == pytest.approx(0.5)
    assert cdf.prob(4) == 1.0
    assert cdf.prob(100) == 1.0


def test_prob_after_last_value_of_short_cdf():
    cdf = Cdf([1, 2], [0.2, 0.5])

    assert cdf.prob(2) == 0.5
    assert cdf.prob(5) == 0.5


def test_percentile():
    cdf = get_test_cdf()

    assert cdf.percentile(0) == 1
    assert cdf.percentile(0.25) == 1
    assert cdf.percentile(0.26) == 2
    assert cdf.percentile(1) == 4
    assert cdf.value(0.6) == 3


def test_percentile_is_monotonic():
    cdf = Pmf({1: 0.1, 5: 0.05, 7: 0.3, 9: 0.15, 12: 0.4}).make_cdf()
    values = [cdf.percentile(p) for p in np.linspace(0, 1, 101)]

    assert values == sorted(values)


def test_percentile_out_of_range():
    with pytest.raises(ValueError):
        get_test_cdf().percentile(1.5)
    with pytest.raises(ValueError):
        get_test_cdf().percentile(float('nan'))


def test_empty_cdf_queries_raise():
    cdf = Pmf().make_cdf()

    assert len(cdf) == 0
    with pytest.raises(EmptyDistributionError):
        cdf.percentile(0.5)
    with pytest.raises(EmptyDistributionError):
        cdf.sample(0.5)


def test_credible_interval():
    assert get_test_cdf().credible_interval(0.5) == (1, 3)


def test_sample_inverse_transform():
    cdf = get_test_cdf()

    assert cdf.sample(0.0) == 1
    assert cdf.sample(0.6) == 3
    assert cdf.sample(0.999) == 4


def test_samples_with_generator():
    cdf = get_test_cdf()
    draws = cdf.samples(50, np.random.default_rng(1))

    assert len(draws) == 50
    assert set(draws) <= {1, 2, 3, 4}
    assert cdf.random(np.random.default_rng(1)) == draws[0]


def test_mean():
    assert get_test_cdf().mean() == pytest.approx(2.5)


def test_shift_and_scale():
    cdf = get_test_cdf()

    assert cdf.shift(1).xs == (2, 3, 4, 5)
    assert cdf.scale(2).xs == (2, 4, 6, 8)
    assert cdf.scale(2).ps == cdf.ps


def test_make_pmf_round_trip():
    pmf = Pmf({1: 0.1, 2: 0.6, 3: 0.3})
    back = pmf.make_cdf().make_pmf()

    for x in pmf:
        assert back.prob(x) == pytest.approx(pmf.prob(x))


def test_iteration_yields_pairs():
    cdf = get_test_cdf()

    assert [x for x, _ in cdf] == [1, 2, 3, 4]
    assert cdf.items() == list(cdf)


def test_render_step_function():
    xs, ps = Cdf([1, 2], [0.5, 1.0]).render()

    assert xs == [1, 1, 2, 2]
    assert ps == [0.0, 0.5, 0.5, 1.0]
