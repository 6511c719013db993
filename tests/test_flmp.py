import math

import pytest

from gravharmonics.flmp import Flmp


def complex_flmp(flmp, l, m, p):
    return ((1j) ** (l - m) * flmp.flmp(l, m, p)).real


@pytest.fixture(scope="module")
def values100():
    return Flmp(100, 109.9 * math.pi / 180)


@pytest.fixture(scope="module")
def derivatives100():
    return Flmp(100, 25 * math.pi / 180, True)


@pytest.mark.parametrize(
    "l, m, p, expected",
    [
        (15, 15, 7, 0.163727788669698),
        (17, 15, 8, 0.487417791777481),
        (19, 15, 9, 0.039444885080361),
        (21, 15, 10, -0.334234993689438),
        (23, 15, 11, 0.238101170358486),
        (25, 15, 12, 0.035197122324998),
        (27, 15, 13, -0.238961053270882),
        (29, 15, 14, 0.250820102027528),
        (31, 15, 15, -0.098284229213865),
        (33, 15, 16, -0.099812590952652),
        (35, 15, 17, 0.220401483107786),
        (37, 15, 18, -0.203459255803049),
        (39, 15, 19, 0.072853902584608),
        (41, 15, 20, 0.089117362850045),
        (43, 15, 21, -0.192487848426302),
        (45, 15, 22, 0.186917527873700),
        (47, 15, 23, -0.083106948025162),
        (49, 15, 24, -0.058636531371390),
        (51, 15, 25, 0.163214940273027),
        (53, 15, 26, -0.179533365185972),
        (55, 15, 27, 0.104101730627469),
        (57, 15, 28, 0.020582796611666),
        (59, 15, 29, -0.129982540091162),
    ],
)
def test_value_100(values100, l, m, p, expected):
    assert complex_flmp(values100, l, m, p) == pytest.approx(expected, abs=1e-10)


@pytest.mark.parametrize(
    "l, m, p, expected",
    [
        (15, 15, 7, 0.000193588834461),
        (17, 15, 8, 0.002962643282053),
        (19, 15, 9, 0.019210738800719),
        (21, 15, 10, 0.080996204022307),
        (23, 15, 11, 0.254529309868877),
        (25, 15, 12, 0.635791817300206),
        (27, 15, 13, 1.304718954007593),
        (29, 15, 14, 2.229338572015512),
        (31, 15, 15, 3.154511340102659),
        (33, 15, 16, 3.561310705132132),
        (35, 15, 17, 2.797301141098675),
        (59, 15, 29, 7.135563481217891),
        (61, 15, 30, 13.533758345144610),
        (63, 15, 31, 12.842455780020720),
        (65, 15, 32, 4.896633828451622),
        (67, 15, 33, 6.247154772263426),
        (69, 15, 34, 14.285109814165770),
        (71, 15, 35, 14.262965486747120),
        (73, 15, 36, 5.729761501008049),
    ],
)
def test_derivative_100(derivatives100, l, m, p, expected):
    assert abs(derivatives100.dflmp(l, m, p)) == pytest.approx(expected, abs=1e-10)


def test_degree_zero_is_unity():
    flmp = Flmp(3, 0.7)
    assert flmp.flmp(0, 0, 0) == pytest.approx(1.0, abs=1e-14)


def test_degree_zero_derivative_vanishes():
    flmp = Flmp(3, 0.7, True)
    assert flmp.dflmp(0, 0, 0) == pytest.approx(0.0, abs=1e-14)


def test_flmk_matches_flmp_indexing(values100):
    for p in range(0, 21):
        assert values100.flmk(20, 7, 20 - 2 * p) == values100.flmp(20, 7, p)


@pytest.mark.parametrize("k", [-11, 11, 50])
def test_flmk_outside_degree_is_zero(values100, k):
    assert values100.flmk(10, 3, k) == 0.0


def test_dflmk_outside_degree_is_zero(derivatives100):
    assert derivatives100.dflmk(10, 3, -12) == 0.0


def test_derivative_matches_finite_difference():
    inclination = 0.9
    step = 1e-6
    upper = Flmp(12, inclination + step)
    lower = Flmp(12, inclination - step)
    flmp = Flmp(12, inclination, True)
    for l, m, p in [(4, 2, 1), (7, 3, 2), (12, 5, 6), (9, 9, 4)]:
        numeric = (upper.flmp(l, m, p) - lower.flmp(l, m, p)) / (2 * step)
        assert flmp.dflmp(l, m, p) == pytest.approx(numeric, rel=1e-6, abs=1e-8)


def test_l_max_and_inclination_are_kept():
    flmp = Flmp(6, 1.2)
    assert (flmp.l_max, flmp.inclination) == (6, 1.2)


def test_derivatives_require_flag():
    flmp = Flmp(5, 0.5)
    with pytest.raises(RuntimeError):
        flmp.dflmp(2, 1, 0)


def test_flmk_star_requires_derivatives():
    flmp = Flmp(5, 0.5)
    with pytest.raises(RuntimeError):
        flmp.flmk_star(3, 1, 1)


@pytest.mark.parametrize("l, m, p", [(6, 0, 0), (3, 4, 0), (-1, 0, 0), (3, 1, 4), (3, 1, -1)])
def test_out_of_range_indices_raise(l, m, p):
    flmp = Flmp(5, 0.5)
    with pytest.raises(IndexError):
        flmp.flmp(l, m, p)


def test_negative_degree_rejected():
    with pytest.raises(ValueError):
        Flmp(-1, 0.5)


def test_polar_derivatives_undefined():
    with pytest.raises(ValueError):
        Flmp(2, math.pi / 2, True)