import math
import typing as t

import pytest

from events.conf import AgeBandPolicy
from events.exceptions import InvalidInputError
from events.service.age_band import AgeBand, derive_age_band


@pytest.mark.parametrize(
    "average_age,expected",
    [
        (30, AgeBand(16, 44)),  # spread = ln(30) * 4 ~= 13.6
        (25, AgeBand(13, 38)),  # 25 - 12.88 = 12.12 -> floor 12 -> clipped to 13
        (50, AgeBand(34, 66)),  # spread ~= 15.65
        (1, AgeBand(13, 13)),  # spread 0; [1, 1] sits entirely below the floor
        (200, AgeBand(100, 100)),  # band sits entirely above the ceiling
    ],
)
def test_derive_age_band(average_age: float, expected: AgeBand) -> None:
    assert derive_age_band(average_age, AgeBandPolicy()) == expected


def test_band_is_always_ordered_and_within_bounds() -> None:
    policy = AgeBandPolicy()
    for average_age in [0.5, 1, 2, 7.5, 13, 18, 21.3, 45, 80, 99, 100, 130, 1000]:
        band = derive_age_band(average_age, policy)
        assert policy.floor <= band.min_age <= band.max_age <= policy.ceiling


def test_fractional_average_rounds_outwards() -> None:
    band = derive_age_band(30.5, AgeBandPolicy())
    spread = math.log(30.5) * 4
    assert band == AgeBand(math.floor(30.5 - spread), math.ceil(30.5 + spread))


def test_custom_policy() -> None:
    band = derive_age_band(30, AgeBandPolicy(floor=18, ceiling=40, spread_multiplier=4))
    assert band == AgeBand(18, 40)


def test_zero_spread_multiplier_gives_a_point_band() -> None:
    assert derive_age_band(30, AgeBandPolicy(spread_multiplier=0)) == AgeBand(30, 30)


@pytest.mark.parametrize("average_age", [0, -1, -30.5, math.nan, math.inf])
def test_rejects_non_positive_or_non_finite_average(average_age: float) -> None:
    with pytest.raises(InvalidInputError):
        derive_age_band(average_age, AgeBandPolicy())


def test_invalid_input_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        derive_age_band(0)


def test_reads_policy_from_settings(settings: t.Any) -> None:
    settings.DISCOVERY_MIN_AGE = 21
    assert derive_age_band(30) == AgeBand(21, 44)


@pytest.mark.parametrize(
    "policy",
    [
        AgeBandPolicy(floor=-1),
        AgeBandPolicy(floor=50, ceiling=40),
        AgeBandPolicy(spread_multiplier=-1),
    ],
)
def test_invalid_policies_fail_validation(policy: AgeBandPolicy) -> None:
    with pytest.raises(ValueError):
        policy.validate()
