"""Age band derivation for newly posted events."""

import math
from dataclasses import dataclass

from events.conf import AgeBandPolicy, age_band_policy
from events.exceptions import InvalidInputError


@dataclass(frozen=True)
class AgeBand:
    """Inclusive age range an event is shown to."""

    min_age: int
    max_age: int


def derive_age_band(average_age: float, policy: AgeBandPolicy | None = None) -> AgeBand:
    """Derive the age band for an event from the average age of its audience.

    The band widens logarithmically with the average age:

        spread  = ln(average_age) * spread_multiplier
        min_age = max(floor,   floor(average_age - spread))
        max_age = min(ceiling, ceil(average_age + spread))

    With the default policy an average of 30 gives [16, 44], and an average of 1
    (spread 0) collapses to [1, 1] before being clipped up to [13, 13].

    Args:
        average_age: Mean age of the posting group, or the configured default.
        policy: Floor, ceiling and spread multiplier. Defaults to the settings.

    Returns:
        The derived AgeBand.

    Raises:
        InvalidInputError: If average_age is not positive (the logarithm is undefined).
    """
    if not average_age > 0 or math.isinf(average_age):
        raise InvalidInputError(f"Average age must be a positive number, got {average_age!r}.")

    policy = policy or age_band_policy()
    spread = math.log(average_age) * policy.spread_multiplier
    min_age = max(policy.floor, math.floor(average_age - spread))
    max_age = min(policy.ceiling, math.ceil(average_age + spread))
    # Clipping alone can invert the band when the average sits outside [floor, ceiling]
    if min_age > max_age:
        min_age = max_age = policy.floor if max_age < policy.floor else policy.ceiling
    return AgeBand(min_age=min_age, max_age=max_age)
