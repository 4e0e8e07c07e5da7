"""Random snowflake coordinates for the scene."""

import logging
import random
import time
from typing import NamedTuple

logger = logging.getLogger("xmascard.snow")

# Seeded once per process from the wall clock; two runs within the same tick may share a pattern.
_rng = random.Random(time.time())


class Snowflake(NamedTuple):
    x: int
    y: int


def generate_snow(
    count: int = 85, *, width: int = 60, height: int = 18, rng: random.Random | None = None
) -> list[Snowflake]:
    """Return `count` flakes drawn uniformly from [0, width) x [0, height). Duplicates are allowed."""
    rng = rng or _rng
    snow = [Snowflake(rng.randrange(width), rng.randrange(height)) for _ in range(max(count, 0))]
    logger.debug(f"Generated {len(snow)} snowflakes on a {width}x{height} canvas")
    return snow
