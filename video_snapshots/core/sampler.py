"""Random snapshot timestamps."""

import random
from typing import List, Optional

from video_snapshots.config.config import (
    SAMPLING_WINDOW_END_PERCENT,
    SAMPLING_WINDOW_START_PERCENT,
)
from video_snapshots.exceptions import (
    ConfigError,
    InsufficientDurationError,
    InvalidDurationError,
)


def sampling_window(duration: int, count: int):
    """Return (start, end, interval) in whole seconds.

    The window spans 5% to 35% of the duration and is split into
    count + 1 equal intervals.
    """
    start = duration * SAMPLING_WINDOW_START_PERCENT // 100
    end = duration * SAMPLING_WINDOW_END_PERCENT // 100
    interval = (end - start) // (count + 1)
    return start, end, interval


def generate_random_times(
    duration: int,
    count: int,
    rng: Optional[random.Random] = None,
) -> List[int]:
    """Generate sufficiently spaced random times.

    Each time is the previous one (the window start for the first) plus one
    interval plus a random offset in [0, interval - 1), so times strictly
    increase and are at least one interval apart.
    The window only bounds the first time: later times keep stepping by
    up to two intervals, so they can land past 35% of the duration.
    """
    if count < 1:
        raise ConfigError(f"Number of screenshots must be a positive integer, got {count}")

    start, end, interval = sampling_window(duration, count)
    if end <= start or interval <= 0:
        raise InsufficientDurationError(
            f"Video of {duration}s is too short for {count} snapshots"
        )
    if interval - 1 <= 0:
        raise InvalidDurationError(
            f"Interval of {interval}s between {count} snapshots is too small "
            f"to randomize (video duration {duration}s)"
        )

    rng = rng or random.Random()
    times: List[int] = []
    last_time = start
    for _ in range(count):
        last_time = last_time + interval + rng.randrange(interval - 1)
        times.append(last_time)
    return times
