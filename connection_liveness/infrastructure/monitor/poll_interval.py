"""Poll interval and staleness calculations.

The interval grows exponentially with consecutive stale cycles and is
perturbed by jitter so that many clients do not poll in lockstep:

    backoff  = (1 + rate) ** min(attempts, max_exponent)
    jitter   = (1 if attempts == 0 else rate) * uniform[0, 1)
    interval = threshold * 1000 * backoff * (1 + jitter)     (milliseconds)

Right after a successful connect the jitter window is wide (up to twice the
threshold). While backing off it is narrow, so backoff growth dominates.
"""

import math
import random
from typing import Optional

from ...const import MAX_BACKOFF_EXPONENT, RECONNECTION_BACKOFF_RATE, STALE_THRESHOLD


def calculate_poll_interval(
    reconnect_attempts: int,
    rng: Optional[random.Random] = None,
    stale_threshold: float = STALE_THRESHOLD,
    backoff_rate: float = RECONNECTION_BACKOFF_RATE,
    max_exponent: int = MAX_BACKOFF_EXPONENT,
) -> float:
    """Calculate the delay before the next staleness check.

    Args:
        reconnect_attempts: Consecutive stale cycles since the last connect
        rng: Random generator for jitter (default: module-level generator)
        stale_threshold: Stale threshold in seconds
        backoff_rate: Growth rate per attempt
        max_exponent: Cap on the backoff exponent

    Returns:
        Interval in milliseconds

    Example:
        >>> 6000 <= calculate_poll_interval(0) < 12000
        True
    """
    backoff = math.pow(1 + backoff_rate, min(reconnect_attempts, max_exponent))
    jitter_max = 1 if reconnect_attempts == 0 else backoff_rate
    jitter = jitter_max * (rng or random).random()
    return stale_threshold * 1000 * backoff * (1 + jitter)


def seconds_since(timestamp: Optional[float], now: float) -> float:
    """Seconds elapsed since ``timestamp``; infinite if it never happened."""
    if timestamp is None:
        return math.inf
    return now - timestamp


def is_stale(
    refreshed_at: Optional[float],
    now: float,
    stale_threshold: float = STALE_THRESHOLD,
) -> bool:
    """Check if activity is older than the threshold (strictly)."""
    return seconds_since(refreshed_at, now) > stale_threshold
