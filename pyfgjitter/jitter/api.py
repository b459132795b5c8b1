"""
Randomized delays for rate limiting and retries
-----------------------------------------------

A :class:`JitterSpec` describes the half-open interval `[min, min + span)` from which a random
offset is drawn.  Adding such an offset to a wait period ensures that many tasks waiting on the
same rate limit don't all wake up (and retry) at the same time.

Examples:

    >>> from datetime import timedelta
    >>> reference = timedelta(seconds=24)
    >>> jitter = JitterSpec(min=timedelta(seconds=1), span=timedelta(seconds=1))
    >>> result = jitter.apply_to_duration(reference)
    >>> reference + timedelta(seconds=1) <= result < reference + timedelta(seconds=2)
    True
"""

import random
from dataclasses import dataclass
from datetime import datetime
from datetime import timedelta
from typing import Optional
from typing import Protocol
from typing import Union

from pyfgjitter.util import saturating_add_durations
from pyfgjitter.util import saturating_add_to_instant


class RandomSource(Protocol):
    """A source of uniform random values in `[0.0, 1.0)`.

    The :mod:`random` module, :class:`random.Random`, and :class:`random.SystemRandom` all
    satisfy this protocol.
    """

    def random(self) -> float:
        ...


# The default jitter width in seconds for :func:`add_jitter`
DEFAULT_JITTER_WIDTH: int = 2

# The number of microseconds in a second, the resolution of a `timedelta`
_MICROS_PER_SECOND: int = 1_000_000


def _to_micros(duration: timedelta) -> int:
    """The whole number of microseconds in the given (non-negative) duration."""
    return (duration.days * 86_400 + duration.seconds) * _MICROS_PER_SECOND + duration.microseconds


@dataclass(frozen=True)
class JitterSpec:
    """An interval specification for deviating from a nominal wait time.

    Samples are drawn uniformly from `[min, min + span)`, at microsecond resolution.

    Attributes:
        min: the smallest offset to add, inclusive
        span: the width of the interval on top of `min`
    """

    min: timedelta
    span: timedelta

    def __post_init__(self) -> None:
        assert self.min >= timedelta(0), f"Minimum jitter must be >= 0: {self.min}"
        assert self.span >= timedelta(0), f"Jitter span must be >= 0: {self.span}"

    @classmethod
    def up_to(cls, max: timedelta) -> "JitterSpec":
        """Builds a jitter interval adding at most `max` (exclusive)."""
        return cls(min=timedelta(0), span=max)

    @classmethod
    def from_seconds(
        cls, min: Union[int, float] = 0, span: Union[int, float] = 0
    ) -> "JitterSpec":
        """Builds a jitter interval from the given number of seconds.

        Args:
            min: the smallest offset in seconds, must be >= 0
            span: the width of the interval in seconds, must be >= 0
        """
        return cls(min=timedelta(seconds=min), span=timedelta(seconds=span))

    @property
    def max(self) -> timedelta:
        """The exclusive upper bound of the interval."""
        return saturating_add_durations(self.min, self.span)

    def sample(self, rng: Optional[RandomSource] = None) -> timedelta:
        """Returns a random amount of jitter within the configured interval.

        The offset is computed in whole microseconds and truncated, so the result is never equal
        to the upper bound.  A zero span returns `min` without drawing from the random source.

        Args:
            rng: the source of randomness, or None to use the :mod:`random` module
        """
        span_micros = _to_micros(self.span)
        if span_micros == 0:
            return self.min
        source: RandomSource = random if rng is None else rng
        offset_micros = min(int(span_micros * source.random()), span_micros - 1)
        return saturating_add_durations(self.min, timedelta(microseconds=offset_micros))

    def apply_to_duration(
        self, duration: timedelta, rng: Optional[RandomSource] = None
    ) -> timedelta:
        """Adds a jitter sample to the given wait duration, saturating at `timedelta.max`."""
        return saturating_add_durations(self.sample(rng=rng), duration)

    def apply_to_instant(self, instant: datetime, rng: Optional[RandomSource] = None) -> datetime:
        """Adds a jitter sample to the given point in time, saturating at `datetime.max`."""
        return saturating_add_to_instant(instant, self.sample(rng=rng))

    def apply_to_timestamp(self, timestamp: float, rng: Optional[RandomSource] = None) -> float:
        """Adds a jitter sample to a clock reading in seconds, e.g. from `time.monotonic()`."""
        return timestamp + self.sample(rng=rng).total_seconds()

    def __str__(self) -> str:
        return f"[{self.min}, {self.max})"


# The "empty" jitter interval, which never adds any jitter.
NO_JITTER: JitterSpec = JitterSpec(min=timedelta(0), span=timedelta(0))


def add_jitter(
    delay: Union[int, float] = 0,
    width: Union[int, float] = DEFAULT_JITTER_WIDTH,
    minima: Union[int, float] = 0,
    rng: Optional[RandomSource] = None,
) -> float:
    """Apply a jitter centered around the delay, to help avoid hitting API rate limits when
    many concurrent callers poll the same service.

    Args:
        delay: the number of seconds to wait upon making a subsequent request
        width: the width for the random jitter, centered around delay, must be > 0
        minima: the minimum delay allowed, must be >= 0
        rng: the source of randomness, or None to use the :mod:`random` module

    Returns:
        the new delay in seconds, drawn from `[lower, upper)` where
        `lower = max(minima, delay - width)` and `upper = max(minima, delay) + width`
    """
    assert width > 0, f"Width must be > 0: {width}"
    assert minima >= 0, f"Minima must be >= 0: {minima}"
    delay = max(0, delay)
    lower = max(minima, delay - width)
    upper = max(minima, delay) + width
    offset = JitterSpec.from_seconds(span=upper - lower).sample(rng=rng)
    return lower + offset.total_seconds()
