"""
Command-line tools for sampling and applying jitter
---------------------------------------------------
"""

import logging
import random
import time
from datetime import timedelta
from typing import List
from typing import Optional

from fgpyo.util.string import column_it

from pyfgjitter.jitter import JitterSpec
from pyfgjitter.util import format_duration

# The number of samples drawn by `sample-jitter` when not given
DEFAULT_SAMPLE_COUNT: int = 10


def sample_jitter(
    *,
    min: timedelta = timedelta(0),
    span: timedelta = timedelta(seconds=1),
    count: int = DEFAULT_SAMPLE_COUNT,
    seed: Optional[int] = None,
    summarize: bool = False,
) -> None:
    """Draws samples from a jitter interval and prints them to standard output.

    Durations may be given with a unit suffix of `us`, `ms`, `s`, `m`, or `h` (ex. `500ms`),
    and are in seconds otherwise.

    Args:
        min: the smallest amount of jitter, inclusive
        span: the width of the jitter interval on top of `--min`
        count: the number of samples to draw
        seed: the seed for the random number generator, otherwise a random seed is used
        summarize: print a summary table of the samples instead of each sample
    """
    assert count > 0, f"Count must be > 0: {count}"

    jitter = JitterSpec(min=min, span=span)
    rng = random.Random(seed)
    samples: List[timedelta] = [jitter.sample(rng=rng) for _ in range(count)]

    if not summarize:
        for sample in samples:
            print(format_duration(sample))
        return None

    ordered: List[timedelta] = sorted(samples)
    mean = sum(samples, timedelta(0)) / len(samples)
    table: List[List[str]] = [
        ["INTERVAL", "COUNT", "MIN", "MAX", "MEAN"],
        [
            str(jitter),
            f"{count:,d}",
            format_duration(ordered[0]),
            format_duration(ordered[-1]),
            format_duration(mean),
        ],
    ]
    print(column_it(table, delimiter="  "))


def sleep_with_jitter(
    *,
    delay: timedelta = timedelta(0),
    min: timedelta = timedelta(0),
    span: timedelta = timedelta(seconds=1),
    seed: Optional[int] = None,
) -> None:
    """Sleeps for a delay plus a random amount of jitter.

    Useful in shell retry loops, so that many concurrent scripts waiting on the same service
    don't all retry at the same time.

    Args:
        delay: the nominal amount of time to wait
        min: the smallest amount of jitter to add, inclusive
        span: the width of the jitter interval on top of `--min`
        seed: the seed for the random number generator, otherwise a random seed is used
    """
    logger = logging.getLogger(__name__)

    jitter = JitterSpec(min=min, span=span)
    wait = jitter.apply_to_duration(delay, rng=random.Random(seed))

    logger.info(f"Sleeping for {format_duration(wait)} (delay {delay} with jitter {jitter})")
    time.sleep(wait.total_seconds())
