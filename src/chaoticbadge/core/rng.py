"""Per-thread random source for mosaic jitter and shading.

Each thread lazily gets its own ``random.Random``, so concurrent renders never
share generator state. Functions that need randomness accept an explicit
generator and only fall back to this one when none is given.
"""

import random
import threading

_local = threading.local()


def thread_random() -> random.Random:
    """Return the calling thread's random generator, creating it on first use."""
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = random.Random()
        _local.rng = rng
    return rng


def resolve_rng(rng: random.Random | None) -> random.Random:
    """Return ``rng`` if given, else the calling thread's generator."""
    return rng if rng is not None else thread_random()
