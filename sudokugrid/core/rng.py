"""Random sources for solving and generation.

A process-wide seed source hands out independent ``random.Random`` instances.
Reseeding it with :func:`set_random_seed` makes every later call that did not
receive an explicit source reproducible.
"""

from __future__ import annotations
import random
import threading
from typing import Optional

_lock = threading.Lock()
_seed_source: Optional[random.Random] = None


def _source() -> random.Random:
    global _seed_source
    if _seed_source is None:
        _seed_source = random.Random()
    return _seed_source


def set_random_seed(seed: int) -> None:
    """Reseed the process-wide seed source."""
    with _lock:
        _source().seed(seed)


def new_rng(seed: Optional[int] = None) -> random.Random:
    """
    Create an independent random source.

    Args:
        seed: Explicit seed. If None, one is drawn from the process-wide source.

    Returns:
        A fresh ``random.Random`` owned by the caller.
    """
    if seed is None:
        with _lock:
            seed = _source().getrandbits(64)
    return random.Random(seed)
