"""Random source injection shared by every demo component."""
import numpy as np
from typing import Optional


def make_rng(rng: Optional[np.random.Generator] = None,
             seed: Optional[int] = None) -> np.random.Generator:
    """
    Return the generator to draw "measurements" from.

    Args:
        rng: Injected generator. Anything exposing ``random(size=None)``
            and ``integers(low, high)`` works, so tests can pass stubs.
        seed: Seed for a fresh generator when ``rng`` is not given
            (for testing only - defeats the point of quantum randomness!)
    """
    if rng is not None:
        return rng
    return np.random.default_rng(seed)
