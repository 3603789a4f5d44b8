import numpy as np
import pytest


@pytest.fixture(scope="session")
def reference_sieve():
    """Boolean primality table for 0..10000 built with a sieve of Eratosthenes."""
    limit = 10000
    flags = np.ones(limit + 1, dtype=bool)
    flags[:2] = False
    for p in range(2, int(limit ** 0.5) + 1):
        if flags[p]:
            flags[p * p::p] = False
    return flags
