import time
import math
from dataclasses import dataclass


class InvalidArgument(ValueError):
    """Raised when the benchmark target is not a positive integer."""


@dataclass(frozen=True)
class BenchmarkResult:
    elapsed_millis: int
    primes_found: int
    last_prime: int
    candidates_scanned: int

    def to_body(self):
        return {"time": self.elapsed_millis}


def is_prime(num):
    if num < 2:
        return False

    # isqrt is exact, so perfect squares always test their own root
    for i in range(2, math.isqrt(num) + 1):
        if num % i == 0:
            return False

    return True


def iter_primes():
    """Yield primes in the order the benchmark loop finds them."""
    candidate = 0
    while True:
        if is_prime(candidate):
            yield candidate
        candidate += 1


def run(target_count):
    """
    Count upward from zero until ``target_count`` primes have been found.

    Walks the same sequence as ``iter_primes`` but only keeps a counter,
    never the primes themselves.
    """
    if isinstance(target_count, bool) or not isinstance(target_count, int):
        raise InvalidArgument(f"target count must be an integer, got {target_count!r}")
    if target_count < 1:
        raise InvalidArgument(f"target count must be positive, got {target_count}")

    found = 0
    last_prime = 0

    start = time.time()

    for prime in iter_primes():
        found += 1
        last_prime = prime
        if found == target_count:
            break

    duration = time.time() - start

    if duration < 0:
        duration = 0.0

    return BenchmarkResult(
        elapsed_millis=int(duration * 1000),
        primes_found=found,
        last_prime=last_prime,
        candidates_scanned=last_prime + 1,
    )
