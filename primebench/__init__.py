"""Prime-counting benchmark and cold-start probe for serverless platforms."""

from .coldstart import ColdStartResult, now
from .primenum import BenchmarkResult, InvalidArgument, is_prime, iter_primes, run

__all__ = [
    "BenchmarkResult",
    "ColdStartResult",
    "InvalidArgument",
    "is_prime",
    "iter_primes",
    "now",
    "run",
]
