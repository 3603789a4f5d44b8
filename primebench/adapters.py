"""
Platform-agnostic half of every handler.

Each platform module calls ``invoke`` or ``probe`` and wraps the returned
body in whatever response object its runtime expects.
"""
import json

from . import coldstart, primenum

STATUS_OK = 200


def invoke(target_count):
    result = primenum.run(target_count)
    print(f"Found {result.primes_found} primes in {result.elapsed_millis} ms (last: {result.last_prime})")
    return result.to_body()


def probe():
    return coldstart.now().to_body()


def http_response(body):
    """Lambda proxy style response: status code plus a JSON string body."""
    return {"statusCode": STATUS_OK, "body": json.dumps(body)}
