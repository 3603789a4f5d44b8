from . import adapters, primenum

MAX_COUNT = 100000


def handler(params, context):
    print("Will count", MAX_COUNT, "primes")

    result = primenum.run(MAX_COUNT)

    return {
        "function": "prime_number",
        "target_count": MAX_COUNT,
        "primes_found": result.primes_found,
        "last_prime": result.last_prime,
        "iterations": result.candidates_scanned,
        "time": result.elapsed_millis,
    }


def cold_start(params, context):
    return adapters.probe()
