import functions_framework

from .adapters import STATUS_OK, invoke, probe

MAX_COUNT = 100000


@functions_framework.http
def prime(request):
    print("Will count", MAX_COUNT, "primes")
    # Flask serializes the dict as JSON
    return invoke(MAX_COUNT), STATUS_OK


@functions_framework.http
def cold_start(request):
    return probe(), STATUS_OK
