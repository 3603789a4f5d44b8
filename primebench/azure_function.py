import json

import azure.functions as func

from .adapters import STATUS_OK, invoke, probe

MAX_COUNT = 100000


def _json_response(body):
    return func.HttpResponse(
        json.dumps(body),
        status_code=STATUS_OK,
        mimetype="application/json",
    )


def main(req: func.HttpRequest) -> func.HttpResponse:
    print("Will count", MAX_COUNT, "primes")
    return _json_response(invoke(MAX_COUNT))


def cold_start(req: func.HttpRequest) -> func.HttpResponse:
    return _json_response(probe())
