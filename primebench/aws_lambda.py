"""
AWS Lambda entry points.

Configure ``primebench.aws_lambda.handler`` for the prime benchmark and
``primebench.aws_lambda.cold_start`` for the invocation latency probe.
"""
from .adapters import http_response, invoke, probe

MAX_COUNT = 500000


def handler(event, context):
    print("Will count", MAX_COUNT, "primes")
    return http_response(invoke(MAX_COUNT))


def cold_start(event, context):
    return http_response(probe())
