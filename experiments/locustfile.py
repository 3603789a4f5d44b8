import time
import csv
import json
import os
from locust import HttpUser, task, events, constant

CSV_FILE = "experiment_results.csv"
CSV_HEADER = [
    "timestamp",
    "platform",
    "function",
    "server_time_ms",
    "invocation_latency_ms",
    "status_code",
    "run_label",
    "locust_response_time",
]


def unwrap_body(data):
    # Serverledge wraps the function output in "Result", as a JSON string
    if not isinstance(data, dict) or "Result" not in data:
        return data
    result = data["Result"]
    if isinstance(result, str):
        try:
            result = json.loads(result)
        except ValueError:
            return None
    return result


def build_row(name, body, status_code, response_time, received_at, run_label):
    # request names are "<platform>/<function>"
    platform, _, function = name.partition("/")
    body = unwrap_body(body)

    server_time = "unknown"
    invocation_latency = "unknown"
    if isinstance(body, dict):
        if "time" in body:
            server_time = body["time"]
        if "date" in body:
            invocation_latency = int(received_at * 1000) - body["date"]

    return [
        received_at,
        platform,
        function,
        server_time,
        invocation_latency,
        status_code,
        run_label,
        response_time,
    ]


def build_failed_row(name, exception, response_time, received_at, run_label):
    platform, _, function = name.partition("/")
    return [
        received_at,
        platform,
        function,
        "unknown",  # Nessun tempo dal server
        "unknown",
        f"FAILED: {type(exception).__name__}",
        run_label,
        response_time or 0,
    ]


def append_row(row):
    with open(CSV_FILE, "a", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(row)


@events.test_start.add_listener
def on_test_start(environment, **kwargs):
    if not os.path.exists(CSV_FILE):
        with open(CSV_FILE, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(CSV_HEADER)


@events.request.add_listener
def on_request(request_type, name, response_time, response_length, response, exception, context, **kwargs):
    run_label = os.environ.get("RUN_LABEL", "unknown")
    received_at = time.time()

    if exception:
        print(f"Request failed: {exception}")
        append_row(build_failed_row(name, exception, response_time, received_at, run_label))
        return

    try:
        body = response.json()
    except Exception:
        body = None

    append_row(build_row(name, body, response.status_code, response_time, received_at, run_label))


# --- CLASSI UTENTE ---

class PlatformUser(HttpUser):
    abstract = True
    wait_time = constant(1.0)

    platform = "unknown"
    prime_path = "/"
    cold_start_path = "/"

    def invoke(self, path, function):
        self.client.get(path, name=f"{self.platform}/{function}")

    @task
    def prime(self):
        self.invoke(self.prime_path, "prime")

    @task
    def cold_start(self):
        self.invoke(self.cold_start_path, "cold_start")


class AwsUser(PlatformUser):
    host = os.environ.get("AWS_HOST")
    weight = 1 if host else 0
    platform = "aws"
    prime_path = "/default/primeNumber"
    cold_start_path = "/default/coldStart"


class AzureUser(PlatformUser):
    host = os.environ.get("AZURE_HOST")
    weight = 1 if host else 0
    platform = "azure"
    prime_path = "/api/primeNumber"
    cold_start_path = "/api/coldStart"


class GcpUser(PlatformUser):
    host = os.environ.get("GCP_HOST")
    weight = 1 if host else 0
    platform = "gcp"
    prime_path = "/prime"
    cold_start_path = "/cold_start"


class ServerledgeUser(PlatformUser):
    host = os.environ.get("SERVERLEDGE_HOST")
    weight = 1 if host else 0
    platform = "serverledge"
    prime_path = "/invoke/prime_number"
    cold_start_path = "/invoke/cold_start"

    def invoke(self, path, function):
        self.client.post(path, json={"params": {}}, name=f"{self.platform}/{function}")
