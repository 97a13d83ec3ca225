"""
Shared fixtures: a scripted in-memory server behind httpx.MockTransport.
"""
import json
from collections import defaultdict

import httpx
import pytest

from minds import Client, DatabaseConfig
from minds.minds.schemas import Mind


class FakeServer:
    """Routes requests by (method, path) to queued responses and records every call.

    A route keeps answering with its last response once its queue is down to one.
    """

    def __init__(self):
        self.routes = defaultdict(list)
        self.calls = []

    def add(self, method, path, status=200, json_body=None, text=None):
        self.routes[(method, path)].append((status, json_body, text))

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path.startswith("/api/"):
            path = path[len("/api/"):]
        body = json.loads(request.content) if request.content else None
        self.calls.append((request.method, path, body))

        queue = self.routes.get((request.method, path))
        if not queue:
            return httpx.Response(404, text=f"no route for {request.method} {path}")
        status, json_body, text = queue.pop(0) if len(queue) > 1 else queue[0]
        if json_body is not None:
            return httpx.Response(status, json=json_body)
        return httpx.Response(status, text=text or "")

    def methods(self):
        return [(method, path) for method, path, _ in self.calls]

    def last_body(self, method, path):
        for m, p, body in reversed(self.calls):
            if m == method and p == path:
                return body
        return None


@pytest.fixture
def server():
    return FakeServer()


@pytest.fixture
def client(server):
    c = Client("test-key", "https://mdb.ai", transport=httpx.MockTransport(server.handler))
    yield c
    c.close()


@pytest.fixture
def example_config():
    return DatabaseConfig(
        name="example_ds",
        engine="postgres",
        description="Minds example database",
        connection_data={
            "user": "demo_user",
            "password": "demo_password",
            "host": "samples.mindsdb.com",
            "port": "5432",
            "database": "demo",
            "schema": "demo_data",
        },
        tables=["house_sales"],
    )


@pytest.fixture
def example_ds_record(example_config):
    return example_config.model_dump()


@pytest.fixture
def mind_record():
    return {
        "name": "mind_name",
        "model_name": "gpt-4o",
        "provider": "openai",
        "parameters": {"prompt_template": "{{input}}", "temperature": 0},
        "datasources": ["example_ds"],
        "created_at": "2024-10-01T10:00:00",
        "updated_at": "2024-10-01T10:00:00",
    }


@pytest.fixture
def mind(client, mind_record):
    return Mind.from_response(mind_record, client.minds)
