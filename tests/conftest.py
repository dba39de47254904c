import json

import httpx
import pytest

from notion_cli.settings import Settings


def text(content):
    return {"type": "text", "text": {"content": content, "link": None}, "plain_text": content}


class FakeNotion:
    """Stands in for api.notion.com: canned responses keyed by (method, path)."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, method, path, body, status=200):
        self.routes[(method, path)] = (status, body)

    def handler(self, request):
        self.requests.append(request)
        path = request.url.path[len("/v1/"):]
        status, body = self.routes.get(
            (request.method, path),
            (500, {"object": "error", "code": "internal_server_error", "message": f"unexpected {path}"}),
        )
        if isinstance(body, (dict, list)):
            return httpx.Response(status, json=body)
        return httpx.Response(status, text=body)

    @property
    def transport(self):
        return httpx.MockTransport(self.handler)

    def body(self, index=0):
        return json.loads(self.requests[index].content)


@pytest.fixture
def fake_notion():
    return FakeNotion()


@pytest.fixture
def settings():
    return Settings(notion_token="secret_test", title_property="Name")


@pytest.fixture
def page_obj():
    return {
        "object": "page",
        "id": "59833787-2cf9-4fdf-8782-e53db20768a5",
        "url": "https://www.notion.so/Task-598337872cf94fdf8782e53db20768a5",
        "created_time": "2025-08-12T12:00:00.000Z",
        "last_edited_time": "2025-08-12T12:01:00.000Z",
        "properties": {
            "Name": {"id": "title", "type": "title", "title": [text("Write "), text("docs")]},
            "Status": {"id": "s1", "type": "select", "select": {"name": "Done", "color": "green"}},
            "Tags": {"id": "t1", "type": "multi_select", "multi_select": [{"name": "a"}, {"name": "b"}]},
            "Estimate": {"id": "e1", "type": "number", "number": 0},
            "Shipped": {"id": "c1", "type": "checkbox", "checkbox": False},
            "Owner": {"id": "p1", "type": "people", "people": [{"object": "user", "id": "u1"}]},
        },
    }


@pytest.fixture
def database_obj():
    return {
        "object": "database",
        "id": "abcdef12-3456-7890-abcd-ef1234567890",
        "url": "https://www.notion.so/abcdef1234567890abcdef1234567890",
        "created_time": "2025-08-01T00:00:00.000Z",
        "last_edited_time": "2025-08-02T00:00:00.000Z",
        "title": [text("Tasks")],
        "properties": {
            "Name": {"id": "title", "name": "Name", "type": "title", "title": {}},
            "Status": {"id": "s1", "name": "Status", "type": "select", "select": {"options": []}},
        },
    }


def not_found_body(message="Could not find page with ID: 59833787-2cf9-4fdf-8782-e53db20768a5."):
    return {"object": "error", "status": 404, "code": "object_not_found", "message": message}
