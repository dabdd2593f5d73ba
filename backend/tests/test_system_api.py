"""
System endpoints and global error handling
"""
import inspect

from fastapi.routing import APIRoute

from config import settings
from main import app


def test_status_reports_database(client):
    res = client.get("/api/system/status")

    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["database"]["connected"] is True
    assert body["backend"]["version"] == settings.VERSION


def test_info(client):
    body = client.get("/api/system/info").json()
    assert body["platform_name"] == settings.PROJECT_NAME
    assert body["environment"] == settings.ENVIRONMENT


def test_unknown_route_uses_envelope(client):
    res = client.get("/api/nothing-here")
    assert res.status_code == 404
    assert res.json() == {"success": False, "message": "Not Found"}


def test_method_not_allowed_uses_envelope(client, website):
    res = client.put(f"/api/ftp/{website.id}")
    assert res.status_code == 405
    assert res.json()["success"] is False


def test_api_handlers_run_in_threadpool():
    routes = [route for route in app.routes if isinstance(route, APIRoute) and route.path.startswith("/api/")]
    assert routes
    for route in routes:
        assert not inspect.iscoroutinefunction(route.endpoint), route.path
