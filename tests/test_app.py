"""Tests for the App — registration, freezing, and the ASGI lifespan protocol."""

import pytest

from wren.app import App
from wren.config import AppConfig
from wren.errors import ConfigurationError
from wren.routing.route import FileRef, FunctionRoute
from wren.testing import TestClient


class TestRegistration:
    def test_decorator_registers_function_route(self) -> None:
        app = App()

        @app.route("/hello")
        def hello(request, response):
            return "hi"

        assert app.routes["/hello/"] == FunctionRoute(hello)

    def test_registered_routes_win_over_config(self) -> None:
        app = App(AppConfig(routes={"/": "index.html"}))
        app.add_route("/", "home.html")
        assert app.routes["/"] == FileRef("home.html")

    def test_status_page_registration(self) -> None:
        app = App()
        app.add_route(404, "404.html")
        assert app.routes[404] == FileRef("404.html")

    def test_defaults_present(self) -> None:
        assert set(App().routes) == {"/", 403, 404, 500}

    def test_invalid_route_fails_at_freeze(self) -> None:
        app = App(AppConfig(routes={"/": 3.14}))
        with pytest.raises(ConfigurationError):
            app._ensure_frozen()


class TestFreeze:
    def test_cannot_add_route_after_freeze(self) -> None:
        app = App()
        app._ensure_frozen()
        with pytest.raises(RuntimeError, match="must be registered"):
            app.add_route("/late", "late.html")

    def test_cannot_add_hook_after_freeze(self) -> None:
        app = App()
        app._ensure_frozen()
        with pytest.raises(RuntimeError):
            app.on_startup(lambda: None)

    def test_freeze_is_idempotent(self) -> None:
        app = App()
        app._ensure_frozen()
        first = app.routes
        app._ensure_frozen()
        assert app.routes is first


class TestLifespan:
    async def test_startup_and_shutdown(self) -> None:
        app = App()
        events: list[str] = []

        @app.on_startup
        async def start() -> None:
            events.append("start")

        @app.on_shutdown
        def stop() -> None:
            events.append("stop")

        incoming = iter([{"type": "lifespan.startup"}, {"type": "lifespan.shutdown"}])
        sent: list[dict] = []

        async def receive() -> dict:
            return next(incoming)

        async def send(message: dict) -> None:
            sent.append(message)

        await app({"type": "lifespan"}, receive, send)

        assert events == ["start", "stop"]
        assert [m["type"] for m in sent] == [
            "lifespan.startup.complete",
            "lifespan.shutdown.complete",
        ]

    async def test_startup_failure_reported(self) -> None:
        app = App()

        @app.on_startup
        def broken() -> None:
            raise RuntimeError("no database")

        sent: list[dict] = []

        async def receive() -> dict:
            return {"type": "lifespan.startup"}

        async def send(message: dict) -> None:
            sent.append(message)

        await app({"type": "lifespan"}, receive, send)

        assert sent == [{"type": "lifespan.startup.failed", "message": "no database"}]

    async def test_test_client_runs_hooks(self) -> None:
        app = App()
        events: list[str] = []
        app.on_startup(lambda: events.append("start"))
        app.on_shutdown(lambda: events.append("stop"))

        async with TestClient(app) as client:
            response = await client.get("/")
            assert events == ["start"]

        assert events == ["start", "stop"]
        assert response.status == 200
        assert "It works!" in response.text


class TestRun:
    def test_run_delegates_to_server(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[tuple] = []

        def fake_run_server(app, host, port, **kwargs):
            calls.append((app, host, port, kwargs))

        monkeypatch.setattr("wren.server.dev.run_server", fake_run_server)
        app = App(AppConfig(port=9001, debug=True))
        app.run(host="0.0.0.0")

        assert calls == [(app, "0.0.0.0", 9001, {"reload": True, "app_path": None})]
