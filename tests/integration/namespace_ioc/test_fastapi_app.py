"""Integration tests for serving resolved namespaces through FastAPI."""

import pytest

pytest.importorskip("fastapi")
pytest.importorskip("httpx")

from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from namespace_ioc import IocContainer
from namespace_ioc.infrastructure.fastapi_integration import (
    ContainerMiddleware,
    create_fastapi_dependency,
    create_method_dependency,
    create_request_dependency,
)
from namespace_ioc.infrastructure.testing import TestContainer


class Counter:
    def __init__(self):
        self.hits = 0

    def hit(self):
        self.hits += 1
        return self.hits


def build_app(container):
    app = FastAPI()
    app.add_middleware(ContainerMiddleware, container=container)

    get_counter = create_fastapi_dependency(container, "Counter")
    get_greeting = create_request_dependency("Greeting")
    get_index = create_method_dependency(container, "HomeController.index")

    @app.get("/hits")
    def hits(counter: Counter = Depends(get_counter)):
        return {"hits": counter.hit()}

    @app.get("/greeting")
    def greeting(value: str = Depends(get_greeting)):
        return {"greeting": value}

    @app.get("/")
    def home(index=Depends(get_index)):
        return index()

    return app


def build_container():
    container = IocContainer()

    class HomeController:
        inject = ["Greeting"]

        def __init__(self, greeting):
            self.greeting = greeting

        def index(self):
            return {"message": self.greeting}

    container.singleton("Counter", lambda c: Counter())
    container.bind("Greeting", lambda c: "hello")
    container.bind("HomeController", lambda c: HomeController)
    return container


class TestFastAPIApp:
    """Test a FastAPI application wired with the container."""

    def test_singleton_shared_across_requests(self):
        """Test that a singleton binding keeps state between requests."""
        client = TestClient(build_app(build_container()))

        assert client.get("/hits").json() == {"hits": 1}
        assert client.get("/hits").json() == {"hits": 2}

    def test_request_dependency_uses_middleware_container(self):
        """Test that the middleware exposes the container to request dependencies."""
        client = TestClient(build_app(build_container()))

        assert client.get("/greeting").json() == {"greeting": "hello"}

    def test_method_dependency_builds_controller(self):
        """Test that controller methods are resolved per request."""
        client = TestClient(build_app(build_container()))

        assert client.get("/").json() == {"message": "hello"}

    def test_test_container_overrides(self):
        """Test swapping a binding for the lifetime of a test."""
        test_container = TestContainer(build_container())
        test_container.mock_transient("Greeting", lambda: "mocked")
        client = TestClient(build_app(test_container))

        assert client.get("/greeting").json() == {"greeting": "mocked"}
        assert client.get("/").json() == {"message": "mocked"}
