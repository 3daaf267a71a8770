"""Tests for the FastAPI service mode."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from testgen.errors import MalformedInputError
from testgen.orchestrator import GenerationEngine
from testgen.service import GENERATE_PATH, create_app
from tests._fixtures.java_sources import UNBALANCED, USER_SERVICE


class _StubEngine:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def generate(self, source: str) -> str:
        self.calls.append(source)
        return "class StubTest {}\n"


class _FailingEngine:
    def generate(self, source: str) -> str:
        raise MalformedInputError("Failed to generate tests: Unexpected syntax at line 1, column 1")


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_generate_returns_plain_text(client: TestClient) -> None:
    response = client.post(
        GENERATE_PATH,
        content=USER_SERVICE,
        headers={"Content-Type": "text/plain"},
    )

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == GenerationEngine().generate(USER_SERVICE)


def test_generate_passes_raw_body_to_engine() -> None:
    engine = _StubEngine()
    client = TestClient(create_app(lambda: engine))  # type: ignore[arg-type, return-value]

    response = client.post(GENERATE_PATH, content="class A {}")

    assert response.status_code == 200
    assert response.text == "class StubTest {}\n"
    assert engine.calls == ["class A {}"]


def test_generate_failure_returns_error_message(client: TestClient) -> None:
    response = client.post(GENERATE_PATH, content=UNBALANCED)

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text.startswith("Error generating tests: Failed to generate tests: ")


def test_generate_failure_from_engine_double() -> None:
    client = TestClient(create_app(lambda: _FailingEngine()))  # type: ignore[arg-type, return-value]

    response = client.post(GENERATE_PATH, content="whatever")

    assert response.status_code == 500
    assert response.text == (
        "Error generating tests: Failed to generate tests: Unexpected syntax at line 1, column 1"
    )


def test_generate_rejects_get(client: TestClient) -> None:
    response = client.get(GENERATE_PATH)
    assert response.status_code == 405


def test_cors_preflight_is_allowed(client: TestClient) -> None:
    response = client.options(
        GENERATE_PATH,
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert "POST" in response.headers["access-control-allow-methods"]


def test_cors_origins_are_configurable() -> None:
    client = TestClient(create_app(cors_origins=["http://localhost:5173"]))

    response = client.post(
        GENERATE_PATH,
        content=USER_SERVICE,
        headers={"Origin": "http://localhost:5173"},
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
