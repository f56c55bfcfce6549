"""Tests for the error taxonomy and its HTTP mapping."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.exceptions import ObjectNotFoundError, ValidationError
from shared.errors import AuthRequired, NotFound, RemoteWriteFailed, ValidationFailed
from shared.http import register_exception_handlers


class TestTaxonomy:
    def test_auth_required_message(self):
        assert AuthRequired().message == "Please login to continue."

    def test_remote_write_failed_message(self):
        error = RemoteWriteFailed("clear cart", "timeout")
        assert error.operation == "clear cart"
        assert error.reason == "timeout"
        assert str(error) == "Could not clear cart: timeout"
        assert str(RemoteWriteFailed("place order")) == "Could not place order"

    def test_framework_compatibility(self):
        assert issubclass(ValidationFailed, ValidationError)
        assert issubclass(NotFound, ObjectNotFoundError)


@pytest.fixture()
def client():
    app = FastAPI()

    @app.get("/auth")
    async def auth():
        raise AuthRequired()

    @app.get("/invalid")
    async def invalid():
        raise ValidationFailed({"cart": ["Your cart is empty"]})

    @app.get("/missing")
    async def missing():
        raise NotFound({"_entity": "Order with id 1 does not exist"})

    @app.get("/write")
    async def write():
        raise RemoteWriteFailed("place order", "store unavailable")

    register_exception_handlers(app)
    return TestClient(app)


class TestHttpMapping:
    @pytest.mark.parametrize(
        "path, status",
        [("/auth", 401), ("/invalid", 400), ("/missing", 404), ("/write", 503)],
    )
    def test_status_codes(self, client, path, status):
        assert client.get(path).status_code == status

    def test_remote_write_body(self, client):
        body = client.get("/write").json()
        assert body["operation"] == "place order"
