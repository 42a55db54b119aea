"""Tests for FastAPI exception handlers."""

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from mortgage_calculator.domain.errors import DomainError, TermTooLargeError, ValidationError
from mortgage_calculator.entrypoints.http.exception_handlers import register_exception_handlers


class _Body(BaseModel):
    amount: int


@pytest.fixture
def app() -> FastAPI:
    """Create a minimal FastAPI app with exception handlers registered."""
    test_app = FastAPI()
    register_exception_handlers(test_app)

    # Add test routes that raise different errors
    @test_app.get("/validation-error")
    def raise_validation_error() -> None:
        raise ValidationError("Validation failed")

    @test_app.get("/validation-error-with-fields")
    def raise_validation_error_with_fields() -> None:
        raise ValidationError(
            errors=[
                {
                    "field": "annual_income",
                    "message": "annual_income is required",
                    "code": "MISSING",
                },
                {
                    "field": "hoa_monthly",
                    "message": "hoa_monthly must be a valid number: 'abc'",
                    "code": "NOT_A_NUMBER",
                },
            ]
        )

    @test_app.get("/term-too-large")
    def raise_term_too_large() -> None:
        raise TermTooLargeError(1500, 1200)

    @test_app.get("/generic-domain-error")
    def raise_generic_domain_error() -> None:
        raise DomainError("Something is off")

    @test_app.post("/body")
    def accept_body(body: _Body) -> dict:
        return {"amount": body.amount}

    @test_app.get("/unexpected-error")
    def raise_unexpected_error() -> dict:
        raise RuntimeError("Something went wrong")

    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(app, raise_server_exceptions=False)


class TestValidationErrorHandler:
    """Tests for ValidationError exception handler."""

    def test_simple_validation_error_returns_400(self, client: TestClient) -> None:
        response = client.get("/validation-error")

        assert response.status_code == 400
        assert response.json() == {
            "detail": "Validation failed",
            "code": "VALIDATION_ERROR",
        }

    def test_validation_error_with_field_errors_returns_400(self, client: TestClient) -> None:
        """ValidationError with field errors returns 400 with errors array."""
        response = client.get("/validation-error-with-fields")

        assert response.status_code == 400
        data = response.json()

        assert data["detail"] == "Validation failed"
        assert data["code"] == "VALIDATION_ERROR"
        assert data["errors"] == [
            {
                "field": "annual_income",
                "message": "annual_income is required",
                "code": "MISSING",
            },
            {
                "field": "hoa_monthly",
                "message": "hoa_monthly must be a valid number: 'abc'",
                "code": "NOT_A_NUMBER",
            },
        ]

    def test_client_errors_are_logged_at_info(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="mortgage_calculator"):
            client.get("/validation-error")

        records = [r for r in caplog.records if r.getMessage() == "Client error"]
        assert len(records) == 1
        assert records[0].levelno == logging.INFO
        assert records[0].error_code == "VALIDATION_ERROR"
        assert records[0].path == "/validation-error"


class TestTermTooLargeHandler:
    """Tests for TermTooLargeError exception handler."""

    def test_term_too_large_returns_422(self, client: TestClient) -> None:
        response = client.get("/term-too-large")

        assert response.status_code == 422
        assert response.json() == {
            "detail": "loan_term_months must be <= 1200 (got 1500)",
            "code": "TERM_TOO_LARGE",
        }


class TestUnmappedDomainError:
    """Domain errors without a specific mapping fall back to 400."""

    def test_generic_domain_error_returns_400(self, client: TestClient) -> None:
        response = client.get("/generic-domain-error")

        assert response.status_code == 400
        assert response.json() == {
            "detail": "Something is off",
            "code": "DOMAIN_ERROR",
        }


class TestRequestValidationErrorHandler:
    """Tests for FastAPI request validation errors."""

    def test_wrong_type_returns_400(self, client: TestClient) -> None:
        response = client.post("/body", json={"amount": "not-an-int"})

        assert response.status_code == 400
        data = response.json()
        assert data["detail"] == "Invalid request body"
        assert data["code"] == "VALIDATION_ERROR"
        assert data["errors"][0]["field"] == "amount"
        assert data["errors"][0]["code"] == "int_parsing"

    def test_missing_field_returns_400(self, client: TestClient) -> None:
        response = client.post("/body", json={})

        assert response.status_code == 400
        assert response.json()["errors"][0] == {
            "field": "amount",
            "message": "Field required",
            "code": "missing",
        }

    def test_invalid_json_returns_400(self, client: TestClient) -> None:
        response = client.post(
            "/body", content="{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"


class TestUnexpectedErrorHandler:
    """Tests for catch-all exception handler."""

    def test_unexpected_error_returns_500(self, client: TestClient) -> None:
        response = client.get("/unexpected-error")

        assert response.status_code == 500
        assert response.json() == {
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }


class TestRegisterExceptionHandlers:
    """Tests for exception handler registration."""

    def test_registers_all_handlers(self) -> None:
        app = FastAPI()

        register_exception_handlers(app)

        assert DomainError in app.exception_handlers
        assert Exception in app.exception_handlers

    def test_registration_is_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="mortgage_calculator"):
            register_exception_handlers(FastAPI())

        records = [
            r for r in caplog.records if r.getMessage() == "Exception handlers registered successfully"
        ]
        assert [r.levelno for r in records] == [logging.DEBUG]
