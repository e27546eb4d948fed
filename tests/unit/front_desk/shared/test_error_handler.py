import json
from unittest.mock import MagicMock

import pytest
from pydantic import BaseModel

from front_desk.shared.domain.exception import (
    BusinessRuleViolationException,
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
)
from front_desk.shared.utils import api_error_handler


class _Body(BaseModel):
    name: str


def _call(exc: Exception | None = None, logger=None) -> dict:
    @api_error_handler(logger or MagicMock())
    def handler(event, context):
        if exc is not None:
            raise exc
        return {"statusCode": 200}

    return handler({}, None)


class TestApiErrorHandler:
    def test_passes_through_success(self):
        assert _call() == {"statusCode": 200}

    @pytest.mark.parametrize(
        "exc, status",
        [
            (ValueError("bad date"), 400),
            (ResourceNotFoundException("missing"), 404),
            (BusinessRuleViolationException("conflict"), 409),
            (DuplicateResourceException("dup"), 409),
            (OptimisticLockException("race"), 409),
        ],
    )
    def test_maps_exceptions_to_status(self, exc, status):
        response = _call(exc)
        body = json.loads(response["body"])

        assert response["statusCode"] == status
        assert body == {"success": False, "message": str(exc)}

    def test_validation_error_lists_fields(self):
        @api_error_handler(MagicMock())
        def handler(event, context):
            _Body.model_validate({})

        response = handler({}, None)
        body = json.loads(response["body"])

        assert response["statusCode"] == 400
        assert body["errors"][0]["field"] == "name"

    def test_unexpected_error_is_logged_and_hidden(self):
        logger = MagicMock()
        response = _call(RuntimeError("boom"), logger)

        assert response["statusCode"] == 500
        assert "boom" not in response["body"]
        logger.exception.assert_called_once()

    def test_response_carries_cors_header(self, monkeypatch):
        monkeypatch.setenv("CORS_ALLOW_ORIGIN", "https://desk.example.com")
        response = _call(ValueError("x"))
        assert response["headers"]["Access-Control-Allow-Origin"] == (
            "https://desk.example.com"
        )
