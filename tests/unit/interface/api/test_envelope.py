"""Unit tests for the response envelope."""

import json

from scribe.application.usecase.result import Invalid, NotFound, Success, Unexpected
from scribe.interface.api.envelope import respond


def body(response) -> dict:
    return json.loads(response.body)


class TestRespond:
    """Tests for respond."""

    def test_success_with_data(self):
        response = respond(Success[dict](data={"id": "1"}), success_status=201)

        assert response.status_code == 201
        assert body(response) == {"message": "Success", "data": {"id": "1"}}

    def test_success_without_data_omits_key(self):
        response = respond(Success())

        assert response.status_code == 200
        assert body(response) == {"message": "Success"}

    def test_invalid(self):
        errors = {"title": ["The title field is required."]}

        response = respond(Invalid(errors=errors))

        assert response.status_code == 422
        assert body(response) == {"message": "Validation errors", "errors": errors}

    def test_not_found(self):
        response = respond(NotFound(resource="Post", identifier="x"))

        assert response.status_code == 404
        assert body(response) == {"message": "Data Not found"}

    def test_unexpected_hides_error_text(self):
        """Raw errors must not reach clients outside debug mode."""
        result = Unexpected(error="connection refused", error_type="OSError")

        response = respond(result)

        assert response.status_code == 500
        assert body(response) == {"message": "Something went wrong"}

    def test_unexpected_exposes_error_text_in_debug(self):
        result = Unexpected(error="connection refused", error_type="OSError")

        response = respond(result, expose_errors=True)

        assert body(response) == {"message": "connection refused"}
