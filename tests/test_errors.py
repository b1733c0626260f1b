"""
Test the private/public error taxonomy.
"""
import json
import pytest

from pharmacodb.errors import (
    ErrorType,
    InternalError,
    PublicError,
    NotFoundError,
    create_error,
    error_envelope,
    log_private_error,
    log_public_error,
)


def test_create_public_error():
    err = create_error(ErrorType.PUBLIC, 404, "Cell line not found")
    assert isinstance(err, PublicError)
    assert err.type == ErrorType.PUBLIC
    assert err.code == 404
    assert err.message == "Cell line not found"


def test_create_private_error():
    err = create_error(ErrorType.PRIVATE, 500, "database is locked")
    assert isinstance(err, InternalError)
    assert err.type == ErrorType.PRIVATE
    assert err.code == 500


def test_create_error_rejects_unknown_type():
    with pytest.raises(ValueError):
        create_error(2, 500, "boom")


def test_not_found_is_public():
    err = NotFoundError("Experiment not found")
    assert err.type == ErrorType.PUBLIC
    assert err.code == 404


def test_log_public_error_builds_envelope():
    response = log_public_error(ErrorType.PUBLIC, 400, "Invalid type")
    assert response.status_code == 400
    assert json.loads(response.body) == {"error": {"code": 400, "message": "Invalid type"}}


def test_log_public_error_rejects_private_type():
    with pytest.raises(ValueError):
        log_public_error(ErrorType.PRIVATE, 500, "internal")


def test_log_private_error_sends_to_sink(error_sink):
    cause = RuntimeError("no such table: cells")
    log_private_error(error_sink, ErrorType.PRIVATE, cause)
    assert error_sink.captured == [cause]


def test_log_private_error_rejects_public_type(error_sink):
    with pytest.raises(ValueError):
        log_private_error(error_sink, ErrorType.PUBLIC, RuntimeError("x"))
    assert error_sink.captured == []


def test_error_envelope():
    assert error_envelope(404, "Drug not found") == {"error": {"code": 404, "message": "Drug not found"}}
