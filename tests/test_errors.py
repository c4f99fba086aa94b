"""
Tests for the service error envelope probe.
"""

import json

import pytest

from nl_classifier import ServiceError, data_to_error
from nl_classifier.errors import NaturalLanguageClassifierError, TransportError


def test_envelope_is_decoded():
    body = json.dumps({"error": "Forbidden", "code": 403, "description": "no access"}).encode()

    error = data_to_error(body, status_code=200)

    assert isinstance(error, ServiceError)
    assert error.code == 403
    assert error.reason == "Forbidden"
    assert error.description == "no access"
    assert error.status_code == 200
    assert "no access" in str(error)


def test_envelope_accepts_text():
    error = data_to_error('{"error": "Not found", "code": 404, "description": "gone"}')
    assert error is not None and error.code == 404


@pytest.mark.parametrize(
    "body",
    [
        b"",
        b"not json",
        b"[]",
        b'"Forbidden"',
        b"{}",
        b'{"error": "Forbidden", "code": 403}',
        b'{"error": "Forbidden", "description": "no access"}',
        b'{"code": 403, "description": "no access"}',
        b'{"error": "Forbidden", "code": "403", "description": "no access"}',
        b'{"error": "Forbidden", "code": true, "description": "no access"}',
        b'{"error": 1, "code": 403, "description": "no access"}',
    ],
)
def test_non_envelopes_are_ignored(body):
    assert data_to_error(body) is None


def test_regular_records_are_not_errors():
    body = json.dumps({"classifier_id": "abc", "url": "http://x", "status": "Available"})
    assert data_to_error(body) is None


def test_error_hierarchy():
    assert issubclass(ServiceError, NaturalLanguageClassifierError)
    assert issubclass(TransportError, NaturalLanguageClassifierError)
    assert TransportError("boom", status_code=502).code == 502
    assert TransportError("boom").code == 0
