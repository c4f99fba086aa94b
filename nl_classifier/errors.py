"""
Error types raised by the Natural Language Classifier clients.

Every failure surfaced by a client operation is a
:class:`NaturalLanguageClassifierError`:

* :class:`RequestPreparationError` -- the request could not be built
  (payload serialization, unreadable upload file).  Nothing was sent.
* :class:`TransportError` -- network failure or a non-2xx status that did
  not carry the service error envelope.
* :class:`ServiceError` -- the service answered with its
  ``{error, code, description}`` envelope.
* :class:`ResponseDecodeError` -- the body did not have the expected shape.
"""

import json
from typing import Optional, Union


class NaturalLanguageClassifierError(Exception):
    """Base class for all client errors."""

    code: int = 0

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RequestPreparationError(NaturalLanguageClassifierError):
    """The request payload could not be prepared for transmission."""


class TransportError(NaturalLanguageClassifierError):
    """Network error or unsuccessful HTTP status from the transport layer."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
        if status_code is not None:
            self.code = status_code


class ResponseDecodeError(NaturalLanguageClassifierError):
    """The response body could not be decoded into the expected record."""

    def __init__(self, message: str, body: str = ""):
        super().__init__(message)
        self.body = body


class ServiceError(NaturalLanguageClassifierError):
    """Error reported by the service through its JSON error envelope."""

    def __init__(
        self,
        code: int,
        reason: str,
        description: str,
        status_code: Optional[int] = None,
    ):
        super().__init__(f"{reason} ({code}): {description}")
        self.code = code
        self.reason = reason
        self.description = description
        self.status_code = status_code

    def __repr__(self) -> str:
        return (
            f"ServiceError(code={self.code}, reason={self.reason!r}, "
            f"description={self.description!r})"
        )


def data_to_error(
    data: Union[bytes, str], status_code: Optional[int] = None
) -> Optional[ServiceError]:
    """
    Return the :class:`ServiceError` encoded in *data*, if any.

    The body must be a JSON object with a string ``error``, an integer
    ``code`` and a string ``description``.  Anything else, including a
    body that is not JSON at all, yields None.
    """
    if not data:
        return None
    try:
        payload = json.loads(data)
    except (ValueError, TypeError):
        return None
    if not isinstance(payload, dict):
        return None

    reason = payload.get("error")
    code = payload.get("code")
    description = payload.get("description")
    if not isinstance(reason, str) or not isinstance(description, str):
        return None
    # bool is an int subclass
    if not isinstance(code, int) or isinstance(code, bool):
        return None

    return ServiceError(
        code=code,
        reason=reason,
        description=description,
        status_code=status_code,
    )
