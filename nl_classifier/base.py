"""
Request construction and response decoding shared by both clients.

The blocking and async clients differ only in how a prepared
:class:`httpx.Request` is sent.  Everything else -- URLs, headers,
credentials, payload encoding, the error envelope probe and record
decoding -- lives here so both clients behave identically.
"""

import logging
import mimetypes
import os
from typing import List, Optional, Tuple, Type, TypeVar, Union
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from .config import ClientSettings
from .errors import (
    RequestPreparationError,
    ResponseDecodeError,
    TransportError,
    data_to_error,
)
from .types import (
    Classification,
    ClassifierDetails,
    ClassifierList,
    ClassifierModel,
    ClassifyRequest,
)

logger = logging.getLogger(__name__)

FilePath = Union[str, "os.PathLike[str]"]
T = TypeVar("T", bound=BaseModel)

JSON_MEDIA_TYPE = "application/json"


class BaseClassifierClient:
    """
    Holds credentials and configuration, and turns each operation into an
    :class:`httpx.Request` plus a decoder for its response.

    ``service_url`` and ``default_headers`` are plain attributes and may be
    changed by the caller between calls.
    """

    _client: Union[httpx.Client, httpx.AsyncClient]

    def __init__(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        *,
        settings: Optional[ClientSettings] = None,
    ) -> None:
        settings = settings if settings is not None else ClientSettings()
        username = username if username is not None else settings.username
        password = password if password is not None else settings.password
        if username is None or password is None:
            raise ValueError(
                "Both 'username' and 'password' are required.  Pass them "
                "explicitly or set NLC_USERNAME / NLC_PASSWORD."
            )

        self.service_url: str = settings.service_url
        self.default_headers = dict(settings.default_headers)
        self._username = username
        self._auth = httpx.BasicAuth(username, password)
        self._timeout = settings.timeout

    # ------------------------------------------------------------------
    # Request construction
    # ------------------------------------------------------------------

    def _url(self, classifier_id: Optional[str] = None, action: Optional[str] = None) -> str:
        url = self.service_url.rstrip("/") + "/v1/classifiers"
        if classifier_id is not None:
            url += "/" + quote(classifier_id, safe="")
        if action is not None:
            url += "/" + action
        return url

    def _headers(self, content_type: Optional[str] = None) -> dict:
        headers = dict(self.default_headers)
        headers["Accept"] = JSON_MEDIA_TYPE
        if content_type is not None:
            headers["Content-Type"] = content_type
        return headers

    def _build(self, method: str, url: str, **kwargs) -> httpx.Request:
        try:
            return self._client.build_request(method, url, **kwargs)
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise RequestPreparationError(f"Could not build request for {url}: {exc}") from exc

    @staticmethod
    def _require_id(classifier_id: str) -> str:
        if not isinstance(classifier_id, str) or not classifier_id:
            raise RequestPreparationError("'classifier_id' must be a non-empty string.")
        return classifier_id

    def _prepare_list(self) -> httpx.Request:
        return self._build("GET", self._url(), headers=self._headers())

    def _prepare_create(self, training_metadata: FilePath, training_data: FilePath) -> httpx.Request:
        files = {
            "training_metadata": _read_upload(training_metadata),
            "training_data": _read_upload(training_data),
        }
        return self._build("POST", self._url(), headers=self._headers(), files=files)

    def _prepare_classify(self, classifier_id: str, text: str) -> httpx.Request:
        self._require_id(classifier_id)
        try:
            body = ClassifyRequest(text=text).model_dump_json().encode("utf-8")
        except (ValueError, TypeError) as exc:
            raise RequestPreparationError(
                "Classification text could not be serialized to JSON."
            ) from exc
        return self._build(
            "POST",
            self._url(classifier_id, "classify"),
            headers=self._headers(JSON_MEDIA_TYPE),
            content=body,
        )

    def _prepare_get(self, classifier_id: str) -> httpx.Request:
        self._require_id(classifier_id)
        return self._build("GET", self._url(classifier_id), headers=self._headers())

    def _prepare_delete(self, classifier_id: str) -> httpx.Request:
        self._require_id(classifier_id)
        return self._build("DELETE", self._url(classifier_id), headers=self._headers())

    # ------------------------------------------------------------------
    # Response handling
    # ------------------------------------------------------------------

    def _transport_failed(self, request: httpx.Request, exc: httpx.HTTPError) -> TransportError:
        logger.error(f"Request error occurred: {exc} for URL: {request.url}")
        return TransportError(f"Request to {request.url} failed: {exc}")

    def _check_response(self, response: httpx.Response) -> None:
        """Raise if *response* carries the error envelope or a failing status."""
        error = data_to_error(response.content, response.status_code)
        if error is not None:
            logger.error(
                f"Service error occurred: {error} for URL: {response.request.url}"
            )
            raise error

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(f"HTTP error occurred: {exc} for URL: {response.request.url}")
            raise TransportError(
                f"HTTP {response.status_code} from {response.request.url}",
                status_code=response.status_code,
            ) from exc

    @staticmethod
    def _decode(response: httpx.Response, model: Type[T]) -> T:
        try:
            return model.model_validate_json(response.content)
        except ValidationError as exc:
            raise ResponseDecodeError(
                f"Response could not be decoded as {model.__name__}: {exc}",
                body=response.text,
            ) from exc

    def _parse_list(self, response: httpx.Response) -> List[ClassifierModel]:
        return list(self._decode(response, ClassifierList).classifiers)

    def _parse_details(self, response: httpx.Response) -> ClassifierDetails:
        return self._decode(response, ClassifierDetails)

    def _parse_classification(self, response: httpx.Response) -> Classification:
        return self._decode(response, Classification)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"service_url={self.service_url!r}, "
            f"username={self._username!r})"
        )


def _read_upload(path: FilePath) -> Tuple[str, bytes, str]:
    """Read an upload file into a multipart ``(filename, content, type)`` tuple."""
    try:
        path = os.fspath(path)
        # reject integer file descriptors before open() sees them
        with open(path, "rb") as fh:
            content = fh.read()
    except (OSError, TypeError, ValueError) as exc:
        logger.error(f"Could not read upload file {path!r}: {exc}")
        raise RequestPreparationError("Files could not be encoded as form data.") from exc

    filename = os.path.basename(path)
    if isinstance(filename, bytes):
        filename = os.fsdecode(filename)
    content_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
    return filename, content, content_type
