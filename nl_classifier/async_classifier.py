"""
AsyncNaturalLanguageClassifier -- asyncio client for the classifier service.

Each operation is a coroutine that issues exactly one request.  Awaiting
it either returns the decoded record or raises one
:class:`~nl_classifier.errors.NaturalLanguageClassifierError`; concurrent
calls are independent and unordered.

Usage
-----
async with AsyncNaturalLanguageClassifier("username", "password") as nlc:
    result = await nlc.classify("10D41B-nlc-1", "How hot will it be today?")
"""

import asyncio
import logging
from typing import List, Optional

import httpx

from .base import BaseClassifierClient, FilePath
from .config import ClientSettings
from .types import Classification, ClassifierDetails, ClassifierModel

logger = logging.getLogger(__name__)


class AsyncNaturalLanguageClassifier(BaseClassifierClient):
    """Asynchronous counterpart of :class:`~nl_classifier.NaturalLanguageClassifier`."""

    def __init__(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        *,
        settings: Optional[ClientSettings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        super().__init__(username, password, settings=settings)
        self._owns_client = http_client is None
        self._client = (
            http_client if http_client is not None else httpx.AsyncClient(timeout=self._timeout)
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncNaturalLanguageClassifier":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _send(self, request: httpx.Request) -> httpx.Response:
        logger.debug(f"{request.method} {request.url}")
        try:
            response = await self._client.send(request, auth=self._auth)
        except httpx.HTTPError as exc:
            raise self._transport_failed(request, exc) from exc
        self._check_response(response)
        return response

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def list_classifiers(self) -> List[ClassifierModel]:
        """Retrieve the classifiers of the service instance (possibly empty)."""
        return self._parse_list(await self._send(self._prepare_list()))

    async def create_classifier(
        self, training_metadata: FilePath, training_data: FilePath
    ) -> ClassifierDetails:
        """
        Upload training data to create a classifier.

        Parameters
        ----------
        training_metadata : str or PathLike
            JSON file with the classifier ``name`` and training ``language``.
        training_data : str or PathLike
            Labelled examples used to train the classifier.

        Raises
        ------
        RequestPreparationError
            If either file cannot be read; nothing is sent.
        """
        # file reads run in the default executor, off the event loop
        loop = asyncio.get_running_loop()
        request = await loop.run_in_executor(
            None, self._prepare_create, training_metadata, training_data
        )
        return self._parse_details(await self._send(request))

    async def classify(self, classifier_id: str, text: str) -> Classification:
        request = self._prepare_classify(classifier_id, text)
        return self._parse_classification(await self._send(request))

    async def get_classifier(self, classifier_id: str) -> ClassifierDetails:
        return self._parse_details(await self._send(self._prepare_get(classifier_id)))

    async def delete_classifier(self, classifier_id: str) -> None:
        """Delete a classifier; an error envelope in the body fails the call."""
        await self._send(self._prepare_delete(classifier_id))
