"""
NaturalLanguageClassifier -- blocking client for the classifier service.

Usage::

    from nl_classifier import NaturalLanguageClassifier

    with NaturalLanguageClassifier("username", "password") as nlc:
        for model in nlc.list_classifiers():
            print(model.classifier_id, model.name)

        result = nlc.classify("10D41B-nlc-1", "How hot will it be today?")
        print(result.top_class)
"""

import logging
from typing import List, Optional

import httpx

from .base import BaseClassifierClient, FilePath
from .config import ClientSettings
from .types import Classification, ClassifierDetails, ClassifierModel

logger = logging.getLogger(__name__)


class NaturalLanguageClassifier(BaseClassifierClient):
    """
    Blocking client: one HTTP request per call, on the caller's thread.

    Every operation returns the decoded record or raises a
    :class:`~nl_classifier.errors.NaturalLanguageClassifierError`.
    """

    def __init__(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        *,
        settings: Optional[ClientSettings] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        super().__init__(username, password, settings=settings)
        self._owns_client = http_client is None
        self._client = http_client if http_client is not None else httpx.Client(timeout=self._timeout)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Close the underlying HTTP session if this client created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "NaturalLanguageClassifier":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _send(self, request: httpx.Request) -> httpx.Response:
        logger.debug(f"{request.method} {request.url}")
        try:
            response = self._client.send(request, auth=self._auth)
        except httpx.HTTPError as exc:
            raise self._transport_failed(request, exc) from exc
        self._check_response(response)
        return response

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def list_classifiers(self) -> List[ClassifierModel]:
        """
        Retrieve the classifiers of the service instance.

        Returns:
            The classifiers; an empty list if there are none.
        """
        return self._parse_list(self._send(self._prepare_list()))

    def create_classifier(
        self, training_metadata: FilePath, training_data: FilePath
    ) -> ClassifierDetails:
        """
        Upload training data to create and train a new classifier.

        The new classifier starts in the ``Training`` status and must reach
        ``Available`` before :meth:`classify` can use it.

        Args:
            training_metadata:
                Path to a JSON file with the classifier ``name`` and the
                ``language`` of the training data.
            training_data:
                Path to the labelled examples (text plus class key, e.g. CSV).

        Raises:
            RequestPreparationError: If either file cannot be read.  No
                request is sent in that case.
        """
        request = self._prepare_create(training_metadata, training_data)
        return self._parse_details(self._send(request))

    def classify(self, classifier_id: str, text: str) -> Classification:
        """
        Classify *text* with the given classifier.

        Raises:
            RequestPreparationError: If *text* cannot be serialized to JSON.
        """
        request = self._prepare_classify(classifier_id, text)
        return self._parse_classification(self._send(request))

    def get_classifier(self, classifier_id: str) -> ClassifierDetails:
        """Fetch the details, including training status, of a classifier."""
        return self._parse_details(self._send(self._prepare_get(classifier_id)))

    def delete_classifier(self, classifier_id: str) -> None:
        """
        Delete a classifier.

        A successful HTTP status is not enough: if the body holds the
        service error envelope the call fails with
        :class:`~nl_classifier.errors.ServiceError`.
        """
        self._send(self._prepare_delete(classifier_id))
