"""
nl-classifier-client -- Python SDK for a remote natural language
classification service.

Quick start::

    from nl_classifier import NaturalLanguageClassifier

    nlc = NaturalLanguageClassifier(username="user", password="secret")

    details = nlc.create_classifier("metadata.json", "weather_data_train.csv")
    print(details.classifier_id, details.status)   # e.g. "Training"

    result = nlc.classify(details.classifier_id, "Is it windy?")
    print(result.top_class)                         # e.g. "conditions"
"""

import logging

from .async_classifier import AsyncNaturalLanguageClassifier
from .classifier import NaturalLanguageClassifier
from .config import ClientSettings
from .errors import (
    NaturalLanguageClassifierError,
    RequestPreparationError,
    ResponseDecodeError,
    ServiceError,
    TransportError,
    data_to_error,
)
from .types import (
    Classification,
    ClassifiedClass,
    ClassifierDetails,
    ClassifierModel,
    ClassifierStatus,
)

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NaturalLanguageClassifier",
    "AsyncNaturalLanguageClassifier",
    "ClientSettings",
    # Results
    "Classification",
    "ClassifiedClass",
    "ClassifierDetails",
    "ClassifierModel",
    "ClassifierStatus",
    # Errors
    "NaturalLanguageClassifierError",
    "RequestPreparationError",
    "ResponseDecodeError",
    "ServiceError",
    "TransportError",
    "data_to_error",
]
