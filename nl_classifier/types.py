"""
Result types for the Natural Language Classifier SDK.

Every record is decoded straight from a service response and is frozen
afterwards; the client never mutates or caches them.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ClassifierStatus:
    """Status strings reported by the service for a classifier."""

    NON_EXISTENT = "Non Existent"
    TRAINING = "Training"
    FAILED = "Failed"
    AVAILABLE = "Available"
    UNAVAILABLE = "Unavailable"


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class ClassifierModel(_Record):
    """Summary of a classifier, as returned by the list endpoint."""

    classifier_id: str = Field(..., description="Unique identifier of the classifier")
    url: str = Field(..., description="Link to the classifier resource")
    name: Optional[str] = Field(None, description="User-supplied classifier name")
    language: Optional[str] = Field(None, description="Language of the training data")
    created: Optional[datetime] = Field(None, description="Creation timestamp")
    status: Optional[str] = Field(None, description="Server-reported status, if sent")


class ClassifierDetails(ClassifierModel):
    """Classifier summary plus the training status detail."""

    status_description: Optional[str] = Field(
        None,
        description="Human readable explanation of the status"
    )

    @property
    def is_available(self) -> bool:
        """True once the service reports the classifier ready for classify calls."""
        return self.status == ClassifierStatus.AVAILABLE


class ClassifierList(_Record):
    """Envelope of ``GET /v1/classifiers``."""

    classifiers: List[ClassifierModel]


class ClassifiedClass(_Record):
    """One (label, confidence) pair of a classification."""

    class_name: str
    confidence: float


class Classification(_Record):
    """Result of classifying a piece of text."""

    text: str
    """The text that was classified."""

    top_class: str
    """Label with the highest confidence."""

    classes: List[ClassifiedClass] = Field(default_factory=list)
    """Ranked classes, in the order the service returned them."""

    classifier_id: Optional[str] = None
    url: Optional[str] = None

    def confidence_for(self, class_name: str) -> Optional[float]:
        for item in self.classes:
            if item.class_name == class_name:
                return item.confidence
        return None

    def __repr__(self) -> str:
        top = self.confidence_for(self.top_class)
        conf = f"{top:.2%}" if top is not None else "N/A"
        return (
            f"Classification("
            f"top_class={self.top_class!r}, "
            f"confidence={conf}, "
            f"classes={len(self.classes)})"
        )


class ClassifyRequest(BaseModel):
    """Request body for ``POST /v1/classifiers/{id}/classify``."""

    text: str = Field(..., description="Phrase to classify")
