"""
Pytest configuration and fixtures for the classifier client tests.
"""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from fake_service import PASSWORD, SERVICE_URL, USERNAME, RecordingHandler, create_fake_service
from nl_classifier import ClientSettings, NaturalLanguageClassifier


@pytest.fixture
def settings():
    """Settings pointing at the fake service, independent of the environment."""
    return ClientSettings(service_url=SERVICE_URL, username=USERNAME, password=PASSWORD)


@pytest.fixture
def fake_service():
    return create_fake_service()


@pytest.fixture
def client(fake_service, settings):
    """Blocking SDK client talking to the fake service through TestClient."""
    with TestClient(fake_service) as http:
        yield NaturalLanguageClassifier(settings=settings, http_client=http)


@pytest.fixture
def mock_client(settings):
    """Factory wiring a blocking client to a RecordingHandler."""

    def factory(handler: RecordingHandler) -> NaturalLanguageClassifier:
        http = httpx.Client(transport=httpx.MockTransport(handler))
        return NaturalLanguageClassifier(settings=settings, http_client=http)

    return factory


@pytest.fixture
def training_files(tmp_path):
    """Training metadata and data files for a small weather classifier."""
    metadata = tmp_path / "metadata.json"
    metadata.write_text(json.dumps({"language": "en", "name": "weather"}), encoding="utf-8")

    data = tmp_path / "weather_data_train.csv"
    data.write_text(
        "How hot is it today?,temperature\n"
        "Is it going to be cold?,temperature\n"
        "Will it rain tomorrow?,conditions\n"
        "Is it windy outside?,conditions\n",
        encoding="utf-8",
    )
    return metadata, data
