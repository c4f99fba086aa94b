"""
End-to-end tests of the blocking client against the in-process fake service.
"""

import pytest
from fastapi.testclient import TestClient

from fake_service import SERVICE_URL, USERNAME
from nl_classifier import (
    ClassifierStatus,
    ClientSettings,
    NaturalLanguageClassifier,
    ServiceError,
    TransportError,
)


def test_classifier_lifecycle(client, fake_service, training_files):
    metadata, data = training_files

    assert client.list_classifiers() == []

    created = client.create_classifier(metadata, data)
    assert created.status == ClassifierStatus.TRAINING
    assert created.name == "weather"
    assert created.language == "en"
    assert not created.is_available

    listed = client.list_classifiers()
    assert [m.classifier_id for m in listed] == [created.classifier_id]

    # Training happens on the server; flip the status the way it would.
    fake_service.state.classifiers[created.classifier_id]["status"] = ClassifierStatus.AVAILABLE
    assert client.get_classifier(created.classifier_id).is_available

    result = client.classify(created.classifier_id, "Will it be windy tomorrow?")
    assert result.top_class == "conditions"
    assert result.classes[0].class_name == "conditions"
    assert result.text == "Will it be windy tomorrow?"
    confidences = [c.confidence for c in result.classes]
    assert confidences == sorted(confidences, reverse=True)

    assert client.delete_classifier(created.classifier_id) is None
    assert client.list_classifiers() == []


def test_classify_while_training_is_a_service_error(client, training_files):
    created = client.create_classifier(*training_files)

    with pytest.raises(ServiceError) as excinfo:
        client.classify(created.classifier_id, "Is it cold?")

    assert excinfo.value.code == 409
    assert excinfo.value.description == "Classifier not available"


def test_unknown_classifier(client):
    with pytest.raises(ServiceError) as excinfo:
        client.get_classifier("nope")
    assert excinfo.value.code == 404

    with pytest.raises(ServiceError):
        client.delete_classifier("nope")


def test_bad_training_metadata(client, tmp_path, training_files):
    _, data = training_files
    metadata = tmp_path / "bad.json"
    metadata.write_text('{"name": "no language"}', encoding="utf-8")

    with pytest.raises(ServiceError) as excinfo:
        client.create_classifier(metadata, data)
    assert excinfo.value.code == 400


def test_wrong_password(fake_service):
    settings = ClientSettings(service_url=SERVICE_URL, username=USERNAME, password="wrong")
    with TestClient(fake_service) as http:
        nlc = NaturalLanguageClassifier(settings=settings, http_client=http)

        with pytest.raises(TransportError) as excinfo:
            nlc.list_classifiers()

    assert excinfo.value.status_code == 401
