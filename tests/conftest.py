"""Shared fixtures: fake ports and a TestClient with dependency overrides."""

import base64

import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.routers.plants import get_identification_service
from app.services.identification_service import IdentificationService
from main import app

# Smallest JFIF header; PlantNet would reject it, the service does not care.
JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00\xff\xd9"
JPEG_BASE64 = base64.b64encode(JPEG_BYTES).decode("ascii")


def plantnet_payload(*results):
    return {"query": {"organs": ["leaf"]}, "language": "en", "results": list(results)}


def plantnet_result(score, without_author="", with_author="", common_names=None):
    return {
        "score": score,
        "species": {
            "scientificNameWithoutAuthor": without_author,
            "scientificName": with_author,
            "commonNames": common_names if common_names is not None else [],
        },
    }


class FakeIdentifier:
    def __init__(self, response=None, error=None):
        self.response = response if response is not None else plantnet_payload()
        self.error = error
        self.calls = []

    async def identify(self, image_data):
        self.calls.append(image_data)
        if self.error is not None:
            raise self.error
        return self.response


class FakeTranslator:
    def __init__(self, translations=None):
        self.translations = translations or {}
        self.calls = []

    async def translate(self, text):
        self.calls.append(text)
        if not text:
            return ""
        return self.translations.get(text, text)


@pytest.fixture
def settings():
    return Settings(plantnet_api_key="test-key")


@pytest.fixture
def identifier():
    return FakeIdentifier()


@pytest.fixture
def translator():
    return FakeTranslator()


@pytest.fixture
def client(settings, identifier, translator):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_identification_service] = lambda: IdentificationService(
        identifier, translator
    )
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def unconfigured_client():
    """Client with no PLANTNET_API_KEY and the real service dependency."""
    app.dependency_overrides[get_settings] = lambda: Settings(plantnet_api_key=None)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
