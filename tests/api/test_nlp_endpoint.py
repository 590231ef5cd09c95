"""
Tests for the language service endpoints.

The provider is replaced by an httpx MockTransport; the rest of the stack
(adapter, cache, exception handlers) is real.
"""

import pytest
from fastapi.testclient import TestClient

from legalaid.api.deps import get_language_voice_adapter
from legalaid.api.main import create_app
from legalaid.application.adapters.language_voice_adapter import TRANSLATION_LANGUAGES

API = "/api/v1/nlp"


def _client_for(adapter) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_language_voice_adapter] = lambda: adapter
    return TestClient(app)


@pytest.fixture
def client(voice_adapter) -> TestClient:
    return _client_for(voice_adapter)


@pytest.fixture
def failing_client(failing_voice_adapter) -> TestClient:
    return _client_for(failing_voice_adapter)


class TestTranslate:
    def test_translate_returns_provider_text(self, client: TestClient) -> None:
        response = client.post(f"{API}/translate", json={"text": "Hello", "fromLanguage": "en", "toLanguage": "twi"})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["translatedText"] == "[en-tw] Hello"
        assert data["targetLanguage"] == "tw"
        assert data["engine"] == "ghananlp_translation_v1"
        assert data["cached"] is False

    def test_repeat_translation_is_served_from_cache(self, client: TestClient) -> None:
        payload = {"text": "Hello", "fromLanguage": "en", "toLanguage": "tw"}

        client.post(f"{API}/translate", json=payload)
        second = client.post(f"{API}/translate", json=payload)

        assert second.json()["data"]["cached"] is True

    def test_unsupported_language_is_rejected(self, client: TestClient) -> None:
        response = client.post(f"{API}/translate", json={"text": "Hello", "fromLanguage": "fr", "toLanguage": "tw"})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "fromLanguage"

    def test_missing_text_is_rejected(self, client: TestClient) -> None:
        response = client.post(f"{API}/translate", json={"fromLanguage": "en", "toLanguage": "tw"})

        assert response.status_code == 400
        assert response.json()["message"] == "Validation error"

    def test_provider_failure_is_503_without_details(self, failing_client: TestClient) -> None:
        response = failing_client.post(
            f"{API}/translate", json={"text": "Hello", "fromLanguage": "en", "toLanguage": "tw"}
        )

        assert response.status_code == 503
        assert response.json() == {
            "success": False,
            "message": "Translation service is temporarily unavailable",
            "errors": None,
        }


class TestSpeechToText:
    def test_transcribes_upload(self, client: TestClient, fake_wav: bytes) -> None:
        response = client.post(
            f"{API}/speech-to-text",
            files={"audio": ("clip.wav", fake_wav, "audio/wav")},
            data={"language": "twi"},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["transcription"] == "me pɛ mmoa"
        assert data["language"] == "tw"
        assert data["sourceLanguage"] == "twi"

    def test_rejects_unsupported_format(self, client: TestClient) -> None:
        response = client.post(
            f"{API}/speech-to-text",
            files={"audio": ("notes.txt", b"hello", "text/plain")},
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "audio"

    def test_rejects_language_without_asr(self, client: TestClient, fake_wav: bytes) -> None:
        response = client.post(
            f"{API}/speech-to-text",
            files={"audio": ("clip.wav", fake_wav, "audio/wav")},
            data={"language": "en"},
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "language"


class TestTextToSpeech:
    def test_returns_wav_with_headers(self, client: TestClient, fake_wav: bytes) -> None:
        response = client.post(f"{API}/text-to-speech", json={"text": "Akwaaba", "language": "tw"})

        assert response.status_code == 200
        assert response.content == fake_wav
        assert response.headers["content-type"] == "audio/wav"
        assert response.headers["X-Audio-Language"] == "tw"
        assert response.headers["X-Speaker-ID"] == "twi_speaker_4"
        assert response.headers["Cache-Control"] == "public, max-age=3600"

    def test_explicit_speaker_is_used(self, client: TestClient) -> None:
        response = client.post(
            f"{API}/text-to-speech",
            json={"text": "Woezɔ", "language": "ewe", "speakerId": "ewe_speaker_4"},
        )

        assert response.headers["X-Audio-Language"] == "ee"
        assert response.headers["X-Speaker-ID"] == "ewe_speaker_4"

    def test_language_without_tts_is_rejected(self, client: TestClient) -> None:
        response = client.post(f"{API}/text-to-speech", json={"text": "Hello", "language": "gaa"})

        assert response.status_code == 400

    def test_provider_failure_is_503(self, failing_client: TestClient) -> None:
        response = failing_client.post(f"{API}/text-to-speech", json={"text": "Akwaaba", "language": "tw"})

        assert response.status_code == 503
        assert response.json()["message"] == "Speech synthesis service is temporarily unavailable"


class TestMetadata:
    def test_languages(self, client: TestClient) -> None:
        data = client.get(f"{API}/languages").json()["data"]

        assert data["total"] == len(TRANSLATION_LANGUAGES)
        assert {"code": "tw", "name": "Twi"} in data["languages"]
        assert [entry["code"] for entry in data["tts"]] == ["tw", "ki", "ee"]
        assert "lastUpdated" in data

    def test_tts_languages_from_provider(self, client: TestClient) -> None:
        data = client.get(f"{API}/tts/languages").json()["data"]

        assert data["languages"] == {"tw": "Twi", "ki": "Kikuyu", "ee": "Ewe"}
        assert data["speakers"] == {"tw": ["twi_speaker_4"], "ee": ["ewe_speaker_3"]}

    def test_tts_languages_fall_back_when_provider_down(self, failing_client: TestClient) -> None:
        response = failing_client.get(f"{API}/tts/languages")

        assert response.status_code == 200
        assert "twi_speaker_9" in response.json()["data"]["speakers"]["tw"]


class TestNLPHealth:
    def test_healthy_when_provider_reachable(self, client: TestClient) -> None:
        data = client.get(f"{API}/health").json()["data"]

        assert data["status"] == "healthy"
        assert data["services"] == {"tts": True, "asr": True, "translation": True}

    def test_degraded_when_provider_down(self, failing_client: TestClient) -> None:
        response = failing_client.get(f"{API}/health")

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "degraded"
        assert response.json()["data"]["services"]["tts"] is False
