"""
Test suite for GhanaNLPClient.

Uses httpx.MockTransport to verify request shape and error mapping without
network access.

System role: Verification of the language provider boundary
"""

import json

import httpx
import pytest

from legalaid.core.exceptions import UpstreamUnavailableError


class TestRequestShape:
    @pytest.mark.asyncio
    async def test_translate_should_post_text_and_pair_with_subscription_key(self, nlp_client_factory) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json="Maakye")

        client = nlp_client_factory(handler)
        result = await client.translate("Good morning", "en-tw")

        assert result == "Maakye"
        request = seen[0]
        assert request.method == "POST"
        assert request.url.path == "/v1/translate"
        assert json.loads(request.content) == {"in": "Good morning", "lang": "en-tw"}
        assert request.headers["Ocp-Apim-Subscription-Key"] == "test-key"
        assert request.headers["Cache-Control"] == "no-cache"

    @pytest.mark.asyncio
    async def test_translate_should_fall_back_to_text_body(self, nlp_client_factory) -> None:
        client = nlp_client_factory(lambda request: httpx.Response(200, text="plain words"))

        assert await client.translate("x", "en-tw") == "plain words"

    @pytest.mark.asyncio
    async def test_transcribe_should_send_raw_audio_with_language(self, nlp_client_factory, fake_wav: bytes) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="me din de Kofi")

        client = nlp_client_factory(handler)
        text = await client.transcribe(fake_wav, "tw", "audio/wav")

        assert text == "me din de Kofi"
        assert seen[0].url.params["language"] == "tw"
        assert seen[0].headers["Content-Type"] == "audio/wav"
        assert seen[0].content == fake_wav

    @pytest.mark.asyncio
    async def test_synthesize_should_return_audio_bytes(self, nlp_client, fake_wav: bytes) -> None:
        assert await nlp_client.synthesize("Akwaaba", "tw", "twi_speaker_4") == fake_wav


class TestErrorMapping:
    @pytest.mark.asyncio
    async def test_unconfigured_client_should_not_send_requests(self, nlp_client_factory) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, json="x")

        client = nlp_client_factory(handler, api_key=None)

        assert client.is_configured is False
        with pytest.raises(UpstreamUnavailableError) as exc_info:
            await client.translate("x", "en-tw")
        assert exc_info.value.service == "translation"
        assert calls == []

    @pytest.mark.asyncio
    async def test_non_2xx_should_raise_upstream_error(self, nlp_client_factory) -> None:
        client = nlp_client_factory(lambda request: httpx.Response(500, text="boom"))

        with pytest.raises(UpstreamUnavailableError) as exc_info:
            await client.synthesize("x", "tw", "twi_speaker_4")

        assert exc_info.value.details["status_code"] == 500
        assert exc_info.value.service == "tts"

    @pytest.mark.asyncio
    async def test_timeout_should_raise_upstream_error(self, nlp_client_factory) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        client = nlp_client_factory(handler)

        with pytest.raises(UpstreamUnavailableError, match="timed out"):
            await client.transcribe(b"abc", "tw", "audio/mpeg")

    @pytest.mark.asyncio
    async def test_connection_error_should_raise_upstream_error(self, nlp_client_factory) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        client = nlp_client_factory(handler)

        with pytest.raises(UpstreamUnavailableError):
            await client.list_tts_speakers()
