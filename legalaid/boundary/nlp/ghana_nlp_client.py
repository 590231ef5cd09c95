"""
GhanaNLP HTTP client.

Thin async wrapper over the provider's translation, speech-to-text and
text-to-speech endpoints. Every failure (missing configuration, transport
error, timeout, non-2xx status) is raised as UpstreamUnavailableError.

Dependencies: httpx, legalaid.configs, legalaid.core.exceptions
System role: Boundary to the external language provider
"""

import logging
from typing import Any

import httpx

from legalaid.configs.nlp import NLPSettings
from legalaid.core.exceptions import UpstreamUnavailableError

logger = logging.getLogger(__name__)

SUBSCRIPTION_HEADER = "Ocp-Apim-Subscription-Key"

TRANSLATE_PATH = "/v1/translate"
ASR_PATH = "/asr/v2/transcribe"
TTS_PATH = "/tts/v1/tts"
TTS_LANGUAGES_PATH = "/tts/v1/languages"
TTS_SPEAKERS_PATH = "/tts/v1/speakers"


class GhanaNLPClient:
    """
    Async client for the GhanaNLP APIs.

    Attributes:
        api_key: Subscription key sent with every request
        base_url: Provider root URL
    """

    def __init__(
        self,
        api_key: str | None,
        base_url: str | None,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            api_key: Subscription key; None leaves the client unconfigured
            base_url: Provider root URL; None leaves the client unconfigured
            timeout_seconds: Bound on every provider call
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.api_key = api_key
        self.base_url = (base_url or "").rstrip("/")
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout_seconds),
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: NLPSettings) -> "GhanaNLPClient":
        return cls(
            api_key=settings.api_key,
            base_url=settings.base_url,
            timeout_seconds=settings.timeout_seconds,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.base_url)

    def _ensure_configured(self, service: str) -> None:
        if not self.is_configured:
            raise UpstreamUnavailableError(
                "GhanaNLP API key or base URL is not configured",
                service=service,
            )

    async def _request(
        self,
        service: str,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Send a request and map every failure to UpstreamUnavailableError.

        Args:
            service: Operation label used in errors (translation, asr, tts)
            method: HTTP method
            path: Path relative to the base URL
            **kwargs: Passed to httpx (json, content, params, headers)

        Returns:
            Successful httpx response

        Raises:
            UpstreamUnavailableError: Not configured, unreachable, timed out or non-2xx
        """
        self._ensure_configured(service)

        headers = {
            SUBSCRIPTION_HEADER: self.api_key,
            "Cache-Control": "no-cache",
            **kwargs.pop("headers", {}),
        }

        try:
            response = await self._http.request(method, path, headers=headers, **kwargs)
        except httpx.TimeoutException as e:
            raise UpstreamUnavailableError(
                f"{service} request timed out",
                service=service,
                details={"path": path},
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamUnavailableError(
                f"{service} request failed: {e}",
                service=service,
                details={"path": path},
            ) from e

        if response.is_error:
            logger.warning(
                "GhanaNLP %s returned %s: %s",
                path,
                response.status_code,
                response.text[:200],
            )
            raise UpstreamUnavailableError(
                f"{service} request failed with status {response.status_code}",
                service=service,
                details={"path": path, "status_code": response.status_code},
            )

        return response

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text

    async def translate(self, text: str, language_pair: str) -> Any:
        """
        Translate text.

        Args:
            text: Input text
            language_pair: Provider pair such as ``en-tw``

        Returns:
            Raw decoded payload; its shape varies between deployments
        """
        response = await self._request(
            "translation",
            "POST",
            TRANSLATE_PATH,
            json={"in": text, "lang": language_pair},
        )
        return self._decode(response)

    async def transcribe(self, audio: bytes, language: str, content_type: str) -> str:
        """
        Transcribe raw audio bytes.

        Args:
            audio: Audio payload
            language: Provider language code
            content_type: MIME type of the audio

        Returns:
            Transcribed text as returned by the provider
        """
        response = await self._request(
            "asr",
            "POST",
            ASR_PATH,
            params={"language": language},
            content=audio,
            headers={"Content-Type": content_type},
        )
        return response.text

    async def synthesize(self, text: str, language: str, speaker_id: str) -> bytes:
        """Synthesize speech and return WAV bytes."""
        response = await self._request(
            "tts",
            "POST",
            TTS_PATH,
            json={"text": text, "language": language, "speaker_id": speaker_id},
        )
        return response.content

    async def list_tts_languages(self) -> Any:
        response = await self._request("tts", "GET", TTS_LANGUAGES_PATH)
        return self._decode(response)

    async def list_tts_speakers(self) -> Any:
        response = await self._request("tts", "GET", TTS_SPEAKERS_PATH)
        return self._decode(response)

    async def aclose(self) -> None:
        await self._http.aclose()
