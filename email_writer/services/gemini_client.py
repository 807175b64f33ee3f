from dataclasses import dataclass

import httpx

from ..config import Settings
from ..errors import UpstreamError
from .utils.constants import API_KEY_HEADER
from .utils.payload import build_request_body


@dataclass
class GeminiResult:
    status_code: int
    body_text: str


class GeminiClient:
    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = settings.generate_url
        self.api_key = settings.api_key
        self.timeout_seconds = settings.timeout_seconds
        self.transport = transport

    async def generate_content(self, prompt: str) -> GeminiResult:
        """Send one generateContent call. No retries."""
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, transport=self.transport
            ) as client:
                response = await client.post(
                    self.url,
                    headers={
                        API_KEY_HEADER: self.api_key,
                        "Content-Type": "application/json",
                    },
                    content=build_request_body(prompt).encode("utf-8"),
                )
        except httpx.TimeoutException as exc:
            raise UpstreamError(
                f"Gemini API timed out after {self.timeout_seconds:g}s", kind="timeout"
            ) from exc
        except httpx.HTTPError as exc:
            raise UpstreamError(
                f"Failed to call Gemini API: {type(exc).__name__}: {exc}", kind="transport"
            ) from exc

        if not response.is_success:
            raise UpstreamError(
                f"Failed to call Gemini API: HTTP {response.status_code}",
                kind="http",
                status_code=response.status_code,
                body=response.text,
            )

        return GeminiResult(status_code=response.status_code, body_text=response.text)
