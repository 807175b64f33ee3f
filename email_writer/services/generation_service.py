import logging
import time
import uuid
from typing import Any

from ..config import Settings
from ..errors import EmailWriterError, ParseError, UpstreamError
from ..logging_utils import log_event, utc_now_iso
from ..models import GenerationRequest
from .gemini_client import GeminiClient
from .prompting import build_prompt
from .response_parsing import extract_email_text
from .utils.constants import BODY_PREVIEW_CHARS

logger = logging.getLogger(__name__)


class EmailGenerator:
    def __init__(self, settings: Settings, client: GeminiClient | None = None) -> None:
        self.settings = settings
        self.client = client or GeminiClient(settings)

    async def generate(self, request: GenerationRequest, request_id: str = "") -> str:
        start_time = time.perf_counter()
        log_record: dict[str, Any] = {
            "ts": utc_now_iso(),
            "request_id": request_id or uuid.uuid4().hex,
            "event": "generate",
            "model_name": self.settings.model_name,
            "tone": request.tone or None,
        }

        prompt = build_prompt(request.content or "", request.tone)
        if self.settings.prompt_debug:
            logger.debug("Prompt for %s:\n%s", log_record["request_id"], prompt)

        try:
            result = await self.client.generate_content(prompt)
            log_record["gemini_http"] = {"status": result.status_code}
            text = extract_email_text(result.body_text)
        except EmailWriterError as exc:
            log_record["error"] = self._describe_error(exc)
            log_record["status"] = "error"
            log_record["latency_ms"] = int((time.perf_counter() - start_time) * 1000)
            log_event(logger, log_record, logging.ERROR)
            raise

        log_record["output_chars"] = len(text)
        log_record["latency_ms"] = int((time.perf_counter() - start_time) * 1000)
        log_record["status"] = "ok"
        log_event(logger, log_record)
        return text

    @staticmethod
    def _describe_error(exc: EmailWriterError) -> dict[str, Any]:
        if isinstance(exc, UpstreamError) and exc.kind in ("timeout", "transport", "http"):
            error: dict[str, Any] = {"stage": "gemini_request", "kind": exc.kind, "msg": str(exc)}
            if exc.status_code is not None:
                error["status"] = exc.status_code
            if exc.body:
                error["body_preview"] = exc.body[:BODY_PREVIEW_CHARS]
            return error
        if isinstance(exc, ParseError):
            return {"stage": "parse_json", "type": type(exc).__name__, "msg": str(exc)}
        return {"stage": "extract_text", "type": type(exc).__name__, "msg": str(exc)}
