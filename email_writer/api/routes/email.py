import logging
import uuid

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import PlainTextResponse

from ...errors import EmailWriterError, GenerationFailed, InvalidInput
from ...models import GenerationRequest
from ...services.generation_service import EmailGenerator

HEALTH_MESSAGE = "Email Writer API is running!"
EMPTY_CONTENT_MESSAGE = "Email content cannot be empty"
GENERATION_FAILED_MESSAGE = "Failed to generate email content"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred while generating the email"

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/email")


def get_generator(request: Request) -> EmailGenerator:
    return request.app.state.generator


def require_content(payload: GenerationRequest | None) -> str:
    if payload is None or not payload.content or not payload.content.strip():
        raise InvalidInput(EMPTY_CONTENT_MESSAGE)
    return payload.content


def _one_line(exc: Exception) -> str:
    lines = str(exc).strip().splitlines()
    return lines[0] if lines else type(exc).__name__


@router.post("/generate", response_class=PlainTextResponse)
async def generate(
    payload: GenerationRequest | None = Body(default=None),
    generator: EmailGenerator = Depends(get_generator),
) -> PlainTextResponse:
    try:
        require_content(payload)
    except InvalidInput as exc:
        return PlainTextResponse(str(exc), status_code=400)

    request_id = uuid.uuid4().hex
    try:
        text = await generator.generate(payload, request_id=request_id)
    except EmailWriterError as exc:
        logger.error("Error generating email [%s]: %s", request_id, _one_line(exc))
        return PlainTextResponse(f"Error generating email: {_one_line(exc)}", status_code=500)
    except Exception:
        logger.exception("Unexpected error generating email [%s]", request_id)
        return PlainTextResponse(UNEXPECTED_ERROR_MESSAGE, status_code=500)

    if not text or not text.strip():
        exc = GenerationFailed(GENERATION_FAILED_MESSAGE)
        logger.error("Error generating email [%s]: %s", request_id, exc)
        return PlainTextResponse(str(exc), status_code=500)

    return PlainTextResponse(text)


@router.get("/health", response_class=PlainTextResponse)
async def health() -> PlainTextResponse:
    return PlainTextResponse(HEALTH_MESSAGE)
