import logging

import httpx
import pytest

from email_writer.errors import ParseError, UpstreamError
from email_writer.models import GenerationRequest
from email_writer.services.gemini_client import GeminiClient
from email_writer.services.generation_service import EmailGenerator

from .helpers import RecordingTransport, gemini_body

pytestmark = pytest.mark.anyio


def make_generator(settings, transport):
    return EmailGenerator(settings, GeminiClient(settings, transport=transport))


async def test_generate_returns_trimmed_email(settings):
    transport = RecordingTransport(body=gemini_body("\nSubject: Hi\n\nBody\n"))
    generator = make_generator(settings, transport)

    text = await generator.generate(GenerationRequest(content="Say hi", tone="casual"))

    assert text == "Subject: Hi\n\nBody"
    prompt = transport.sent_prompt()
    assert "Email Requirements: Say hi" in prompt
    assert "Tone: casual" in prompt
    assert prompt.endswith("Write the email now:")


async def test_legacy_field_reaches_the_prompt(settings):
    transport = RecordingTransport(body=gemini_body("done"))
    request = GenerationRequest.model_validate({"emailContent": "Book the venue"})

    await make_generator(settings, transport).generate(request)

    assert "Email Requirements: Book the venue" in transport.sent_prompt()


async def test_empty_candidates_raise(settings):
    generator = make_generator(settings, RecordingTransport(body={"candidates": []}))

    with pytest.raises(UpstreamError, match="No candidates"):
        await generator.generate(GenerationRequest(content="x"))


async def test_invalid_json_raises_parse_error(settings):
    generator = make_generator(settings, RecordingTransport(body=""))

    with pytest.raises(ParseError):
        await generator.generate(GenerationRequest(content="x"))


async def test_failure_is_logged_with_upstream_details(settings, caplog):
    transport = RecordingTransport(status_code=500, body="backend exploded")
    generator = make_generator(settings, transport)

    with caplog.at_level(logging.ERROR, logger="email_writer.services.generation_service"):
        with pytest.raises(UpstreamError):
            await generator.generate(GenerationRequest(content="x"), request_id="req-1")

    assert '"request_id":"req-1"' in caplog.text
    assert '"status":500' in caplog.text
    assert "backend exploded" in caplog.text


async def test_timeout_propagates(settings):
    transport = RecordingTransport(exc=httpx.ReadTimeout("slow"))

    with pytest.raises(UpstreamError) as excinfo:
        await make_generator(settings, transport).generate(GenerationRequest(content="x"))

    assert excinfo.value.kind == "timeout"
