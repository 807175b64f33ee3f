import pytest

from email_writer.config import Settings

BASE_URL = "https://gemini.test"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    return Settings(api_base_url=BASE_URL, api_key="test-key")
