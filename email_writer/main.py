import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .api.routes import email
from .config import Settings, load_settings
from .errors import ConfigError
from .logging_utils import configure_logging
from .services.generation_service import EmailGenerator

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Invalid request body"


async def _invalid_body(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    logger.info("Rejected request body on %s: %s", request.url.path, exc.errors())
    return PlainTextResponse(INVALID_BODY_MESSAGE, status_code=400)


def create_app(settings: Settings, generator: EmailGenerator | None = None) -> FastAPI:
    app = FastAPI(title="Email Writer API")
    app.state.generator = generator or EmailGenerator(settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _invalid_body)
    app.include_router(email.router)
    return app


def run() -> None:
    try:
        settings = load_settings()
    except ConfigError as exc:
        raise SystemExit(f"email-writer: {exc}") from exc

    configure_logging(settings.log_level)
    logger.info("Starting Email Writer API with model %s", settings.model_name)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)