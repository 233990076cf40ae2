"""HTTP surface of the completion relay.

Routes:
- POST /chat: JSON snapshot in (any content type), {"response": ...} out
- GET /health: liveness probe
- /static/*: files from STATIC_DIR when configured, otherwise 404
- any other non-POST request: the static HTML shell

`handler` wraps the same ASGI app for serverless platforms.
"""

import logging
from collections.abc import Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from mangum import Mangum
from pydantic import ValidationError

from ..config import get_config
from ..llm import LLMProvider, create_llm_provider
from .models import ChatRequest, ChatResponse, ErrorResponse
from .service import CompletionRelay
from .shell import render_shell

logger = logging.getLogger("advanced_ai.relay")

SHELL_METHODS = ["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"]
STATIC_PREFIX = "/static"


def create_app(
    provider_factory: Callable[[], LLMProvider] = create_llm_provider,
    bundle_url: str | None = None,
    static_dir: str | None = None,
) -> FastAPI:
    """Build the relay application.

    Args:
        provider_factory: Called once at startup; the provider is closed on shutdown
        bundle_url: Script URL for the HTML shell (None reads CLIENT_BUNDLE_URL)
        static_dir: Directory served under /static (None reads STATIC_DIR)

    Returns:
        Configured FastAPI application
    """
    config = get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        provider = provider_factory()
        app.state.relay = CompletionRelay(provider)
        logger.info("Relay ready (provider=%s)", type(provider).__name__)
        try:
            yield
        finally:
            await provider.close()
            logger.info("Relay stopped")

    app = FastAPI(title="Advanced AI Relay", version="0.1.0", lifespan=lifespan)
    shell_html = render_shell(bundle_url or config.client_bundle_url)

    @app.post(
        "/chat",
        response_model=ChatResponse,
        responses={422: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
    )
    async def chat(request: Request):
        # Parsed regardless of content type; fetch() defaults to text/plain
        try:
            body = ChatRequest.model_validate_json(await request.body())
        except ValidationError as e:
            errors = e.errors(include_url=False)
            logger.warning("Rejected malformed %s %s: %d error(s)", request.method, request.url.path, len(errors))
            error = ErrorResponse(error="invalid_request", detail=jsonable_encoder(errors))
            return JSONResponse(status_code=422, content=error.model_dump())

        relay: CompletionRelay = request.app.state.relay
        try:
            return await relay.complete(body)
        except Exception:
            logger.exception("Upstream completion failed")
            error = ErrorResponse(error="upstream_error")
            return JSONResponse(status_code=502, content=error.model_dump())

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    static_dir = static_dir or config.static_dir
    if static_dir:
        app.mount(STATIC_PREFIX, StaticFiles(directory=static_dir), name="static")

    @app.api_route("/{path:path}", methods=SHELL_METHODS, response_class=HTMLResponse, include_in_schema=False)
    async def shell(path: str):
        # Missing assets are 404s, never the shell
        if f"/{path}".startswith(f"{STATIC_PREFIX}/"):
            error = ErrorResponse(error="not_found", detail=f"/{path}")
            return JSONResponse(status_code=404, content=error.model_dump())
        return HTMLResponse(shell_html)

    return app


app = create_app()
handler = Mangum(app)
