"""FastAPI application entrypoint for htmlfmt service mode."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..config import HtmlFmtConfig, load_config
from ..formatters import minify, prettify
from ..logging import get_logger
from ..validators import validate

_logger = get_logger("service")


class PrettifyRequest(BaseModel):
    html: str
    indent_size: Optional[int] = Field(default=None, ge=0)
    use_tabs: Optional[bool] = None


class MinifyRequest(BaseModel):
    html: str
    remove_comments: Optional[bool] = None


class ValidateRequest(BaseModel):
    html: str


class FormatResponse(BaseModel):
    output: str


class ValidateResponse(BaseModel):
    valid: bool
    errors: List[str]
    issues: List[Dict[str, Any]]


class HealthResponse(BaseModel):
    status: str


def _default_config() -> HtmlFmtConfig:
    return load_config(Path.cwd())


def create_app(
    config_factory: Callable[[], HtmlFmtConfig] = _default_config,
) -> FastAPI:
    """Create the FastAPI application exposing htmlfmt operations.

    ``config_factory`` supplies the defaults for options a request leaves
    unset; by default the ``.htmlfmt.yml`` of the working directory is read.
    """
    app = FastAPI(title="htmlfmt Service", version="1.0.0")

    async def get_config() -> HtmlFmtConfig:
        # Re-read per request so edits to .htmlfmt.yml apply without a restart.
        return config_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/prettify", response_model=FormatResponse)
    async def prettify_markup(
        payload: PrettifyRequest,
        defaults: HtmlFmtConfig = Depends(get_config),
    ) -> FormatResponse:
        options = defaults.with_overrides(
            indent_size=payload.indent_size, use_tabs=payload.use_tabs
        ).prettify
        _logger.debug("Prettify request (%d characters)", len(payload.html))
        return FormatResponse(
            output=prettify(payload.html, options.indent_size, options.use_tabs)
        )

    @app.post("/minify", response_model=FormatResponse)
    async def minify_markup(
        payload: MinifyRequest,
        defaults: HtmlFmtConfig = Depends(get_config),
    ) -> FormatResponse:
        options = defaults.with_overrides(remove_comments=payload.remove_comments).minify
        _logger.debug("Minify request (%d characters)", len(payload.html))
        return FormatResponse(output=minify(payload.html, options.remove_comments))

    @app.post("/validate", response_model=ValidateResponse)
    async def validate_markup(payload: ValidateRequest) -> ValidateResponse:
        report = validate(payload.html)
        _logger.debug("Validate request produced %d error(s)", len(report.errors))
        return ValidateResponse(**report.to_dict())

    @app.exception_handler(RuntimeError)
    async def runtime_error_handler(_: Any, exc: RuntimeError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port)
