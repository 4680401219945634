"""FastAPI application entrypoint for pageassets service mode."""

from __future__ import annotations

import base64
import binascii
from typing import Any, Callable, Dict, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..classifier import category_to_directory, classify
from ..config import ConfigError, ExportOptions
from ..mime import mime_from_extension
from ..models import InlinePolicy, LoadTiming, Mutability, RenderMode, ResourceCategory, parse_enum
from ..paths import extension_of
from ..registry import ResourceRegistry
from ..resource import Resource


class RenderRequest(BaseModel):
    filename: str
    content: Optional[str] = None
    content_base64: Optional[str] = None
    category: Optional[str] = None
    policy: str = "auto"
    timing: str = "default"
    minify: bool = False
    anchor: Optional[str] = None
    online_url: Optional[str] = None
    options: Dict[str, Any] = Field(default_factory=dict)


class RenderResponse(BaseModel):
    markup: str
    mode: str
    category: str
    path: str


class ClassifyResponse(BaseModel):
    extension: str
    category: str
    directory: str
    mime: str


class HealthResponse(BaseModel):
    status: str


def _default_registry() -> ResourceRegistry:
    return ResourceRegistry()


def create_app(
    registry_factory: Callable[[], ResourceRegistry] = _default_registry,
) -> FastAPI:
    """Create the FastAPI application exposing classification and rendering."""

    app = FastAPI(title="PageAssets Service", version="1.0.0")

    async def get_registry() -> ResourceRegistry:
        # Fresh registry per request so service calls never share resources.
        return registry_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/classify/{extension}", response_model=ClassifyResponse)
    async def classify_extension(extension: str) -> ClassifyResponse:
        category = classify(extension)
        return ClassifyResponse(
            extension=extension,
            category=category.value,
            directory=category_to_directory(category),
            mime=mime_from_extension(extension),
        )

    @app.post("/render", response_model=RenderResponse)
    async def render(
        payload: RenderRequest,
        registry: ResourceRegistry = Depends(get_registry),
    ) -> RenderResponse:
        category = parse_enum(ResourceCategory, payload.category)
        if payload.category is not None and category is None:
            raise ValueError(f"Unknown category: {payload.category}")
        if category is None:
            category = classify(extension_of(payload.filename))
        policy = parse_enum(InlinePolicy, payload.policy)
        if policy is None:
            raise ValueError(f"Unknown inline policy: {payload.policy}")
        timing = parse_enum(LoadTiming, payload.timing)
        if timing is None:
            raise ValueError(f"Unknown load timing: {payload.timing}")

        options = ExportOptions.from_mapping(payload.options)
        resource = Resource(
            payload.filename,
            _decode_content(payload),
            category,
            policy,
            payload.minify,
            Mutability.EPHEMERAL,
            registry=registry,
            load_timing=timing,
            online_url=payload.online_url,
            options=options,
        )
        await resource.load(options)
        markup = resource.render(options, anchor=payload.anchor)
        mode = resource.mode()
        path = resource.reference_path(payload.anchor) if mode is RenderMode.REFERENCE else ""
        return RenderResponse(
            markup=markup,
            mode=mode.value,
            category=category.value,
            path=path,
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(
        _: Any, exc: ValueError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ConfigError)
    async def config_error_handler(
        _: Any, exc: ConfigError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def _decode_content(payload: RenderRequest) -> str | bytes:
    if payload.content_base64 is not None:
        try:
            return base64.b64decode(payload.content_base64, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValueError(f"Invalid base64 content for {payload.filename}") from exc
    return payload.content or ""


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port)
