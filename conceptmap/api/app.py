from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from conceptmap.api.routes import generate, health
from conceptmap.config.settings import Settings
from conceptmap.diagram.models import SERVER_ERROR_DIAGRAM
from conceptmap.logging.logger import Log
from conceptmap.processor.processor import Processor, build_processor


def create_app(settings: Settings, processor: Processor | None = None) -> FastAPI:
    """Build the FastAPI application around a ready processor."""
    app = FastAPI(title="Concept Map Generator", version="0.1.0")
    app.state.settings = settings
    app.state.processor = processor if processor is not None else build_processor(settings)

    app.include_router(generate.router, prefix="/api", tags=["diagram"])
    app.include_router(health.router, tags=["health"])

    @app.exception_handler(StarletteHTTPException)
    async def method_not_allowed_handler(
        request: Request, exc: StarletteHTTPException
    ) -> Response:
        if exc.status_code == 405:
            return PlainTextResponse("Method Not Allowed", status_code=405)
        return await http_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
        Log.exception(f"Unhandled exception on {request.url.path}: {exc}")
        return PlainTextResponse(SERVER_ERROR_DIAGRAM, status_code=500)

    Log.info(
        f"App ready: mode={settings.pipeline_mode}, "
        f"provider={settings.generation_provider}, pdf_engine={settings.pdf_engine}"
    )
    return app
