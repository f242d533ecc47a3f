"""
FastAPI application, so an editor plugin can ask for hover images over HTTP.

POST /api/hover with the hovered line and cursor offsets. Returns the located FEN string and the rendered image
(base64 + ready-made markdown). When there is nothing to show, responds 422 with the kind of failure.

The endpoint is sync on purpose: FastAPI runs sync handlers in a thread pool, which suits the CPU-bound rendering.
All requests share one service, hence one tile cache.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fen_viewer.api.models import HoverRequest, HoverResponse
from fen_viewer.core.config import RendererConfig
from fen_viewer.core.exceptions import FenViewerError
from fen_viewer.render.renderer import BoardRenderer
from fen_viewer.services.hover_service import FenHoverService

_log = logging.getLogger(__name__)


def create_app(service: Optional[FenHoverService] = None) -> FastAPI:
    if service is None:
        service = FenHoverService(BoardRenderer(RendererConfig.from_env()))

    app = FastAPI(title="FEN viewer")

    @app.exception_handler(FenViewerError)
    def handle_domain_error(request: Request, exc: FenViewerError) -> JSONResponse:
        _log.info("No board for %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=422,
            content={"error": type(exc).__name__, "detail": str(exc)},
        )

    @app.post("/api/hover", response_model=HoverResponse)
    def api_hover(request: HoverRequest) -> HoverResponse:
        return service.hover(request)

    return app
