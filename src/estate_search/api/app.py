from typing import Any

from fastapi import FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from estate_search.api.dependencies import HandlerDep, make_lifespan
from estate_search.config import settings
from estate_search.dto import (
    EstateItem,
    EstateListResponse,
    EstateSearchResponse,
    HealthCheckResponse,
    NazotteSearchRequest,
    RequestDocumentRequest,
)
from estate_search.logging import configure_logging
from estate_search.protocols import EstateStore

API_NAME = "Estate Search API"
API_VERSION = "0.1.0"


async def _bad_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are client errors, reported as 400.

    The offending input is left out of the body; it may be a non-finite float
    that cannot be written back as JSON.
    """
    errors = [
        {"loc": error["loc"], "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(errors)},
    )


def build_app(store: EstateStore | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        store: Estate store to serve from. If None, uses Redis from settings.

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title=API_NAME,
        description="Polygon and detail search over estate listings",
        version=API_VERSION,
        lifespan=make_lifespan(store),
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _bad_request)  # type: ignore[arg-type]

    @app.get("/")
    def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": API_NAME,
            "version": API_VERSION,
            "endpoints": {
                "nazotte": "/api/estate/nazotte",
                "detail": "/api/estate/{estate_id}",
                "low_priced": "/api/estate/low_priced",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health", response_model=HealthCheckResponse)
    def health(handler: HandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        return handler.health_check()

    @app.post("/api/estate/nazotte", response_model=EstateSearchResponse)
    def search_nazotte(request: NazotteSearchRequest, handler: HandlerDep) -> EstateSearchResponse:
        """Find estates inside a drawn polygon."""
        return handler.search_nazotte(request)

    # Registered before the detail route so "low_priced" is not read as an id
    @app.get("/api/estate/low_priced", response_model=EstateListResponse)
    def low_priced(handler: HandlerDep) -> EstateListResponse:
        """List the cheapest estates."""
        return handler.list_low_priced()

    @app.get("/api/estate/{estate_id}", response_model=EstateItem)
    def estate_detail(estate_id: str, handler: HandlerDep) -> EstateItem:
        """Get a single estate, served from the cache when possible."""
        return handler.get_estate_detail(estate_id)

    @app.post("/api/estate/req_doc/{estate_id}")
    def request_document(
        estate_id: str,
        request: RequestDocumentRequest,
        handler: HandlerDep,
    ) -> Response:
        """Request documents for an estate."""
        handler.request_document(estate_id, request)
        return Response(status_code=status.HTTP_200_OK)

    return app


app = build_app()


def main() -> None:
    import uvicorn

    configure_logging()
    uvicorn.run(
        "estate_search.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
