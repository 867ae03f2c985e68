"""
FastAPI backend server for the Daily News Viewer.

Provides REST API endpoints serving the merged daily news shards, either
raw in merge order or classified and grouped for display.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from backend._types import (
    CategoriesResponse,
    ErrorResponse,
    GroupedNewsResponse,
    HealthCheckResponse,
)
from backend.app.services.news import NewsService, create_news_service
from backend.classification import AUSTRIA_SUBCATEGORIES, GROUP_PRIORITY
from backend.exceptions import NewsError
from backend.settings import settings

logger = logging.getLogger(__name__)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Initialize FastAPI app
app = FastAPI(
    title=settings.api.title,
    description=settings.api.description,
    version=settings.api.version,
)

# Add CORS middleware
if settings.api.enable_cors:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Resource-Policy": "same-origin",
}

# Global services
news_service: Optional[NewsService] = None


def get_news_service() -> NewsService:
    """Return the shared NewsService, creating it on first use."""
    global news_service
    if news_service is None:
        news_service = create_news_service()
        logger.info("News service initialized successfully")
    return news_service


@app.middleware("http")
async def https_and_security_headers(request: Request, call_next):
    """Redirect plain HTTP behind a proxy in production; add security headers."""
    if settings.is_production and request.headers.get("x-forwarded-proto") != "https":
        target = request.url.replace(scheme="https")
        return RedirectResponse(str(target), status_code=301)

    response = await call_next(request)
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response


@app.exception_handler(NewsError)
async def news_error_handler(request: Request, exc: NewsError) -> JSONResponse:
    """Translate domain errors into {message} responses."""
    if exc.status_code >= 500:
        logger.error(f"{request.url.path} failed: {exc}", exc_info=exc)
    else:
        logger.info(f"{request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(message=exc.message).model_dump(),
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and answer with the generic unavailable message."""
    logger.error(f"Unexpected error on {request.url.path}: {str(exc)}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(message=NewsError.default_message).model_dump(),
    )


@app.on_event("startup")
async def startup_event():
    """FastAPI startup event handler."""
    logger.info("Starting Daily News Viewer API server")
    for issue in settings.validate():
        logger.warning(issue)
    get_news_service()


@app.on_event("shutdown")
async def shutdown_event():
    """FastAPI shutdown event handler."""
    logger.info("Shutting down Daily News Viewer API server")


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint - API health check."""
    return {
        "name": settings.api.title,
        "status": "operational",
        "version": settings.api.version,
    }


@app.get("/health", tags=["Health"], response_model=HealthCheckResponse)
async def health_check(service: NewsService = Depends(get_news_service)):
    """Health check endpoint."""
    return HealthCheckResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        data_dir=service.resolver.storage.describe(),
    )


@app.get(
    "/api/news",
    tags=["News"],
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_news(
    date: Optional[str] = Query(
        None, description="'yesterday', 'today' or YYYY-MM-DD (default: today)"
    ),
    service: NewsService = Depends(get_news_service),
) -> JSONResponse:
    """
    Get the raw news items for a date.

    Items come in merge order: permanent shards, the primary shard for the
    day, then further shards for that day. Items flagged with `ignore` are
    included; the consumer drops them before classification.

    Args:
        date: Requested date

    Returns:
        JSON array of news records
    """
    items = service.raw_items(date)
    content: List[dict] = [item.to_dict() for item in items]
    return JSONResponse(content=content)


@app.get(
    "/api/news/grouped",
    tags=["News"],
    response_model=GroupedNewsResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_grouped_news(
    date: Optional[str] = Query(
        None, description="'yesterday', 'today' or YYYY-MM-DD (default: today)"
    ),
    group: Optional[str] = Query(None, description="Only return this group"),
    sub: Optional[str] = Query(None, description="Only return this sub-category of the group"),
    q: Optional[str] = Query(None, description="Search headline, teaser and source"),
    service: NewsService = Depends(get_news_service),
):
    """
    Get classified news for a date, grouped in display order.

    Ignored items are dropped; inside each group football stories lead the
    sport items.
    """
    grouped = service.grouped(date, group=group, sub=sub, query=q)
    return GroupedNewsResponse(**grouped.to_dict())


@app.get("/api/categories", tags=["Metadata"], response_model=CategoriesResponse)
async def get_categories():
    """Get the fixed group order and the Österreich sub-categories."""
    return CategoriesResponse(
        groups=list(GROUP_PRIORITY),
        austria_subcategories=list(AUSTRIA_SUBCATEGORIES),
    )


if __name__ == "__main__":
    import uvicorn

    logger.info("Starting FastAPI server")
    uvicorn.run(
        app,
        host=settings.api.host,
        port=settings.api.port,
        log_level="info",
    )
