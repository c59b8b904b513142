from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.config import LIST_LATENCY_SECONDS, STATIC_DIR, WRITE_TIMEOUT_SECONDS
from catalog.middleware import RequestLoggingMiddleware
from catalog.routes.items import router as items_router
from catalog.storage import ItemStore

APP_VERSION = "0.1.0"


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return PlainTextResponse("404 page not found", status_code=404)
    return await http_exception_handler(request, exc)


def create_app(
    store: ItemStore | None = None,
    static_dir: Path = STATIC_DIR,
    list_latency: float = LIST_LATENCY_SECONDS,
    request_deadline: float | None = WRITE_TIMEOUT_SECONDS,
) -> FastAPI:
    app = FastAPI(title="Catalog API", version=APP_VERSION)
    app.state.store = store if store is not None else ItemStore()
    app.state.list_latency = list_latency
    app.state.request_deadline = request_deadline

    app.add_middleware(RequestLoggingMiddleware)
    app.add_exception_handler(StarletteHTTPException, not_found_handler)

    app.include_router(items_router)

    static_dir = Path(static_dir)
    static_dir.mkdir(parents=True, exist_ok=True)
    app.mount("/static", StaticFiles(directory=static_dir, html=True), name="static")
    return app
