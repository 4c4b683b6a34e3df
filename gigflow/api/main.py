# gigflow/api/main.py
from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..config import Settings, configure_logging
from ..errors import NotFound, TransportError, ValidationError
from ..ledger import Ledger
from .clients import router as clients_router
from .dashboard import router as dashboard_router
from .gigs import router as gigs_router
from .health import router as health_router
from .invoices import router as invoices_router

log = logging.getLogger("uvicorn.error")


def create_app(ledger: Optional[Ledger] = None) -> FastAPI:
    app = FastAPI(title="GigFlow API", version="0.1.0", docs_url="/docs", redoc_url=None)
    app.state.ledger = ledger if ledger is not None else Ledger.from_settings(Settings.from_env())

    # ──────────────────────────────────────────────────────────────────────────
    # CORS (the dashboard runs on its own origin)
    # ──────────────────────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ──────────────────────────────────────────────────────────────────────────
    # Ledger errors -> HTTP
    # ──────────────────────────────────────────────────────────────────────────
    @app.exception_handler(NotFound)
    async def not_found(request: Request, exc: NotFound):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ValidationError)
    async def invalid(request: Request, exc: ValidationError):
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(TransportError)
    async def upstream_failed(request: Request, exc: TransportError):
        log.error(f"{request.method} {request.url.path} failed upstream: {exc}")
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    @app.get("/", tags=["default"])
    def read_root():
        return {"ok": True, "service": "gigflow-api"}

    app.include_router(health_router)
    app.include_router(dashboard_router)
    app.include_router(clients_router)
    app.include_router(gigs_router)
    app.include_router(invoices_router)
    return app


app = create_app()

# ──────────────────────────────────────────────────────────────────────────────
# Local dev entrypoint
# ──────────────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import uvicorn

    settings = Settings.from_env()
    configure_logging(settings.log_level)
    uvicorn.run(
        "gigflow.api.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=True,
    )
