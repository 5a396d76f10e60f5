import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.router import router
from app.core.config import Settings, settings as default_settings
from app.core.errors import PartyServiceError
from app.core.telemetry import setup_telemetry
from app.partytypes.registry import PARTY_TYPES
from app.schemas.common import ErrorResponse
from app.services.failure_injector import FailureInjector
from app.services.party_catalog import build_catalog


log = logging.getLogger(__name__)


async def party_service_error_handler(request: Request, exc: PartyServiceError) -> JSONResponse:
    body = ErrorResponse(code=exc.code, message=exc.message, details=exc.details)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(mode="json"))


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings

    # Fails fast on inconsistent party definitions, before any request is served
    catalog = build_catalog(PARTY_TYPES)

    app = FastAPI(title="Party Planner API", version="0.1.0")
    app.state.settings = settings
    app.state.catalog = catalog
    app.state.failure_injector = FailureInjector(settings.prod_failure_rate)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST", "HEAD"],
        allow_headers=["*"],
    )
    app.add_exception_handler(PartyServiceError, party_service_error_handler)

    setup_telemetry(app, settings)
    app.include_router(router)
    return app


app = create_app()


def run() -> None:
    import uvicorn

    logging.basicConfig(level=default_settings.log_level.upper())
    log.info("starting %s on port %d", default_settings.service_name, default_settings.port)
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)
