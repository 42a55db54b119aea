from fastapi import FastAPI

from mortgage_calculator.entrypoints.http.exception_handlers import register_exception_handlers
from mortgage_calculator.entrypoints.http.routes.affordability import router as affordability_router
from mortgage_calculator.entrypoints.http.routes.health import router as health_router
from mortgage_calculator.entrypoints.http.routes.payment_schedule import (
    router as payment_schedule_router,
)
from mortgage_calculator.infra.config import get_settings
from mortgage_calculator.infra.logger import configure_logging


def build_app() -> FastAPI:
    configure_logging(get_settings().log_level)

    app = FastAPI(
        title="Mortgage Calculator API",
        description="""
        Serverless API for the mortgage affordability calculator.

        ## Features
        - Maximum affordable loan from income, debts and DTI ceilings
        - Monthly payment breakdown (principal & interest, escrow)
        - Full amortization schedules

        ## Authentication
        No authentication required.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        Validation errors list every failing field with a reason code
        (MISSING, NOT_A_NUMBER, OUT_OF_RANGE).
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        license_info={
            "name": "Proprietary",
        },
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(affordability_router, prefix="/v1")
    app.include_router(payment_schedule_router, prefix="/v1")

    return app


app = build_app()
