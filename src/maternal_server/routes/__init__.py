"""Route registration — mounts all routers at the application root."""

from fastapi import FastAPI

from maternal_server.routes.eligibility import router as eligibility_router
from maternal_server.routes.reference import router as reference_router
from maternal_server.routes.risk import router as risk_router


def register_routes(app: FastAPI) -> None:
    """Include all sub-routers."""
    app.include_router(risk_router)
    app.include_router(eligibility_router)
    app.include_router(reference_router)
