import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from insurance_playground import __version__, config
from insurance_playground.database import Database
from insurance_playground.routers import admin, auth, brokers, claims, customers, policies, reference
from insurance_playground.services.errors import PlaygroundError
from insurance_playground.services.seed import seed_database

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

AVAILABLE_ENDPOINTS = [
    "GET /api/health",
    "GET /api/customers",
    "GET /api/customers/search",
    "POST /api/customers",
    "GET /api/customers/:id",
    "POST /api/auth/login",
    "GET /api/policies",
    "GET /api/policies/search",
    "GET /api/policies/:id",
    "POST /api/policies",
    "PUT /api/policies/:id",
    "PUT /api/policies/:id/status",
    "PUT /api/policies/:id/underwriting",
    "DELETE /api/policies/:id",
    "GET /api/claims",
    "GET /api/claims/search",
    "GET /api/claims/:id",
    "POST /api/claims",
    "PUT /api/claims/:id/status",
    "GET /api/brokers",
    "GET /api/brokers/search",
    "GET /api/brokers/:id",
    "POST /api/brokers",
    "PUT /api/brokers/:id",
    "DELETE /api/brokers/:id",
    "GET /api/agents",
    "GET /api/quotes",
    "POST /api/admin/login",
    "POST /api/admin/reset-database",
    "GET /api/admin/customers",
    "POST /api/admin/customers",
    "PUT /api/admin/customers/:id",
    "DELETE /api/admin/customers/:id",
]


def _error_body(message: str, error=None, **extra) -> dict:
    body = {"success": False, "message": message}
    if error is not None:
        body["error"] = error
    body.update(extra)
    return body


async def playground_error_handler(request: Request, exc: PlaygroundError):
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(_error_body(exc.message, exc.error, **exc.extra)),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder(_error_body("Invalid request", exc.errors())),
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content=_error_body(str(exc.detail)))


def create_app(database_url: str = None, seed: bool = None) -> FastAPI:
    """Build the API bound to its own database handle."""
    db = Database(database_url)
    seed_on_startup = config.SEED_ON_STARTUP if seed is None else seed

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db.create_all()
        if seed_on_startup:
            seed_database(db)
        yield
        db.dispose()
        logger.info("Database connections closed")

    app = FastAPI(
        title="Insurance Playground",
        description="Insurance back-office test API: customers, policies, claims, brokers and quotes",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.db = db

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PlaygroundError, playground_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    app.include_router(reference.router)
    app.include_router(auth.router)
    app.include_router(customers.router)
    app.include_router(policies.router)
    app.include_router(claims.router)
    app.include_router(brokers.router)
    app.include_router(admin.router)

    # Must stay last: anything under /api that no router matched
    @app.api_route("/api/{path:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE"], include_in_schema=False)
    def endpoint_not_found(path: str):
        return JSONResponse(
            status_code=404,
            content=_error_body("Endpoint not found", availableEndpoints=AVAILABLE_ENDPOINTS),
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
