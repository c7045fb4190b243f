import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlmodel import Session

from storefront.config import settings
from storefront.database import create_db_and_tables, engine, seed_reference_data
from storefront.exceptions import StorefrontError
from storefront.routes import auth, health, orders, payment, pincode
from storefront.services.auth_strategy import build_auth_strategy

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Run DB creation and seeding ONLY in local
    if settings.ENV == "local":
        create_db_and_tables()
        with Session(engine) as session:
            seed_reference_data(session)
    yield


def storefront_error_handler(request: Request, exc: StorefrontError):
    content = {"error": exc.message}
    if exc.fields:
        content["fields"] = exc.fields
    return JSONResponse(status_code=exc.status_code, content=content)


def request_validation_handler(request: Request, exc: RequestValidationError):
    fields = {
        ".".join(str(part) for part in error["loc"] if part != "body"): error["msg"]
        for error in exc.errors()
    }
    return JSONResponse(
        status_code=400,
        content={"error": "Missing required fields", "fields": fields},
    )


def create_app(auth_strategy=None) -> FastAPI:
    app = FastAPI(title="Jagannath Publications Storefront API", lifespan=lifespan)
    app.state.auth_strategy = auth_strategy or build_auth_strategy(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StorefrontError, storefront_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(auth.router, prefix="/auth", tags=["Authentication"])
    app.include_router(pincode.router, prefix="/pincode", tags=["Delivery"])
    app.include_router(orders.router, tags=["Orders"])
    app.include_router(payment.router, prefix="/payment", tags=["Payments"])
    app.include_router(health.router, prefix="/health", tags=["Health"])

    @app.get("/")
    def root():
        return {
            "auth_endpoints": ["/auth/otp", "/auth/verify", "/auth/me"],
            "delivery_endpoints": ["/pincode?pincode={pincode}"],
            "order_endpoints": ["/order/create", "/orders", "/orders/{order_id}"],
            "payment_endpoints": ["/payment/verify"],
            "health": ["/health/check"],
        }

    return app


app = create_app()
