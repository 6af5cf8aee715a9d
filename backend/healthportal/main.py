import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from healthportal.api.routes.appointment_routes import router as appointment_routes
from healthportal.api.routes.assistant_routes import router as assistant_routes
from healthportal.api.routes.auth_routes import router as auth_routes
from healthportal.api.routes.doctor_routes import router as doctor_routes
from healthportal.api.routes.document_routes import router as document_routes
from healthportal.api.routes.message_routes import router as message_routes
from healthportal.api.routes.patient_routes import router as patient_routes
from healthportal.core.config import Settings, settings as default_settings
from healthportal.services.assistant import ConversationRegistry
from healthportal.services.seed import seed_sample_data
from healthportal.services.storage import MemStorage

logger = logging.getLogger(__name__)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        {"detail": "Validation error", "errors": jsonable_encoder(exc.errors())},
        status_code=400,
    )


async def server_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse({"detail": "Server error"}, status_code=500)


def create_app(settings: Optional[Settings] = None, store: Optional[MemStorage] = None) -> FastAPI:
    """
    Build the API around one store. Tests pass their own settings and store;
    otherwise a fresh store is created and, if configured, seeded.
    """
    settings = settings or default_settings
    logging.basicConfig(level=settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_TITLE,
        description="Patient and doctor portal: doctors, appointments, records and a scripted assistant",
        version="1.0.0",
    )

    # Enable CORS so the frontend dev server can talk to the backend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if store is None:
        store = MemStorage(password_hash_method=settings.PASSWORD_HASH_METHOD)
        if settings.SEED_SAMPLE_DATA:
            seed_sample_data(store)

    app.state.settings = settings
    app.state.store = store
    app.state.conversations = ConversationRegistry(store, typing_delay_ms=settings.TYPING_DELAY_MS)

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, server_error_handler)

    app.include_router(auth_routes)
    app.include_router(doctor_routes)
    app.include_router(patient_routes)
    app.include_router(appointment_routes)
    app.include_router(message_routes)
    app.include_router(assistant_routes)
    app.include_router(document_routes)

    @app.on_event("startup")
    def startup_event():
        logger.info("%s ready with %d users", settings.APP_TITLE, len(store.users))

    return app


app = create_app()
