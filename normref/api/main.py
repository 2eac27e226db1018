from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from normref.api.routes import router
from normref.core.config import Settings, get_settings
from normref.core.exceptions import NormRefError, PayloadTooLargeError


async def normref_error_handler(request: Request, exc: NormRefError) -> JSONResponse:
    body = {"error": str(exc)}
    if isinstance(exc, PayloadTooLargeError):
        body.update(max_chars=exc.max_chars, received_chars=exc.received_chars)
    return JSONResponse(status_code=exc.status_code, content=body)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    if settings is None:
        settings = get_settings()
    application = FastAPI(title="Norm Ref Extractor")
    application.include_router(router)
    application.add_exception_handler(NormRefError, normref_error_handler)
    if settings.origins:
        application.add_middleware(
            CORSMiddleware,
            allow_origins=settings.origins,
            allow_methods=["POST", "OPTIONS"],
            allow_headers=["authorization", "content-type", "x-internal-key"],
        )
    return application


app = create_app()
