import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.database import engine, Base
from app.errors import (
    ListingsError, FilterValidationError, NotFoundError, DuplicateNameError,
    ReferenceNotFoundError, ReferenceInUseError, PermissionDeniedError, StoreFailureError,
)
from app.routers import apartments_router, developers_router, compounds_router, amenities_router

settings = get_settings()

log_level = logging.DEBUG if settings.debug else logging.INFO
logging.basicConfig(
    level=log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

Base.metadata.create_all(bind=engine)

app = FastAPI(
    title=settings.app_name,
    description="Apartment listings with search, favorites and developer/compound catalogs",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(apartments_router, prefix="/api")
app.include_router(developers_router, prefix="/api")
app.include_router(compounds_router, prefix="/api")
app.include_router(amenities_router, prefix="/api")

ERROR_STATUS_CODES = {
    FilterValidationError: 400,
    NotFoundError: 404,
    DuplicateNameError: 409,
    ReferenceNotFoundError: 400,
    ReferenceInUseError: 409,
    PermissionDeniedError: 403,
    StoreFailureError: 500,
}


@app.exception_handler(ListingsError)
async def listings_error_handler(request: Request, exc: ListingsError):
    status_code = ERROR_STATUS_CODES.get(type(exc), 400)
    if isinstance(exc, StoreFailureError):
        logger.error(f"{request.method} {request.url.path} failed: {exc.message} ({exc.cause})")
        return JSONResponse(status_code=status_code, content={"detail": "Internal server error"})
    return JSONResponse(status_code=status_code, content=exc.to_dict())


@app.get("/health")
async def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
