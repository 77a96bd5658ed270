import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from heartcheck.api.routes import assessments, auth, health_records
from heartcheck.core.config import settings
from heartcheck.core.errors import InvalidInputError, PersistenceError
from heartcheck.core.firebase import init_firebase

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="HeartCheck Backend")


@app.on_event("startup")
def startup():
    """Initialize Firebase Admin (reads credentials path from env)."""
    try:
        init_firebase()
    except RuntimeError as exc:
        # Scoring still works; history routes answer 503.
        logger.warning("Firebase not initialized, records will not be saved: %s", exc)


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    return JSONResponse(status_code=422, content={"field": exc.field, "detail": exc.message})


@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError):
    return JSONResponse(status_code=503, content={"operation": exc.operation, "detail": str(exc)})


@app.get("/")
async def root():
    return {"message": "HeartCheck Backend is running"}


@app.get("/health")
async def health_check():
    return {"status": "ok"}


# Include API routers
app.include_router(auth.router)
app.include_router(assessments.router)
app.include_router(health_records.router)
