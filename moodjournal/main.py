# moodjournal/main.py

import os
import sys
import logging
import time
from datetime import datetime, timezone
from dotenv import load_dotenv

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from moodjournal.core.exceptions import ValidationError, NotFoundError

# Load .env into os.environ
load_dotenv()

# --- Configure logging FIRST ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE  = os.getenv("LOG_FILE", "moodjournal.log")

# Configure root logger
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s [%(name)s:%(levelname)s] %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler(LOG_FILE, mode="a")
    ]
)

# Create main logger
logger = logging.getLogger("moodjournal")
logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

# Set uvicorn loggers to same level
uvicorn_error = logging.getLogger("uvicorn.error")
uvicorn_access = logging.getLogger("uvicorn.access")
uvicorn_error.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
uvicorn_access.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

logger.info(f"Logging configured at {LOG_LEVEL} level")

# --- Routers ---
from moodjournal.api.mood_entries import router as mood_entries_router
from moodjournal.api.moods        import router as moods_router

# --- Create FastAPI app ---
app = FastAPI(
    title       = "Mood Journal API",
    version     = "1.0.0",
    description = "Record one mood per day, browse the history and see your trends"
)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    logger.info(f"📥 Incoming request: {request.method} {request.url.path}")

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(f"✅ Request completed in {process_time:.3f}s with status {response.status_code}")
    return response

# --- Validation‐error handler (logs raw body + errors) ---
def jsonable_errors(exc: RequestValidationError):
    # ctx may carry the raised exception object, which JSON cannot encode
    errors = []
    for err in exc.errors():
        err = dict(err)
        if "ctx" in err:
            err["ctx"] = {k: str(v) for k, v in err["ctx"].items()}
        errors.append(err)
    return errors


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    raw_body = await request.body()
    logger.error(
        f"\n❗️ Validation error for {request.url.path}\n"
        f"Raw JSON was:\n{raw_body.decode('utf-8') if raw_body else 'No body'}\n"
        f"Errors:\n{exc.errors()!r}"
    )
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_errors(exc)},
    )

# --- Domain errors raised by the entry store ---
@app.exception_handler(ValidationError)
async def mood_validation_handler(request: Request, exc: ValidationError):
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=422, content={"detail": exc.message})


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    logger.warning(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=404, content={"detail": exc.message})

# --- CORS (allow your frontend origin here) ---
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins     = CORS_ORIGINS,
    allow_credentials = True,
    allow_methods     = ["*"],
    allow_headers     = ["*"],
)

# --- Include all routers ---
app.include_router(mood_entries_router, tags=["Mood Entries"])
app.include_router(moods_router,        tags=["Moods"])


@app.on_event("startup")
async def startup_event():
    logger.info("🚀 Starting Mood Journal API")

    env_ok = {
        "DATABASE_URL": bool(os.getenv("DATABASE_URL")),
    }
    logger.info(f"📋 Env configuration: {env_ok}")
    logger.info("🎉 Application startup complete!")

# --- Root & health endpoints ---
@app.get("/", tags=["Root"])
async def root():
    return {
        "message": "Welcome to the Mood Journal API",
        "status":  "online",
        "version": app.version,
        "docs":    "/docs"
    }

@app.get("/health", tags=["Health"])
async def health_check():
    logger.info("🏥 Health check endpoint accessed")
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
