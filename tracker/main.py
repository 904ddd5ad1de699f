import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tracker.core import config
from tracker.core.logging_config import setup_logging

# ✅ Import All API Routes
from tracker.api.routes import auth, applications, interviews, resources, questions, health


setup_logging(config.LOG_LEVEL, config.LOG_DIR)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if config.RUN_MIGRATIONS:
        from tracker.db.migrate import run_migrations
        run_migrations()
    else:
        from tracker.db.init_db import init_db
        init_db()
    logger.info("Interview Tracker API started")
    yield


# ============================================
# ✅ FASTAPI APP INIT
# ============================================

app = FastAPI(title="Interview Tracker", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE"],
    allow_headers=["Authorization", "Content-Type"],
)


# ============================================
# ✅ VALIDATION FAILURES ARE 400s
# ============================================

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected request to {request.url.path}: {len(exc.errors())} validation error(s)")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


# ============================================
# ✅ REGISTER ALL ROUTERS
# ============================================

app.include_router(auth.router)
app.include_router(applications.router)
app.include_router(interviews.router)
app.include_router(resources.router)
app.include_router(questions.router)
app.include_router(health.router)


@app.get("/")
def root():
    return {"status": "Interview Tracker API running"}
