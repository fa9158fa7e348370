# gainz/main.py
import logging
import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from gainz.db import SessionLocal, engine, init_db
from gainz.errors import PersistenceError
from gainz.fixtures import seed_preview, store_is_empty
from gainz.routers.sessions import router as sessions_router
from gainz.routers.workouts import router as workouts_router
from gainz.routers.sets import router as sets_router
from gainz.settings import get_settings

log = logging.getLogger("uvicorn")
settings = get_settings()
logging.getLogger("gainz").setLevel(settings.LOG_LEVEL.upper())


@asynccontextmanager
async def lifespan(_app: FastAPI):
    # StoreInitError propagates: without a store there is nothing to serve
    init_db(engine)
    if settings.SEED_PREVIEW_DATA:
        with SessionLocal() as db:
            if store_is_empty(db):
                seed_preview(db)
    yield


app = FastAPI(
    title="Gainz API",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "sessions", "description": "Workout sessions and history"},
        {"name": "workouts", "description": "Ordered exercises within a session"},
        {"name": "sets", "description": "Weighted sets per exercise"},
    ],
)


ALLOW_ORIGINS = settings.ALLOW_ORIGINS.split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def add_request_id_and_log(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-ID"] = req_id
    log.info("rid=%s %s %s -> %s in %.1fms",
             req_id, request.method, request.url.path, response.status_code, duration_ms)
    return response

@app.exception_handler(PersistenceError)
async def persistence_failed(request: Request, exc: PersistenceError):
    log.error("persistence failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": str(exc)})

@app.get("/")
def root():
    return {"ok": True, "name": "Gainz API"}

@app.get("/ping")
def ping():
    return {"pong": True}

@app.get("/healthz")
def healthz():
    # Quick DB sanity check
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"status": "ok"}
    except Exception as e:
        return {"status": "degraded", "error": str(e)}

@app.get("/version")
def version():
    return {"version": settings.API_VERSION}

# Routers
app.include_router(sessions_router)
app.include_router(workouts_router)
app.include_router(sets_router)
