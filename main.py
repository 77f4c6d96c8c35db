import logging
import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError

# Routers
from routers.admin import router as admin_router
from routers.health import router as health_router
from routers.questions import router as questions_router

logger = logging.getLogger("exam-practice")
logging.basicConfig(level=logging.INFO)

DEFAULT_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"

app = FastAPI(title="Exam Practice – Questions API")

# Allow calls from the Next.js dev server and production site
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in os.getenv("CORS_ORIGINS", DEFAULT_ORIGINS).split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*", "x-admin-token"],
)


@app.exception_handler(OperationalError)
async def storage_unavailable(request: Request, exc: OperationalError):
    # surfaced, not masked: no retry, no cached fallback
    logger.error("storage unavailable on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": "storage unavailable"})


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(questions_router)  # /questions/random, /questions/types
app.include_router(admin_router)  # /admin/questions...
app.include_router(health_router)  # /health/...
