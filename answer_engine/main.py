"""FastAPI application entry point for the Answer Engine API."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from answer_engine.api.routes.aeo_content import router as aeo_content_router
from answer_engine.api.routes.campaigns import router as campaigns_router
from answer_engine.api.routes.public import router as public_router
from answer_engine.api.routes.websites import router as websites_router
from answer_engine.config import settings
from answer_engine.core.errors import AppError
from answer_engine.database import init_db

logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup."""
    init_db()
    logger.info("Database initialized")
    yield


app = FastAPI(
    title="Answer Engine API",
    description="Website chatbot widget API and AEO content moderation",
    version="1.0.0",
    lifespan=lifespan,
)

# The widget is embedded on customer sites, so origins are open by default
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


# Public widget routes
app.include_router(public_router)

# Dashboard routes
app.include_router(websites_router)
app.include_router(campaigns_router)
app.include_router(aeo_content_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Render service errors as ``{"message": ...}`` with their status code."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={
            "message": "Validation error",
            "errors": [
                {"loc": list(error.get("loc", ())), "msg": error.get("msg")}
                for error in exc.errors()
            ],
        },
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """Hide internal error details from clients."""
    logger.exception("Unhandled exception: %s", exc)
    return JSONResponse(
        status_code=500,
        content={"message": "Internal server error"},
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("answer_engine.main:app", host="0.0.0.0", port=8000)
