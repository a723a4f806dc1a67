"""
FastAPI application - Main entry point

Run with:
  uvicorn bookowners.api.main:app --host 127.0.0.1 --port 8000
"""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from bookowners.api.dependencies import app_config
from bookowners.api.endpoints.owners import router as owners_router
from bookowners.error_handler import ErrorHandler

# Setup logging
logging.basicConfig(level=getattr(logging, app_config.logging.level.upper(), logging.INFO))
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=app_config.api.title,
    description=app_config.api.description,
    version=app_config.api.version,
)

error_handler = ErrorHandler()


# ============================================================================
# ERROR HANDLING
# ============================================================================

@app.middleware("http")
async def problem_details_middleware(request: Request, call_next):
    """Turn any unhandled error into a generic 500 problem response."""
    try:
        return await call_next(request)
    except Exception as exc:
        problem = error_handler.handle_exception(exc, context={"method": request.method, "path": request.url.path})
        return JSONResponse(status_code=problem["status"], content=problem)


# ============================================================================
# ROUTES
# ============================================================================

app.include_router(owners_router, prefix="/api/owners", tags=["Owners"])


@app.get("/health", tags=["Health"])
async def health():
    return {"status": "ok"}


# ============================================================================
# STARTUP/SHUTDOWN EVENTS
# ============================================================================
@app.on_event("startup")
async def startup_event():
    """Log the integration wiring on startup"""
    logger.info("Starting Book Owners API...")
    if app_config.use_real_integrations():
        logger.info("Integrations mode: real (book owners API at %s)", app_config.external_api.base_url or "<not set>")
    else:
        logger.info("Integrations mode: mock (data from %s)", app_config.integrations.mock_data_path)


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("Shutting down Book Owners API...")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
