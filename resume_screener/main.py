from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from resume_screener.core.config import settings
from resume_screener.core.errors import AnalysisPayloadError, RankingError
from resume_screener.core.logger import app_logger
from resume_screener.api.routes import router as api_router
from resume_screener.modules.annotations import CandidateAnnotations
from resume_screener.modules.history import AnalysisHistory

@asynccontextmanager
async def lifespan(app: FastAPI):
    app_logger.info("Service is starting up...")
    yield
    app_logger.info("Service is shutting down...")

app = FastAPI(
    title=settings.PROJECT_NAME,
    lifespan=lifespan
)

# Per-application side tables, handed to routes through dependencies
app.state.annotations = CandidateAnnotations()
app.state.history = AnalysisHistory(limit=settings.HISTORY_LIMIT)

@app.exception_handler(AnalysisPayloadError)
async def analysis_payload_error_handler(request: Request, exc: AnalysisPayloadError):
    app_logger.error(f"{request.url.path}: {exc}")
    return JSONResponse(status_code=422, content={"detail": "Failed to parse analysis results"})

@app.exception_handler(RankingError)
async def ranking_error_handler(request: Request, exc: RankingError):
    app_logger.error(f"{request.url.path}: {type(exc).__name__}: {exc}")
    return JSONResponse(status_code=400, content={"detail": "Unable to display results"})

app.include_router(api_router, prefix=settings.API_V1_STR)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("resume_screener.main:app", host="0.0.0.0", port=8000, reload=True)
