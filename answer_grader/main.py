"""
FastAPI Backend for the Answer Grader
Validates free-text answers against stored reference answers
"""
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from answer_grader.config import settings
from answer_grader.core import BaseAPIException, ErrorCode, Messages
from answer_grader.routes import answers
from answer_grader.schemas import HealthResponse
from answer_grader.services import ValidationService, get_validation_service
from answer_grader.utils import ensure_directory

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events"""
    # Startup
    logger.info("Starting Answer Grader API...")
    logger.info(f"Environment: {'development' if settings.DEBUG else 'production'}")
    
    for directory in [settings.DATA_DIR, settings.LOGS_DIR]:
        ensure_directory(directory)
    
    yield
    
    # Shutdown
    logger.info("Shutting down Answer Grader API...")


app = FastAPI(
    title="Answer Grader API",
    description="Auto-grading of free-text answers by edit-distance similarity",
    version=VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Global exception handlers
@app.exception_handler(BaseAPIException)
async def api_exception_handler(request: Request, exc: BaseAPIException):
    """Handle custom API exceptions"""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "error_code": exc.error_code
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions"""
    logger.error(f"Unexpected error: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": Messages.UNEXPECTED_ERROR,
            "error_code": ErrorCode.INTERNAL_ERROR.value
        }
    )


# Include routers
app.include_router(answers.router, prefix="/api/answers", tags=["Answer Validation"])


@app.get("/")
async def root():
    """API root endpoint"""
    return {
        "name": "Answer Grader API",
        "version": VERSION,
        "status": "running",
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.get("/health", response_model=HealthResponse)
async def health_check(service: ValidationService = Depends(get_validation_service)):
    """Health check endpoint for monitoring"""
    return HealthResponse(
        status="healthy",
        version=VERSION,
        questions_loaded=len(service.question_bank)
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "answer_grader.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="info"
    )
