from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from datetime import datetime, timezone
import logging

from string_analyzer import config
from string_analyzer.exceptions import (
    DuplicateStringError,
    InvalidFilterSpecError,
    InvalidInputError,
    StringNotFoundError,
    TranslationError,
)
from string_analyzer.routes import router
from string_analyzer.store import RecordStore

# Configure logging
logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=config.APP_TITLE,
    description="Analyze, store and query string properties",
    version=config.APP_VERSION
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# The application owns the one record store every request shares
app.state.store = RecordStore()

app.include_router(router, tags=["strings"])


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": config.APP_TITLE,
        "version": config.APP_VERSION,
        "endpoints": {
            "POST /strings": "Analyze and store a string",
            "GET /strings/{string_value}": "Get specific string analysis",
            "GET /strings": "Get all strings with optional filters",
            "GET /strings/filter-by-natural-language": "Filter using natural language",
            "DELETE /strings/{string_value}": "Delete a string",
            "GET /health": "Health check"
        }
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


def error_response(status_code: int, message: str, details=None) -> JSONResponse:
    content = {"error": message}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


# Validation error handler
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = {}
    wrong_type = False
    for error in exc.errors():
        field = error['loc'][-1]
        errors[field] = error['msg']
        # A body value that is present but not a string
        if error['type'] == 'string_type' and error['loc'][0] == 'body':
            wrong_type = True

    logger.warning(f"Rejected request to {request.url.path}: {errors}")
    if wrong_type:
        return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, "Value must be a string", errors)
    return error_response(status.HTTP_400_BAD_REQUEST, "Validation failed", errors)


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    return error_response(status.HTTP_400_BAD_REQUEST, exc.message)


@app.exception_handler(DuplicateStringError)
async def duplicate_handler(request: Request, exc: DuplicateStringError):
    logger.warning(f"Duplicate string {exc.identity[:12]}")
    return error_response(status.HTTP_409_CONFLICT, exc.message)


@app.exception_handler(StringNotFoundError)
async def not_found_handler(request: Request, exc: StringNotFoundError):
    return error_response(status.HTTP_404_NOT_FOUND, exc.message)


@app.exception_handler(InvalidFilterSpecError)
async def invalid_filter_handler(request: Request, exc: InvalidFilterSpecError):
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid query parameter values or types", exc.message)


@app.exception_handler(TranslationError)
async def translation_handler(request: Request, exc: TranslationError):
    return error_response(status.HTTP_400_BAD_REQUEST, exc.message)


# HTTPException handler
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # If detail is already a dict with 'error' key, return as is
    if isinstance(exc.detail, dict) and 'error' in exc.detail:
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.detail
        )
    # Otherwise wrap it
    return error_response(exc.status_code, str(exc.detail))


# Generic error handler
@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {str(exc)}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def run():
    import uvicorn
    uvicorn.run("string_analyzer.main:app", host=config.HOST, port=config.PORT, reload=config.RELOAD)


if __name__ == "__main__":
    run()
