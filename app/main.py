import uuid

import uvicorn
from aws_lambda_powertools import Logger, Metrics
from aws_lambda_powertools.metrics import MetricUnit
from botocore.exceptions import BotoCoreError, ClientError
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from mangum import Mangum

from app.api.api import router as api_router
from app.middlewares import CorrelationIdMiddleware
from app.models.response import ErrorResponse, ValidationErrorResponse
from app.repositories.post_repository import PostRepository
from app.settings import Settings

settings = Settings()
logger = Logger(service=settings.app_name, utc=True)
metrics = Metrics(namespace="blog", service=settings.app_name)

app = FastAPI(debug=settings.debug, title="BlogApp", version="1.0.0")
app.add_middleware(CorrelationIdMiddleware)
app.include_router(api_router)

handler = metrics.log_metrics(
    logger.inject_lambda_context(Mangum(app), clear_state=True),
    capture_cold_start_metric=True,
)


def _error_response(error: ErrorResponse) -> JSONResponse:
    return JSONResponse(content=jsonable_encoder(error), status_code=error.status)


def _missing_fields_message(errors: list[dict]) -> str:
    missing = [
        ".".join(str(loc) for loc in err["loc"][1:]) or str(err["loc"][0])
        for err in errors
        if err["type"] == "missing"
    ]
    if not missing:
        return "Invalid request"
    return f"Missing {', '.join(f'`{field}`' for field in missing)} in request body"


@app.exception_handler(BotoCoreError)
@app.exception_handler(ClientError)
async def botocore_error_handler(
    request: Request, error: BotoCoreError | ClientError
) -> JSONResponse:
    error_id = uuid.uuid4()
    logger.exception(f"Received botocore error {error_id=}")
    metrics.add_metric(name="BotocoreErrorHandler", unit=MetricUnit.Count, value=1)
    return _error_response(
        ErrorResponse(
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            id=error_id,
            message=str(error) if settings.debug else "Internal Server Error",
        )
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(
    request: Request, error: HTTPException
) -> JSONResponse:
    error_id = uuid.uuid4()
    logger.warning(
        f"Received http exception {error_id=}",
        status_code=error.status_code,
        path=request.url.path,
    )
    metrics.add_metric(name="HttpExceptionHandler", unit=MetricUnit.Count, value=1)
    return _error_response(
        ErrorResponse(status=error.status_code, id=error_id, message=error.detail)
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, error: RequestValidationError
) -> JSONResponse:
    error_id = uuid.uuid4()
    logger.warning(
        f"Received request validation error {error_id=}", path=request.url.path
    )
    metrics.add_metric(
        name="RequestValidationErrorHandler", unit=MetricUnit.Count, value=1
    )
    return _error_response(
        ValidationErrorResponse(
            status=status.HTTP_400_BAD_REQUEST,
            id=error_id,
            message=_missing_fields_message(error.errors()),
            errors=jsonable_encoder(error.errors()),
        )
    )


if __name__ == "__main__":
    PostRepository().create_table()
    uvicorn.run("app.main:app", host="localhost", port=8080, reload=True)
