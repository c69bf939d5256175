import functools

from aws_lambda_powertools import Logger
from botocore.exceptions import BotoCoreError, ClientError

from app.exceptions import StoreUnavailableException

logger = Logger(utc=True)

ERROR_STORE_UNAVAILABLE = "The post store is currently unavailable"
UNAVAILABLE_ERROR_CODES = {
    "InternalServerError",
    "ProvisionedThroughputExceededException",
    "RequestLimitExceeded",
    "ResourceNotFoundException",
    "ServiceUnavailable",
    "ThrottlingException",
}


def handle_store_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except BotoCoreError as exc:
            logger.exception(f"Post store connection failed in {func.__name__}")
            raise StoreUnavailableException(ERROR_STORE_UNAVAILABLE) from exc
        except ClientError as exc:
            error_code = exc.response["Error"]["Code"]
            if error_code not in UNAVAILABLE_ERROR_CODES:
                raise
            logger.exception(f"Post store rejected {func.__name__}: {error_code=}")
            raise StoreUnavailableException(ERROR_STORE_UNAVAILABLE) from exc

    return wrapper
