import pytest
from botocore.exceptions import ClientError, EndpointConnectionError
from fastapi import status

from app.exceptions import StoreUnavailableException
from app.repositories.decorators import ERROR_STORE_UNAVAILABLE, handle_store_errors


def _client_error(code: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, "Scan")


class TestHandleStoreErrors:
    def test_successfully_return_result(self):
        @handle_store_errors
        def list_posts():
            return ["post"]

        assert list_posts() == ["post"]

    def test_fail_due_to_connection_error(self):
        @handle_store_errors
        def list_posts():
            raise EndpointConnectionError(endpoint_url="http://localhost:8000")

        with pytest.raises(StoreUnavailableException) as excinfo:
            list_posts()

        assert status.HTTP_503_SERVICE_UNAVAILABLE == excinfo.value.status_code
        assert ERROR_STORE_UNAVAILABLE == excinfo.value.detail

    @pytest.mark.parametrize(
        "code", ["ResourceNotFoundException", "ThrottlingException"]
    )
    def test_fail_due_to_unavailable_store(self, code: str):
        @handle_store_errors
        def list_posts():
            raise _client_error(code)

        with pytest.raises(StoreUnavailableException):
            list_posts()

    def test_fail_with_unmapped_client_error(self):
        @handle_store_errors
        def list_posts():
            raise _client_error("ValidationException")

        with pytest.raises(ClientError) as excinfo:
            list_posts()

        assert excinfo.value.response["Error"]["Code"] == "ValidationException"
