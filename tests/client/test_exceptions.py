"""Tests for the exceptions module."""

from educms_client.exceptions import (
    DataLoadError,
    EduCMSClientError,
    NetworkError,
    NotFoundError,
    ServerError,
    TimeoutError as ClientTimeoutError,
    exception_from_response,
)


class TestExceptionHierarchy:

    def test_str_includes_status(self):
        assert str(NotFoundError("GET /x not found")) == "GET /x not found (HTTP 404)"
        assert str(NetworkError("down")) == "down"

    def test_timeout_is_network_error(self):
        assert issubclass(ClientTimeoutError, NetworkError)
        assert ClientTimeoutError().status_code is None

    def test_exception_from_response(self):
        assert isinstance(exception_from_response(404, "x"), NotFoundError)
        assert isinstance(exception_from_response(504, "x"), ServerError)
        assert isinstance(exception_from_response(599, "x"), ServerError)
        error = exception_from_response(409, "conflict")
        assert type(error) is EduCMSClientError
        assert error.status_code == 409


class TestDataLoadError:

    def test_default_message_names_status(self):
        error = DataLoadError(status_code=500)

        assert error.message == "Failed to load data from server: 500"
        assert str(error) == error.message

    def test_custom_message(self):
        error = DataLoadError("Failed to load data from server: refused")

        assert error.status_code is None
        assert str(error) == "Failed to load data from server: refused"
