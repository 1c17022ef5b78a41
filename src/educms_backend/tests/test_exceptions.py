import pytest

from educms_backend.exceptions import (
    BadRequestException,
    EmptyBodyException,
    ConfigurationException,
    EndpointNotFoundException,
    PayloadTooLargeException,
    StorageOperationException,
    get_all_error_codes,
    get_error_definition,
    load_error_registry,
    not_found_message,
)


@pytest.mark.unit
class TestErrorRegistry:
    """Test the YAML error registry."""

    def test_registry_codes(self):
        assert get_all_error_codes() == ["CFG_001", "DB_001", "INT_001", "NF_001", "VAL_001", "VAL_002", "VAL_003"]

    def test_status_codes_match_exceptions(self):
        assert get_error_definition("VAL_002").http_status == EmptyBodyException().status_code
        assert get_error_definition("NF_001").http_status == EndpointNotFoundException().status_code
        assert get_error_definition("DB_001").http_status == StorageOperationException().status_code

    def test_unknown_code_falls_back(self):
        definition = get_error_definition("NOPE_999")

        assert definition.code == "UNKNOWN"
        assert definition.http_status == 500

    def test_duplicate_codes_are_rejected(self, tmp_path):
        entry = (
            "  - code: X_001\n"
            "    http_status: 400\n"
            "    category: validation\n"
            "    severity: warning\n"
            "    title: X\n"
            "    message: X\n"
        )
        path = tmp_path / "registry.yaml"
        path.write_text("errors:\n" + entry + entry)

        with pytest.raises(ValueError, match="Duplicate error code"):
            load_error_registry(path)

    def test_missing_errors_key(self, tmp_path):
        path = tmp_path / "registry.yaml"
        path.write_text("version: 1\n")

        with pytest.raises(ValueError):
            load_error_registry(path)


@pytest.mark.unit
class TestExceptions:

    def test_detail_overrides_registry_message(self):
        exc = StorageOperationException(detail="duplicate key value violates unique constraint")

        assert exc.message == "duplicate key value violates unique constraint"
        assert exc.to_error_response().to_envelope() == {
            "success": False,
            "message": "duplicate key value violates unique constraint",
        }

    def test_registry_message_without_detail(self):
        assert BadRequestException().message == "Request could not be processed"

    def test_error_response_carries_context(self):
        exc = StorageOperationException(detail="boom", context={"table": "categories"})
        response = exc.to_error_response()

        assert response.error_code == "DB_001"
        assert response.status_code == 500
        assert response.category == "database"
        assert response.details == {"table": "categories"}

    @pytest.mark.parametrize("method,path,expected", [
        ("GET", "/api/unknown-route", "GET /unknown-route not found"),
        ("DELETE", "/api/kelas", "DELETE /kelas not found"),
        ("GET", "/favicon.ico", "GET /favicon.ico not found"),
        ("GET", "/apiary", "GET /apiary not found"),
    ])
    def test_not_found_message(self, method, path, expected):
        assert not_found_message(method, path) == expected

    def test_registry_message_reaches_envelope(self):
        exc = ConfigurationException()

        assert exc.detail == "SUPABASE_URL or SUPABASE_KEY is not configured"
        assert exc.to_error_response().to_envelope() == {
            "success": False,
            "message": "SUPABASE_URL or SUPABASE_KEY is not configured",
        }

    def test_empty_detail_uses_registry_message(self):
        assert StorageOperationException(detail="").message == "Storage backend operation failed"

    def test_payload_too_large(self):
        exc = PayloadTooLargeException()

        assert exc.status_code == 413
        assert exc.message == "Request body exceeds the upload size limit"
