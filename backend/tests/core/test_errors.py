"""Error hierarchy — status codes and response bodies per error type."""

from product_api.core.errors import (
    CorsRejectedError,
    DatabaseError,
    ErrorCategory,
    ProductApiError,
    ProductNotFoundError,
    RequestValidationFailed,
)


def test_validation_failure_renders_errors_array():
    errors = [{"type": "field", "msg": "invalid ID", "path": "id", "location": "params"}]
    exc = RequestValidationFailed(errors)
    assert exc.http_status == 400
    assert exc.category is ErrorCategory.VALIDATION
    assert exc.to_response() == {"errors": errors}


def test_not_found_renders_message_only():
    exc = ProductNotFoundError(2000)
    assert exc.http_status == 404
    assert exc.to_response() == {"message": "product not found"}
    assert exc.context.product_id == 2000


def test_not_found_accepts_localized_message():
    exc = ProductNotFoundError(1, "producto no encontrado")
    assert exc.to_response() == {"message": "producto no encontrado"}


def test_cors_rejection_is_forbidden():
    exc = CorsRejectedError("http://evil.example")
    assert exc.http_status == 403
    assert exc.to_response() == {"message": "CORS error"}


def test_database_error_hides_driver_detail():
    exc = DatabaseError("password authentication failed", "connect")
    assert exc.http_status == 503
    body = exc.to_response()
    assert body == {"message": "database unavailable", "code": "DATABASE_ERROR"}
    assert "password" in exc.detail


def test_all_errors_share_the_base_class():
    for exc in (
        RequestValidationFailed([]), ProductNotFoundError(1),
        CorsRejectedError("x"), DatabaseError("m", "op"),
    ):
        assert isinstance(exc, ProductApiError)
