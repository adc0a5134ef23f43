import pytest

from api_status import ErrorCode, HttpError, StatusError, Status, http_error
from api_status.utils.exceptions import UnknownErrorCodeError, http_400_error, http_404_error


def test_http_error_carries_code_and_message():
    err = HttpError(403, "no access")
    assert err.code == 403
    assert err.message == "no access"
    assert str(err) == "no access"
    assert isinstance(err, StatusError)


def test_http_error_from_error_code_uses_default_message():
    err = HttpError.from_error_code(ErrorCode.PAYMENT_REQUIRED)
    assert err.code == 402
    assert err.message == "Payment required."


def test_http_error_from_error_code_with_custom_message():
    err = HttpError.from_error_code(422, "email: field required")
    assert err.code == 422
    assert err.message == "email: field required"


def test_http_error_from_unknown_code():
    with pytest.raises(UnknownErrorCodeError):
        HttpError.from_error_code(418)


def test_http_error_helper_raises():
    with pytest.raises(HttpError) as exc_info:
        http_error(ErrorCode.SERVICE_UNAVAILABLE)
    assert exc_info.value.code == 503
    assert exc_info.value.message == "Service unavailable."


def test_shortcut_helpers():
    with pytest.raises(HttpError) as exc_info:
        http_404_error()
    assert exc_info.value.code == 404

    with pytest.raises(HttpError) as exc_info:
        http_400_error("bad id")
    assert (exc_info.value.code, exc_info.value.message) == (400, "bad id")


def test_caller_routes_errors_into_status():
    def handler(fail_with):
        status = Status()
        try:
            if fail_with is not None:
                raise fail_with
            status.mark_success(message="ok", payload={"done": True})
        except HttpError as e:
            status.adopt_custom_error(e)
        except Exception as e:
            status.adopt_generic_failure(e)
        return status

    assert handler(None).code == 201
    assert handler(HttpError(401, "login")).code == 401
    assert handler(ZeroDivisionError("division by zero")).code == 500
