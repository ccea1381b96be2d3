"""Tests for the error types."""

import pytest

from animal_spotter.core.errors import (
    DecodingError,
    EncodingError,
    ErrorKind,
    FetchError,
    MissingDataError,
    NetworkError,
    SpotterError,
    StatusCodeError,
    create_user_friendly_message,
)


class TestFetchError:
    """Test cases for FetchError."""

    @pytest.mark.parametrize("kind", list(ErrorKind))
    def test_every_kind_has_default_message(self, kind) -> None:
        error = FetchError(kind)

        assert error.kind is kind
        assert error.code == kind.value
        assert error.message

    def test_to_dict(self) -> None:
        error = FetchError(ErrorKind.BAD_AUTH, status=401)

        assert error.to_dict() == {
            "message": "Server rejected the bearer token",
            "status": 401,
            "code": "badAuth",
            "details": {},
            "type": "FetchError",
            "kind": "BAD_AUTH",
        }

    def test_str_includes_code_and_status(self) -> None:
        assert str(FetchError(ErrorKind.BAD_AUTH, status=401)) == "Server rejected the bearer token [badAuth, HTTP 401]"

    def test_str_without_status(self) -> None:
        assert str(FetchError(ErrorKind.NO_AUTH)) == "No bearer token available; sign in first [noAuth]"

    def test_is_a_spotter_error(self) -> None:
        assert isinstance(FetchError(ErrorKind.NO_AUTH), SpotterError)


class TestGenericErrors:
    """Test cases for the sign-up/sign-in errors."""

    def test_status_code_error(self) -> None:
        error = StatusCodeError(500)

        assert error.status == 500
        assert error.code == "HTTP_STATUS"
        assert "500" in error.message

    @pytest.mark.parametrize(
        "error_type, code",
        [
            (EncodingError, "ENCODING_ERROR"),
            (DecodingError, "DECODING_ERROR"),
            (MissingDataError, "DATA_NOT_FOUND"),
            (NetworkError, "NETWORK_ERROR"),
        ],
    )
    def test_codes(self, error_type, code) -> None:
        error = error_type()

        assert error.code == code
        assert isinstance(error, SpotterError)

    def test_keeps_original_error(self) -> None:
        cause = ValueError("bad")
        error = DecodingError(original_error=cause)

        assert error.original_error is cause


class TestUserFriendlyMessages:
    """Test cases for create_user_friendly_message."""

    def test_no_auth(self) -> None:
        message = create_user_friendly_message(FetchError(ErrorKind.NO_AUTH))
        assert "not signed in" in message

    def test_bad_url_mentions_url(self) -> None:
        error = FetchError(ErrorKind.BAD_URL, details={"url": "nope"})
        assert create_user_friendly_message(error) == "The image URL is not valid: nope"

    def test_bad_url_without_url(self) -> None:
        assert create_user_friendly_message(FetchError(ErrorKind.BAD_URL)) == "The image URL is not valid."

    def test_rejected_sign_in(self) -> None:
        message = create_user_friendly_message(StatusCodeError(401))
        assert "username and password" in message

    def test_other_status(self) -> None:
        assert "HTTP 409" in create_user_friendly_message(StatusCodeError(409))

    def test_network(self) -> None:
        assert "internet connection" in create_user_friendly_message(NetworkError())

    def test_fallback(self) -> None:
        assert create_user_friendly_message(EncodingError()) == "An error occurred: Error encoding user object"
