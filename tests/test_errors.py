import pytest
from pydantic import ValidationError as PydanticValidationError

from idleview.errors import (
    AuthenticationError,
    ClientError,
    IdleviewError,
    NetworkError,
    PersistenceError,
    ProviderError,
    RateLimitError,
    ServerError,
    StorageError,
    ValidationError,
)
from idleview.settings.document import PhotosSettings


def test_provider_error_message() -> None:
    err = ProviderError(code=404, message="Not Found")
    assert str(err) == "[404] Not Found"
    assert err.message == "[404] Not Found"
    assert err.detail == "Not Found"


@pytest.mark.parametrize(
    "code, expected_type",
    [
        (401, AuthenticationError),
        (403, AuthenticationError),
        (404, ClientError),
        (429, RateLimitError),
        (400, ClientError),
        (500, ServerError),
        (503, ServerError),
        (302, ProviderError),
    ],
)
def test_from_status_creates_expected_error(code: int, expected_type: type[ProviderError]) -> None:
    err = ProviderError.from_status(code, "test error")
    assert type(err) is expected_type
    assert err.code == code
    assert "test error" in str(err)


def test_network_error_has_no_status() -> None:
    cause = ConnectionError("boom")
    err = NetworkError("Failed to fetch weather", cause)
    assert err.code == 0
    assert err.original_error is cause


def test_persistence_error_is_a_storage_error() -> None:
    err = PersistenceError("disk full")
    assert isinstance(err, StorageError)
    assert isinstance(err, IdleviewError)
    assert err.message == "disk full"


def test_validation_error_from_pydantic() -> None:
    with pytest.raises(PydanticValidationError) as info:
        PhotosSettings.model_validate({"refresh_interval": 0})

    err = ValidationError.from_pydantic(info.value, "Bad settings")
    assert err.message.startswith("Bad settings: refresh_interval: ")
    assert len(err.errors) == 1
