"""Tests for the container exception hierarchy."""

from servicecontainer.core.common.exceptions import (
    CircularReferenceError,
    ConfigurationError,
    ContainerError,
    FrozenContainerError,
    InvalidServiceIdentifierError,
    ParameterNotFoundError,
    ServiceNotFoundError,
)


def test_all_errors_share_base() -> None:
    for error_type in (
        CircularReferenceError,
        ConfigurationError,
        FrozenContainerError,
        InvalidServiceIdentifierError,
        ParameterNotFoundError,
        ServiceNotFoundError,
    ):
        assert issubclass(error_type, ContainerError)
        assert error_type().message


def test_to_dict_includes_extra_attributes() -> None:
    error = ServiceNotFoundError(
        "No definition registered for 'cache'",
        service_id="cache",
        details={"hint": "register it"},
    )

    assert error.to_dict() == {
        "error": {
            "message": "No definition registered for 'cache'",
            "type": "ServiceNotFoundError",
            "details": {"hint": "register it"},
            "service_id": "cache",
        }
    }


def test_circular_reference_path_is_copied() -> None:
    path = ["a", "b", "a"]

    error = CircularReferenceError(path=path)
    path.clear()

    assert error.path == ["a", "b", "a"]
    assert str(error) == "Circular alias reference detected"
