"""
Common exception classes for the service container.

This module defines custom exception classes raised by the registry and the
configuration layer. Compiler passes do not define errors of their own; they
let these propagate unchanged.
"""

from __future__ import annotations


class ContainerError(Exception):
    """Base exception class for all service container errors."""

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        **kwargs,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        for key, value in (kwargs or {}).items():
            setattr(self, key, value)

    def to_dict(self) -> dict:
        error_dict = {
            "message": self.message,
            "type": self.__class__.__name__,
            "details": self.details,
        }

        # Include any additional attributes that were set via kwargs
        for attr_name in dir(self):
            if (
                not attr_name.startswith("_")
                and attr_name not in ["message", "details", "args"]
                and not callable(getattr(self, attr_name))
            ):
                error_dict[attr_name] = getattr(self, attr_name)

        return {"error": error_dict}


class ServiceNotFoundError(ContainerError):
    """Raised when a service id has no definition or alias."""

    def __init__(
        self,
        message: str = "Service not found",
        service_id: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, service_id=service_id, **kwargs)


class ParameterNotFoundError(ContainerError):
    """Raised when a parameter has not been set on the registry."""

    def __init__(
        self,
        message: str = "Parameter not found",
        parameter_name: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, parameter_name=parameter_name, **kwargs)


class InvalidServiceIdentifierError(ContainerError):
    """Raised when a service id is not a usable identifier."""

    def __init__(
        self,
        message: str = "Invalid service identifier",
        service_id: object = None,
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, service_id=service_id, **kwargs)


class CircularReferenceError(ContainerError):
    """Raised when aliases form a cycle."""

    def __init__(
        self,
        message: str = "Circular alias reference detected",
        path: list[str] | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, path=list(path or []), **kwargs)


class FrozenContainerError(ContainerError):
    """Raised when a compiled container builder is modified."""

    def __init__(
        self,
        message: str = "Container builder is frozen",
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, **kwargs)


class ConfigurationError(ContainerError):
    """Raised when there's a configuration issue."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, **kwargs)
