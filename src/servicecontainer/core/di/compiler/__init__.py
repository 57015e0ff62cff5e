"""Compiler passes run by ``ContainerBuilder.compile``."""

from servicecontainer.core.di.compiler.backend_pass import (
    BACKEND_OVERRIDABLE_TAG,
    DEFAULT_BACKEND_PARAMETER,
    BackendCompilerPass,
    BackendOverrideResolver,
)

__all__ = [
    "BACKEND_OVERRIDABLE_TAG",
    "DEFAULT_BACKEND_PARAMETER",
    "BackendCompilerPass",
    "BackendOverrideResolver",
]
