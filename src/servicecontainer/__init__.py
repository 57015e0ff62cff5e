"""Build-time service container with backend-specific overrides."""

from servicecontainer.core.di.compiler.backend_pass import (
    BackendCompilerPass,
    BackendOverrideResolver,
)
from servicecontainer.core.di.container import Alias, ContainerBuilder, ServiceDefinition
from servicecontainer.core.di.services import create_container_builder

__all__ = [
    "Alias",
    "BackendCompilerPass",
    "BackendOverrideResolver",
    "ContainerBuilder",
    "ServiceDefinition",
    "create_container_builder",
]
