# Configuration package

from servicecontainer.core.config.container_config import (
    DEFAULT_BACKEND_ENV,
    ContainerConfig,
    load_container_config,
)
from servicecontainer.core.config.parameter_resolution import (
    ParameterResolution,
    ParameterSource,
)

__all__ = [
    "DEFAULT_BACKEND_ENV",
    "ContainerConfig",
    "ParameterResolution",
    "ParameterSource",
    "load_container_config",
]
