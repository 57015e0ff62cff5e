from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from dotenv import load_dotenv
from pydantic import ConfigDict, Field, ValidationError, model_validator

from servicecontainer.core.common.exceptions import ConfigurationError
from servicecontainer.core.config.parameter_resolution import (
    ParameterResolution,
    ParameterSource,
)
from servicecontainer.core.di.compiler.backend_pass import DEFAULT_BACKEND_PARAMETER
from servicecontainer.core.interfaces.model_bases import DomainModel

if TYPE_CHECKING:
    from servicecontainer.core.di.container import ContainerBuilder

logger = logging.getLogger(__name__)
resolution_logger = logging.getLogger("servicecontainer.config.resolution")

DEFAULT_BACKEND_ENV = "DEFAULT_BACKEND"


class ContainerConfig(DomainModel):
    """Parameters applied to a container builder before compilation."""

    model_config = ConfigDict(extra="forbid")

    default_backend: str | None = None
    parameters: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _lift_default_backend(cls, data: Any) -> Any:
        # services.yml style files declare default_backend among the parameters
        if not isinstance(data, dict):
            return data
        parameters = data.get("parameters")
        if isinstance(parameters, dict) and DEFAULT_BACKEND_PARAMETER in parameters:
            parameters = dict(parameters)
            backend = parameters.pop(DEFAULT_BACKEND_PARAMETER)
            data = {**data, "parameters": parameters}
            if data.get("default_backend") is None:
                data["default_backend"] = backend
        return data

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ContainerConfig:
        """Build a configuration from environment variables only."""
        env = os.environ if environ is None else environ
        return cls(default_backend=env.get(DEFAULT_BACKEND_ENV) or None)

    def apply(self, builder: ContainerBuilder) -> None:
        """Copy the configured parameters onto ``builder``."""
        for name, value in self.parameters.items():
            builder.set_parameter(name, value)
        if self.default_backend is not None:
            builder.set_parameter(DEFAULT_BACKEND_PARAMETER, self.default_backend)


def _read_parameters_file(path: Path) -> dict[str, Any]:
    if path.suffix.lower() not in {".yaml", ".yml"}:
        raise ConfigurationError(
            f"Unsupported configuration file format: {path.suffix}. Use YAML (.yaml/.yml).",
            details={"path": str(path)},
        )

    try:
        with open(path, encoding="utf-8") as f:
            file_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            f"Invalid YAML in {path}: {exc}", details={"path": str(path)}
        ) from exc

    if not isinstance(file_config, dict):
        raise ConfigurationError(
            f"Configuration file {path} must contain a mapping",
            details={"path": str(path)},
        )

    parameters = file_config.get("parameters") or {}
    if not isinstance(parameters, dict):
        raise ConfigurationError(
            f"'parameters' in {path} must be a mapping",
            details={"path": str(path)},
        )
    return parameters


def load_container_config(
    config_path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
    resolution: ParameterResolution | None = None,
) -> ContainerConfig:
    """
    Load container parameters from a YAML file and the environment.

    Environment variables take precedence over the file. When ``environ`` is
    not given, a ``.env`` file is loaded into ``os.environ`` first.

    Args:
        config_path: Optional path to a YAML file with a ``parameters`` mapping
        environ: Environment mapping to read instead of ``os.environ``
        resolution: Optional tracker recording where each value came from; the
            resulting report is logged at INFO level

    Returns:
        ContainerConfig instance
    """
    if environ is None:
        load_dotenv()
        environ = os.environ
    res = resolution or ParameterResolution()

    data: dict[str, Any] = {"default_backend": None, "parameters": {}}

    if config_path:
        path = Path(config_path)
        if not path.exists():
            logger.warning("Configuration file not found: %s", config_path)
        else:
            file_parameters = _read_parameters_file(path)
            for name, value in file_parameters.items():
                if name == DEFAULT_BACKEND_PARAMETER:
                    data["default_backend"] = value
                    record_name = DEFAULT_BACKEND_PARAMETER
                else:
                    data["parameters"][name] = value
                    record_name = f"parameters.{name}"
                res.record(
                    record_name, value, ParameterSource.CONFIG_FILE, origin=str(path)
                )

    env_backend = environ.get(DEFAULT_BACKEND_ENV)
    if env_backend:
        data["default_backend"] = env_backend
        res.record(
            DEFAULT_BACKEND_PARAMETER,
            env_backend,
            ParameterSource.ENVIRONMENT,
            origin=DEFAULT_BACKEND_ENV,
        )

    try:
        config = ContainerConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid container configuration: {exc}",
            details={"errors": exc.errors(include_url=False)},
        ) from exc

    res.log(resolution_logger, config)
    return config
