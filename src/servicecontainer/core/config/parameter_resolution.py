"""Utilities for tracking container parameter origins and logging them."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ParameterSource(Enum):
    """Enumeration of configuration sources ordered by precedence."""

    DEFAULT = "default"
    CONFIG_FILE = "config"
    ENVIRONMENT = "environment"


@dataclass
class _ParameterRecord:
    value: Any
    source: ParameterSource
    origin: str | None = None


@dataclass
class ResolvedParameter:
    """Represents the final resolved value for a configuration parameter."""

    name: str
    value: Any
    source: ParameterSource
    origin: str | None = None


class ParameterResolution:
    """Track configuration values and the source that supplied them."""

    _history: dict[str, list[_ParameterRecord]]

    def __init__(self) -> None:
        self._history = {}

    def record(
        self,
        name: str,
        value: Any,
        source: ParameterSource,
        *,
        origin: str | None = None,
    ) -> None:
        """Record that a parameter was set by a specific source."""

        entries = self._history.setdefault(name, [])
        entries.append(_ParameterRecord(value=value, source=source, origin=origin))

    def source_of(self, name: str) -> ParameterSource:
        records = self._history.get(name)
        return records[-1].source if records else ParameterSource.DEFAULT

    def build_report(self, config: Any) -> list[ResolvedParameter]:
        """Build a report of all resolved parameters for the supplied config."""

        report: list[ResolvedParameter] = []
        for name, value in _flatten_config(config).items():
            records = self._history.get(name)
            if records:
                entry = records[-1]
                report.append(
                    ResolvedParameter(
                        name=name, value=value, source=entry.source, origin=entry.origin
                    )
                )
            else:
                report.append(
                    ResolvedParameter(
                        name=name,
                        value=value,
                        source=ParameterSource.DEFAULT,
                        origin=None,
                    )
                )

        return sorted(report, key=lambda r: r.name)

    def log(self, logger: logging.Logger, config: Any) -> None:
        """Emit log entries describing each resolved configuration value."""

        for entry in self.build_report(config):
            value_repr = _value_repr(_redact_if_needed(entry.name, entry.value))
            origin_suffix = f" {entry.origin}" if entry.origin else ""
            source_label = f"{entry.source.value}{origin_suffix}".strip()
            logger.info(
                "Loaded parameter %s = %s (%s)",
                entry.name,
                value_repr,
                source_label,
            )


def _flatten_config(config: Any) -> dict[str, Any]:
    """Convert a Pydantic model or mapping into a flat dict of dotted paths."""

    if hasattr(config, "model_dump"):
        data = config.model_dump()
    elif isinstance(config, dict):
        data = config
    else:
        raise TypeError("Unsupported configuration object type")

    flattened: dict[str, Any] = {}

    def _walk(value: Any, prefix: str) -> None:
        if isinstance(value, dict) and value:
            for key, item in value.items():
                new_prefix = f"{prefix}.{key}" if prefix else key
                _walk(item, new_prefix)
        else:
            flattened[prefix] = value

    _walk(data, "")
    return flattened


SECRET_FIELD_SUFFIXES = {
    "password",
    "secret",
    "token",
    "dsn",
}


def _redact_if_needed(name: str, value: Any) -> Any:
    last_segment = name.rsplit(".", 1)[-1].lower()
    if value is None or not any(
        last_segment.endswith(suffix) for suffix in SECRET_FIELD_SUFFIXES
    ):
        return value
    return "***"


def _value_repr(value: Any) -> str:
    try:
        if isinstance(value, dict | list):
            return json.dumps(value, sort_keys=True)
    except TypeError:
        pass
    return repr(value)


__all__ = [
    "ParameterResolution",
    "ParameterSource",
    "ResolvedParameter",
]
