from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Any


class EntryKind(Enum):
    """What a service id currently denotes in a registry."""

    DEFINITION = auto()
    ALIAS = auto()
    ABSENT = auto()


class IServiceRegistry(ABC):
    @abstractmethod
    def has_parameter(self, name: str) -> bool:
        pass

    @abstractmethod
    def get_parameter(self, name: str) -> Any:
        pass

    @abstractmethod
    def find_tagged_service_ids(self, tag: str) -> dict[str, list[dict[str, Any]]]:
        pass

    @abstractmethod
    def get_entry_kind(self, service_id: str) -> EntryKind:
        pass

    def has_definition(self, service_id: str) -> bool:
        """Return True when ``service_id`` is registered as a definition.

        This is a default implementation that can be overridden for more efficient behavior.
        """
        return self.get_entry_kind(service_id) is EntryKind.DEFINITION

    def has_alias(self, service_id: str) -> bool:
        """Return True when ``service_id`` is registered as an alias."""
        return self.get_entry_kind(service_id) is EntryKind.ALIAS

    @abstractmethod
    def set_alias(self, service_id: str, target: str) -> None:
        pass


class ICompilerPass(ABC):
    @abstractmethod
    def process(self, registry: IServiceRegistry) -> None:
        pass
