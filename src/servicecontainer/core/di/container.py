from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from servicecontainer.core.common.exceptions import (
    CircularReferenceError,
    FrozenContainerError,
    InvalidServiceIdentifierError,
    ParameterNotFoundError,
    ServiceNotFoundError,
)
from servicecontainer.core.common.structlog_config import get_logger
from servicecontainer.core.interfaces.di_interface import (
    EntryKind,
    ICompilerPass,
    IServiceRegistry,
)


class ServiceDefinition:
    """Describes how a service is constructed."""

    def __init__(
        self,
        implementation_type: type | None = None,
        implementation_factory: Callable[..., Any] | None = None,
        instance: Any | None = None,
        public: bool = True,
    ):
        """Initialize a service definition.

        Args:
            implementation_type: The class that implements the service
            implementation_factory: Factory function to create the service
            instance: An existing, already constructed instance
            public: Whether the service may be fetched directly by id
        """
        self.implementation_type = implementation_type
        self.implementation_factory = implementation_factory
        self.instance = instance
        self.public = public
        self.tags: dict[str, list[dict[str, Any]]] = {}

        # Validate that at least one implementation method is provided
        if not implementation_type and not implementation_factory and instance is None:
            raise ValueError(
                "Either implementation_type, implementation_factory, or instance must be provided"
            )

    def add_tag(self, name: str, **attributes: Any) -> ServiceDefinition:
        """Attach a tag; the same tag may be added several times."""
        self.tags.setdefault(name, []).append(dict(attributes))
        return self

    def has_tag(self, name: str) -> bool:
        return name in self.tags

    def get_tag(self, name: str) -> list[dict[str, Any]]:
        return [dict(attrs) for attrs in self.tags.get(name, [])]

    def clear_tag(self, name: str) -> ServiceDefinition:
        self.tags.pop(name, None)
        return self

    def __repr__(self) -> str:
        target = self.implementation_type or self.implementation_factory
        name = getattr(target, "__name__", None) or type(self.instance).__name__
        return f"<ServiceDefinition {name}>"


@dataclass(frozen=True)
class Alias:
    """Redirects lookups of one service id to another."""

    target: str
    public: bool = True

    def __str__(self) -> str:
        return self.target


def _validate_service_id(service_id: object) -> str:
    if not isinstance(service_id, str) or not service_id:
        raise InvalidServiceIdentifierError(
            f"Service id must be a non-empty string, got {service_id!r}",
            service_id=service_id,
        )
    if any(ch.isspace() for ch in service_id):
        raise InvalidServiceIdentifierError(
            f"Service id {service_id!r} must not contain whitespace",
            service_id=service_id,
        )
    return service_id


class ContainerBuilder(IServiceRegistry):
    """Mutable registry of definitions, aliases, tags and parameters.

    Compiler passes registered with :meth:`add_compiler_pass` run once in
    :meth:`compile`, after which the builder rejects further changes.
    """

    def __init__(self) -> None:
        self._definitions: dict[str, ServiceDefinition] = {}
        self._aliases: dict[str, Alias] = {}
        self._parameters: dict[str, Any] = {}
        self._passes: list[tuple[int, int, ICompilerPass]] = []
        self._frozen = False

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def _ensure_not_frozen(self) -> None:
        if self._frozen:
            raise FrozenContainerError(
                "Cannot modify a container builder after it has been compiled"
            )

    # Parameters

    def set_parameter(self, name: str, value: Any) -> None:
        self._ensure_not_frozen()
        self._parameters[name] = value

    def has_parameter(self, name: str) -> bool:
        return name in self._parameters

    def get_parameter(self, name: str) -> Any:
        try:
            return self._parameters[name]
        except KeyError:
            raise ParameterNotFoundError(
                f"Parameter '{name}' has not been set", parameter_name=name
            ) from None

    def get_parameters(self) -> dict[str, Any]:
        return dict(self._parameters)

    # Definitions

    def set_definition(
        self, service_id: str, definition: ServiceDefinition
    ) -> ServiceDefinition:
        """Register ``definition`` under ``service_id``, replacing any alias."""
        self._ensure_not_frozen()
        _validate_service_id(service_id)
        self._aliases.pop(service_id, None)
        self._definitions[service_id] = definition
        return definition

    def register(
        self,
        service_id: str,
        implementation_type: type | None = None,
        implementation_factory: Callable[..., Any] | None = None,
    ) -> ServiceDefinition:
        """Register a service and return its definition for further tagging."""
        return self.set_definition(
            service_id,
            ServiceDefinition(
                implementation_type=implementation_type,
                implementation_factory=implementation_factory,
            ),
        )

    def add_instance(self, service_id: str, instance: Any) -> ContainerBuilder:
        """Register an already constructed instance."""
        self.set_definition(service_id, ServiceDefinition(instance=instance))
        return self

    def get_definition(self, service_id: str) -> ServiceDefinition:
        definition = self._definitions.get(service_id)
        if definition is None:
            raise ServiceNotFoundError(
                f"No definition registered for '{service_id}'", service_id=service_id
            )
        return definition

    def find_definition(self, service_id: str) -> ServiceDefinition:
        """Return the definition ``service_id`` resolves to, following aliases."""
        return self.get_definition(self.resolve_alias(service_id))

    def remove_definition(self, service_id: str) -> None:
        self._ensure_not_frozen()
        self._definitions.pop(service_id, None)

    def get_definitions(self) -> dict[str, ServiceDefinition]:
        return dict(self._definitions)

    # Aliases

    def set_alias(self, service_id: str, target: str | Alias) -> Alias:
        """Point ``service_id`` at ``target``, replacing any definition."""
        self._ensure_not_frozen()
        _validate_service_id(service_id)
        alias = target if isinstance(target, Alias) else Alias(target)
        _validate_service_id(alias.target)
        if alias.target == service_id:
            raise CircularReferenceError(
                f"An alias cannot reference itself, got a circular reference on '{service_id}'",
                path=[service_id, service_id],
            )

        self._definitions.pop(service_id, None)
        self._aliases[service_id] = alias
        return alias

    def get_alias(self, service_id: str) -> Alias:
        alias = self._aliases.get(service_id)
        if alias is None:
            raise ServiceNotFoundError(
                f"No alias registered for '{service_id}'", service_id=service_id
            )
        return alias

    def remove_alias(self, service_id: str) -> None:
        self._ensure_not_frozen()
        self._aliases.pop(service_id, None)

    def get_aliases(self) -> dict[str, Alias]:
        return dict(self._aliases)

    def resolve_alias(self, service_id: str) -> str:
        """Follow alias chains until reaching an id that is not an alias."""
        path = [service_id]
        current = service_id
        while current in self._aliases:
            current = self._aliases[current].target
            if current in path:
                path.append(current)
                raise CircularReferenceError(
                    "Circular alias reference: " + " -> ".join(path), path=path
                )
            path.append(current)
        return current

    def get_entry_kind(self, service_id: str) -> EntryKind:
        if service_id in self._aliases:
            return EntryKind.ALIAS
        if service_id in self._definitions:
            return EntryKind.DEFINITION
        return EntryKind.ABSENT

    # Tags

    def find_tagged_service_ids(self, tag: str) -> dict[str, list[dict[str, Any]]]:
        return {
            service_id: definition.get_tag(tag)
            for service_id, definition in self._definitions.items()
            if definition.has_tag(tag)
        }

    def find_tags(self) -> list[str]:
        tags: list[str] = []
        for definition in self._definitions.values():
            for name in definition.tags:
                if name not in tags:
                    tags.append(name)
        return tags

    # Compilation

    def add_compiler_pass(
        self, compiler_pass: ICompilerPass, priority: int = 0
    ) -> ContainerBuilder:
        """Register a pass; higher priorities run first."""
        self._ensure_not_frozen()
        self._passes.append((priority, len(self._passes), compiler_pass))
        return self

    def get_compiler_passes(self) -> list[ICompilerPass]:
        ordered = sorted(self._passes, key=lambda item: (-item[0], item[1]))
        return [compiler_pass for _, _, compiler_pass in ordered]

    def compile(self) -> None:
        """Run every compiler pass once and freeze the builder."""
        self._ensure_not_frozen()
        log = get_logger(__name__)

        for compiler_pass in self.get_compiler_passes():
            log.debug("container.pass.process", compiler_pass=type(compiler_pass).__name__)
            compiler_pass.process(self)

        self._frozen = True
        log.info(
            "container.compiled",
            definitions=len(self._definitions),
            aliases=len(self._aliases),
            parameters=len(self._parameters),
        )
