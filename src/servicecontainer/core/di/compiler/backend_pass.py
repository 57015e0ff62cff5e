"""
Backend override compiler pass.

A service tagged ``backend_overridable`` can be replaced by a variant
registered as ``<default_backend>.<service_id>``. For example, with the
``default_backend`` parameter set to ``sqlite``, a tagged ``cache`` service
becomes an alias of ``sqlite.cache`` whenever that id is registered. Tagged
services without a variant keep their original definition.
"""

from __future__ import annotations

import logging

from servicecontainer.core.interfaces.di_interface import (
    ICompilerPass,
    IServiceRegistry,
)

logger = logging.getLogger(__name__)

BACKEND_OVERRIDABLE_TAG = "backend_overridable"
DEFAULT_BACKEND_PARAMETER = "default_backend"


class BackendOverrideResolver:
    """Aliases backend-overridable services to their backend-specific variants."""

    def __init__(self, tag: str = BACKEND_OVERRIDABLE_TAG) -> None:
        self._tag = tag

    def resolve(self, registry: IServiceRegistry, default_backend: str | None) -> None:
        """Apply backend overrides to every tagged service in ``registry``.

        Args:
            registry: The registry to read from and write aliases into
            default_backend: Name of the configured backend, or None when unset
        """
        if default_backend is None:
            return

        overridden = 0
        for service_id in registry.find_tagged_service_ids(self._tag):
            # An alias is already a backend variant, not the original service.
            if registry.has_alias(service_id):
                logger.debug("Skipping %s: already an alias", service_id)
                continue

            qualified_id = f"{default_backend}.{service_id}"
            if registry.has_definition(qualified_id) or registry.has_alias(
                qualified_id
            ):
                registry.set_alias(service_id, qualified_id)
                overridden += 1
                logger.debug("Aliased %s to %s", service_id, qualified_id)

        if overridden:
            logger.info(
                "Applied %d backend override(s) for backend '%s'",
                overridden,
                default_backend,
            )


class BackendCompilerPass(ICompilerPass):
    """Compiler pass that applies the ``default_backend`` parameter."""

    def __init__(self, resolver: BackendOverrideResolver | None = None) -> None:
        self._resolver = resolver or BackendOverrideResolver()

    def process(self, registry: IServiceRegistry) -> None:
        default_backend = (
            registry.get_parameter(DEFAULT_BACKEND_PARAMETER)
            if registry.has_parameter(DEFAULT_BACKEND_PARAMETER)
            else None
        )
        self._resolver.resolve(registry, default_backend)
