"""
Container builder configuration.

This module wires the default compiler passes and configured parameters into
a fresh :class:`ContainerBuilder`. Builders are always handed to callers
explicitly; nothing here keeps a process-wide container.
"""

from __future__ import annotations

import logging

from servicecontainer.core.config.container_config import ContainerConfig
from servicecontainer.core.di.compiler.backend_pass import BackendCompilerPass
from servicecontainer.core.di.container import ContainerBuilder

logger = logging.getLogger(__name__)


def register_compiler_passes(builder: ContainerBuilder) -> ContainerBuilder:
    """Register the compiler passes every container runs."""
    return builder.add_compiler_pass(BackendCompilerPass())


def create_container_builder(config: ContainerConfig | None = None) -> ContainerBuilder:
    """Create a builder with ``config`` applied and default passes registered.

    Args:
        config: Parameters to apply; the builder starts without parameters when omitted

    Returns:
        A new, unfrozen ContainerBuilder
    """
    builder = ContainerBuilder()
    if config is not None:
        config.apply(builder)
        logger.debug("Applied container config %r", config)
    return register_compiler_passes(builder)
