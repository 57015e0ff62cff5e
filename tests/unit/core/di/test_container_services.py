"""
Tests for the default container wiring.
"""

from servicecontainer.core.config.container_config import ContainerConfig
from servicecontainer.core.di.compiler.backend_pass import BackendCompilerPass
from servicecontainer.core.di.container import ContainerBuilder
from servicecontainer.core.di.services import (
    create_container_builder,
    register_compiler_passes,
)


class DatabaseCache:
    pass


class RedisCache:
    pass


class DatabaseLock:
    pass


def test_register_compiler_passes_adds_backend_pass() -> None:
    builder = ContainerBuilder()

    result = register_compiler_passes(builder)

    assert result is builder
    passes = builder.get_compiler_passes()
    assert len(passes) == 1
    assert isinstance(passes[0], BackendCompilerPass)


def test_create_container_builder_without_config() -> None:
    builder = create_container_builder()

    assert builder.get_parameters() == {}
    assert not builder.is_frozen


def test_create_container_builder_applies_config() -> None:
    config = ContainerConfig(default_backend="redis", parameters={"cache.ttl": 60})

    builder = create_container_builder(config)

    assert builder.get_parameter("default_backend") == "redis"
    assert builder.get_parameter("cache.ttl") == 60


def test_compiled_container_uses_backend_variants() -> None:
    """A tagged service with a registered variant resolves to that variant."""
    # Arrange
    builder = create_container_builder(ContainerConfig(default_backend="redis"))
    builder.register("cache", DatabaseCache).add_tag("backend_overridable")
    builder.register("lock", DatabaseLock).add_tag("backend_overridable")
    builder.register("redis.cache", RedisCache)

    # Act
    builder.compile()

    # Assert
    assert builder.find_definition("cache").implementation_type is RedisCache
    assert builder.find_definition("lock").implementation_type is DatabaseLock
