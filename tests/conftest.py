from collections.abc import Iterator

import pytest
import structlog
from servicecontainer.core.di.container import ContainerBuilder


@pytest.fixture
def builder() -> ContainerBuilder:
    return ContainerBuilder()


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    # Tests that configure structlog must not leak renderers into others
    yield
    structlog.reset_defaults()
