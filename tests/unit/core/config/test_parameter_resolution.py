import logging

import pytest
from servicecontainer.core.config.container_config import ContainerConfig
from servicecontainer.core.config.parameter_resolution import (
    ParameterResolution,
    ParameterSource,
)


def test_latest_record_wins() -> None:
    resolution = ParameterResolution()

    resolution.record("default_backend", "sqlite", ParameterSource.CONFIG_FILE)
    resolution.record("default_backend", "redis", ParameterSource.ENVIRONMENT)

    assert resolution.source_of("default_backend") is ParameterSource.ENVIRONMENT
    assert resolution.source_of("unknown") is ParameterSource.DEFAULT


def test_build_report_marks_untracked_values_as_default() -> None:
    resolution = ParameterResolution()
    resolution.record(
        "default_backend",
        "sqlite",
        ParameterSource.CONFIG_FILE,
        origin="services.yml",
    )
    config = ContainerConfig(default_backend="sqlite", parameters={"ttl": 5})

    report = {entry.name: entry for entry in resolution.build_report(config)}

    assert report["default_backend"].source is ParameterSource.CONFIG_FILE
    assert report["default_backend"].origin == "services.yml"
    assert report["parameters.ttl"].source is ParameterSource.DEFAULT
    assert report["parameters.ttl"].value == 5


def test_build_report_rejects_unknown_objects() -> None:
    with pytest.raises(TypeError):
        ParameterResolution().build_report(object())


def test_log_redacts_secrets(caplog: pytest.LogCaptureFixture) -> None:
    config = ContainerConfig(parameters={"database.password": "hunter2"})
    logger = logging.getLogger("test.parameters")

    with caplog.at_level(logging.INFO, logger="test.parameters"):
        ParameterResolution().log(logger, config)

    assert "hunter2" not in caplog.text
    assert "Loaded parameter parameters.database.password = '***' (default)" in caplog.text
