"""Shared test fixtures for the Gradle conventions test suite."""

import textwrap
from pathlib import Path

import pytest

from gradle_conventions.convention_config import load_convention_settings
from gradle_conventions.convention_models import GradleBuild, GradleProject


@pytest.fixture
def tmp_settings(tmp_path):
    """Factory fixture that writes a settings.gradle.kts (and optional gradle.properties) and returns its path."""
    def _write(content: str, properties: str = None, file_name: str = "settings.gradle.kts") -> Path:
        settings = tmp_path / file_name
        settings.write_text(textwrap.dedent(content), encoding="utf-8")
        if properties is not None:
            (tmp_path / "gradle.properties").write_text(textwrap.dedent(properties), encoding="utf-8")
        return settings
    return _write


@pytest.fixture
def platform_project_names():
    """Subproject names of a platform-sdk style build, unsorted, application projects included."""
    return [
        "swirlds-platform-core",
        "swirlds-common",
        "swirlds",
        "swirlds-benchmarks",
        "swirlds-logging",
        "swirlds-sign-tool",
        "swirlds-base",
    ]


@pytest.fixture
def platform_build(platform_project_names):
    """A GradleBuild with flat subprojects named after platform_project_names."""
    return GradleBuild(
        root_name="platform-sdk",
        projects=[
            GradleProject(path=f":{name}", name=name, project_dir=name)
            for name in platform_project_names
        ],
    )


@pytest.fixture
def default_settings():
    """Convention settings with every value at its built-in default."""
    return load_convention_settings({})


@pytest.fixture
def platform_settings_file(tmp_settings):
    """A platform-sdk style settings.gradle.kts on disk."""
    return tmp_settings("""\
        rootProject.name = "platform-sdk"

        include("swirlds")
        include("swirlds-base", "swirlds-common")
        include(":swirlds-logging")
        include("swirlds-platform-core")
        include("swirlds-benchmarks", "swirlds-sign-tool")
    """)
