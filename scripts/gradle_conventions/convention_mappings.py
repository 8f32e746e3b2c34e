"""Convention defaults and Gradle naming helpers.

Pure constants and string transformations with no file I/O and no internal
package imports.
"""

import re

# Group applied to every subproject by the convention plugin.
DEFAULT_GROUP = "com.swirlds"

# Plugins applied by the convention plugin, in application order.
DEFAULT_PLUGINS = [
    "java-library",
    "com.hedera.hashgraph.java",
    "com.gorylenko.gradle-git-properties",
]

# All module dependency versions come from this project's consistent resolution.
DEFAULT_VERSIONS_FROM = ":swirlds-platform-core"

# (configuration, extends_from) pairs.
DEFAULT_CONFIGURATION_EXTENSIONS = [
    ("mainRuntimeClasspath", "internal"),
]

DEFAULT_GIT_PROPERTY_KEYS = [
    "git.build.version",
    "git.commit.id",
    "git.commit.id.abbrev",
]

# Application and benchmark projects have no tests worth serializing.
DEFAULT_EXCLUDED_PROJECTS = [
    "swirlds",
    "swirlds-benchmarks",
    "swirlds-sign-tool",
]

TEST_TASK = "test"
HAMMER_TEST_TASK = "hammerTest"

# gradle.properties keys read by convention_config.
PROPERTY_GROUP = "conventions.group"
PROPERTY_PLUGINS = "conventions.plugins"
PROPERTY_VERSIONS_FROM = "conventions.versionsFrom"
PROPERTY_GIT_KEYS = "conventions.gitProperties.keys"
PROPERTY_EXCLUDED_PROJECTS = "conventions.sequentialTests.excludedProjects"
PROPERTY_TEST_TASK = "conventions.sequentialTests.testTask"
PROPERTY_HAMMER_TEST_TASK = "conventions.sequentialTests.hammerTestTask"


def task_path(project_name: str, task_name: str) -> str:
    """Build the absolute path of a task in a flat subproject.

    Args:
        project_name: Subproject name (e.g. ``swirlds-common``).
        task_name: Task name (e.g. ``hammerTest``).

    Returns:
        The task path, e.g. ``:swirlds-common:hammerTest``.
    """
    return f":{project_name}:{task_name}"


def project_task_path(project_path: str, task_name: str) -> str:
    """Build the absolute path of a task from its project's Gradle path (``:a:b`` → ``:a:b:test``)."""
    return f"{normalize_project_path(project_path)}:{task_name}"


def normalize_project_path(path: str) -> str:
    """Return ``path`` as an absolute Gradle project path (``a:b`` → ``:a:b``)."""
    path = path.strip()
    segments = [s for s in path.split(":") if s]
    return ":" + ":".join(segments)


def project_name_for(path: str) -> str:
    """Last segment of a Gradle project path (``:platform:core`` → ``core``)."""
    return normalize_project_path(path).rsplit(":", 1)[-1]


def project_dir_for(path: str) -> str:
    """Default project directory for a Gradle project path (``:a:b`` → ``a/b``)."""
    return "/".join(s for s in normalize_project_path(path).split(":") if s)


def split_list_property(value: str) -> list[str]:
    """Split a comma or whitespace separated property value into items.

    Empty items are dropped, so trailing commas and line continuations
    do not produce blank entries.
    """
    if not value:
        return []
    return [item for item in re.split(r"[,\s]+", value) if item]


def kotlin_string_list(values) -> str:
    """Render values as a Kotlin ``listOf(...)`` expression."""
    return "listOf(" + ", ".join(f'"{v}"' for v in values) + ")"
