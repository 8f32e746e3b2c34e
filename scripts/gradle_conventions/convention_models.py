"""Gradle build data model classes.

Pure data structures representing a parsed multi-project Gradle build and
the conventions applied to its subprojects.
No behavior or imports from other gradle_conventions modules.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class GradleProject:
    """A project declared in ``settings.gradle.kts``.

    Attributes:
        path: Gradle project path (e.g. ``:platform:core``).
        name: Project name, the last segment of ``path`` (e.g. ``core``).
        project_dir: Directory relative to the root build (e.g. ``platform/core``).
    """
    path: str
    name: str
    project_dir: str


@dataclass
class GradleBuild:
    """Central parse result for a ``settings.gradle.kts`` file.

    Attributes:
        root_name: ``rootProject.name``, or the root directory name if not set.
        projects: Subprojects in declaration order, implicit parents included.
        properties: Entries from the root ``gradle.properties`` file.
        root_dir: Filesystem path of the root build, if parsed from disk.
    """
    root_name: str
    projects: list = field(default_factory=list)
    properties: dict = field(default_factory=dict)
    root_dir: Optional[Path] = None

    def subproject_names(self) -> list[str]:
        """Names of all subprojects, the equivalent of ``rootProject.subprojects.map { it.name }``."""
        return [p.name for p in self.projects]

    def find_project(self, name: str) -> Optional[GradleProject]:
        for p in self.projects:
            if p.name == name:
                return p
        return None


@dataclass
class ConventionSettings:
    """Settings for the shared convention plugin.

    Attributes:
        group: Maven group applied to every subproject.
        plugins: Plugin ids applied by the convention plugin.
        versions_from: Project path whose resolved versions all others align to.
        configuration_extensions: ``(configuration, extends_from)`` pairs.
        git_property_keys: Keys written by the git-properties plugin.
        excluded_projects: Project names left out of sequential test ordering.
        test_task: Name of the standard test task.
        hammer_test_task: Name of the extended (hammer) test task.
    """
    group: str
    plugins: list = field(default_factory=list)
    versions_from: Optional[str] = None
    configuration_extensions: list = field(default_factory=list)
    git_property_keys: list = field(default_factory=list)
    excluded_projects: list = field(default_factory=list)
    test_task: str = "test"
    hammer_test_task: str = "hammerTest"


@dataclass(frozen=True)
class OrderingConstraint:
    """A ``mustRunAfter`` relation between Gradle tasks.

    ``task`` may not start before every task in ``must_run_after`` has
    finished, when both are part of the same build invocation. It does not
    add a dependency.

    Attributes:
        task: Task path being constrained (e.g. ``:b:test``).
        must_run_after: Task paths it must run after, in declaration order.
    """
    task: str
    must_run_after: tuple = ()
