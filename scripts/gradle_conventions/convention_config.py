"""Convention settings assembly.

Layers the built-in defaults, ``gradle.properties`` entries and command line
overrides into a single ConventionSettings.
"""

from typing import Optional

from .convention_models import ConventionSettings
from .convention_mappings import (
    DEFAULT_CONFIGURATION_EXTENSIONS,
    DEFAULT_EXCLUDED_PROJECTS,
    DEFAULT_GIT_PROPERTY_KEYS,
    DEFAULT_GROUP,
    DEFAULT_PLUGINS,
    DEFAULT_VERSIONS_FROM,
    HAMMER_TEST_TASK,
    PROPERTY_EXCLUDED_PROJECTS,
    PROPERTY_GIT_KEYS,
    PROPERTY_GROUP,
    PROPERTY_HAMMER_TEST_TASK,
    PROPERTY_PLUGINS,
    PROPERTY_TEST_TASK,
    PROPERTY_VERSIONS_FROM,
    TEST_TASK,
    split_list_property,
)


def load_convention_settings(
    properties: Optional[dict] = None,
    group: Optional[str] = None,
    excluded: Optional[list] = None,
) -> ConventionSettings:
    """Build the convention settings for a build.

    Precedence, highest first: explicit arguments, ``conventions.*`` entries
    in ``properties``, built-in defaults. An empty list property (e.g.
    ``conventions.sequentialTests.excludedProjects=``) clears the default.

    Args:
        properties: Parsed ``gradle.properties`` entries.
        group: Group override from the command line.
        excluded: Excluded project names from the command line.

    Returns:
        A fully populated ConventionSettings.
    """
    properties = properties or {}

    def _list(key, default):
        if key in properties:
            return split_list_property(properties[key])
        return list(default)

    excluded_projects = _list(PROPERTY_EXCLUDED_PROJECTS, DEFAULT_EXCLUDED_PROJECTS)
    if excluded is not None:
        excluded_projects = list(excluded)

    return ConventionSettings(
        group=group or properties.get(PROPERTY_GROUP) or DEFAULT_GROUP,
        plugins=_list(PROPERTY_PLUGINS, DEFAULT_PLUGINS),
        versions_from=properties.get(PROPERTY_VERSIONS_FROM, DEFAULT_VERSIONS_FROM) or None,
        configuration_extensions=list(DEFAULT_CONFIGURATION_EXTENSIONS),
        git_property_keys=_list(PROPERTY_GIT_KEYS, DEFAULT_GIT_PROPERTY_KEYS),
        excluded_projects=excluded_projects,
        test_task=properties.get(PROPERTY_TEST_TASK) or TEST_TASK,
        hammer_test_task=properties.get(PROPERTY_HAMMER_TEST_TASK) or HAMMER_TEST_TASK,
    )
