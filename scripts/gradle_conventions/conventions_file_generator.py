"""Gradle convention file generators.

Produces content for the shared convention plugin, per-project
``test-order.gradle.kts`` scripts, and the plain text test order report.
All functions take parsed build data as input and return strings.
"""

from .convention_models import ConventionSettings
from .convention_mappings import kotlin_string_list
from .sequential_ordering import build_test_order, ordered_projects


def generate_convention_plugin_kts(settings: ConventionSettings) -> str:
    """Generate the shared ``<group>.conventions.gradle.kts`` precompiled script plugin.

    The plugin applies the configured plugins, sets the group, aligns module
    versions to one project's consistent resolution, wires configuration
    inheritance, selects the Git properties to embed, and chains the test
    tasks of all non-excluded subprojects.

    The test ordering is computed by Gradle at configuration time from
    ``rootProject.subprojects``, so it follows projects added after
    generation. It mirrors ``sequential_test_constraints()``.

    Args:
        settings: The convention settings for the build.

    Returns:
        Complete Kotlin script content as a string.
    """
    lines = []

    # ── Plugins block ──
    lines.append("plugins {")
    for plugin_id in settings.plugins:
        lines.append(f'    id("{plugin_id}")')
    lines.append("}")
    lines.append("")

    lines.append(f'group = "{settings.group}"')
    lines.append("")

    # ── Version alignment ──
    if settings.versions_from:
        lines.append(
            f'javaModuleDependencies {{ versionsFromConsistentResolution("{settings.versions_from}") }}'
        )
        lines.append("")

    # ── Configuration inheritance ──
    for configuration, extends_from in settings.configuration_extensions:
        lines.append(f'configurations.getByName("{configuration}") {{')
        lines.append(f'    extendsFrom(configurations.getByName("{extends_from}"))')
        lines.append("}")
        lines.append("")

    # ── Git properties ──
    if settings.git_property_keys:
        lines.append(f"gitProperties {{ keys = {kotlin_string_list(settings.git_property_keys)} }}")
        lines.append("")

    # ── Sequential test ordering ──
    test_task = settings.test_task
    hammer_task = settings.hammer_test_task
    lines.append(f"// Remove the following once '{test_task}' tasks are allowed to run in parallel")
    lines.append("val sequentialTestProjects =")
    lines.append("    rootProject.subprojects")
    lines.append("        .map { it.name }")
    if settings.excluded_projects:
        excluded = kotlin_string_list(sorted(set(settings.excluded_projects)))
        lines.append(f"        .filter {{ it !in {excluded} }}")
    lines.append("        .sorted()")
    lines.append("val sequentialTestIndex = sequentialTestProjects.indexOf(name)")
    lines.append("")
    lines.append("if (sequentialTestIndex > 0) {")
    lines.append("    val predecessorProject = sequentialTestProjects[sequentialTestIndex - 1]")
    lines.append(f'    tasks.named("{test_task}") {{')
    lines.append(f'        mustRunAfter(":$predecessorProject:{test_task}")')
    lines.append(f'        mustRunAfter(":$predecessorProject:{hammer_task}")')
    lines.append("    }")
    lines.append(f'    tasks.named("{hammer_task}") {{')
    lines.append(f'        mustRunAfter(tasks.named("{test_task}"))')
    lines.append(f'        mustRunAfter(":$predecessorProject:{hammer_task}")')
    lines.append("    }")
    lines.append("}")
    lines.append("")

    return "\n".join(lines)


def generate_test_order_kts(project_name: str, constraints: list) -> str:
    """Generate a static ``test-order.gradle.kts`` for a single subproject.

    Each constraint becomes a ``tasks.named(...)`` block with one
    ``mustRunAfter`` per predecessor task. A project without constraints
    gets a comment-only script so it can still be applied unconditionally.

    Args:
        project_name: Name of the subproject the script is for.
        constraints: OrderingConstraint list from ``sequential_test_constraints()``.

    Returns:
        Complete Kotlin script content as a string.
    """
    lines = [f"// Sequential test order for project '{project_name}'"]
    if not constraints:
        lines.append("// No predecessor: tests of this project are not constrained")
        lines.append("")
        return "\n".join(lines)

    lines.append("")
    for constraint in constraints:
        task_name = constraint.task.rsplit(":", 1)[-1]
        lines.append(f'tasks.named("{task_name}") {{')
        for predecessor_task in constraint.must_run_after:
            lines.append(f'    mustRunAfter("{predecessor_task}")')
        lines.append("}")
        lines.append("")
    return "\n".join(lines)


def generate_test_order_report(project_names: list, settings: ConventionSettings) -> str:
    """Generate a human readable report of the sequential test order.

    Args:
        project_names: Names of all subprojects of the build.
        settings: Convention settings providing exclusions and task names.

    Returns:
        Report text listing ordered projects with their predecessor, then
        the excluded projects present in the build.
    """
    excluded = settings.excluded_projects
    ordered = ordered_projects(project_names, excluded)
    test_order = build_test_order(
        project_names, excluded, settings.test_task, settings.hammer_test_task,
    )

    lines = [f"Sequential test order ({len(ordered)} projects):"]
    width = len(str(len(ordered)))
    previous = None
    for index, name in enumerate(ordered, start=1):
        if test_order[name]:
            lines.append(f"  {index:>{width}}. {name}  (after {previous})")
        else:
            lines.append(f"  {index:>{width}}. {name}  (first)")
        previous = name

    skipped = sorted(set(project_names) & set(excluded))
    if skipped:
        lines.append("")
        lines.append("Excluded from ordering:")
        for name in skipped:
            lines.append(f"  - {name}")
    lines.append("")
    return "\n".join(lines)
