"""Sequential test ordering across subprojects.

Gradle's test runner cannot yet run the ``test`` tasks of several
subprojects in parallel. Until it can, every subproject's test tasks are
chained behind those of the subproject before it in a sorted list of names.

Everything here is a pure function of its arguments: the sibling project
names, the names excluded from ordering, and the active project's name.
"""

from typing import Iterable, Optional

from .convention_models import OrderingConstraint
from .convention_mappings import HAMMER_TEST_TASK, TEST_TASK, project_task_path, task_path


def ordered_projects(project_names: Iterable[str], excluded: Iterable[str]) -> list[str]:
    """Remove excluded names and sort the rest lexicographically.

    Args:
        project_names: Names of all sibling subprojects. Duplicates collapse.
        excluded: Names to leave out of the ordering.

    Returns:
        The sorted list of distinct names not in ``excluded``.
    """
    return sorted(set(project_names) - set(excluded))


def project_index(ordered: list[str], active: str) -> int:
    """Position of ``active`` in ``ordered``, or ``-1`` if it is absent."""
    try:
        return ordered.index(active)
    except ValueError:
        return -1


def predecessor_of(
    project_names: Iterable[str],
    excluded: Iterable[str],
    active: str,
) -> Optional[str]:
    """Return the project whose tests run immediately before ``active``'s.

    Returns ``None`` when ``active`` comes first or is not part of the
    ordering (excluded or unknown).
    """
    ordered = ordered_projects(project_names, excluded)
    index = project_index(ordered, active)
    if index > 0:
        return ordered[index - 1]
    return None


def sequential_test_constraints(
    project_names: Iterable[str],
    excluded: Iterable[str],
    active: str,
    test_task: str = TEST_TASK,
    hammer_task: str = HAMMER_TEST_TASK,
    project_paths: Optional[dict] = None,
) -> list[OrderingConstraint]:
    """Compute the ``mustRunAfter`` constraints for one subproject.

    For a project with a predecessor two constraints are produced:

        - its test task runs after the predecessor's test and hammer tasks
        - its hammer task runs after its own test task and the predecessor's
          hammer task

    The first project in the ordering, and any project outside it, gets none.

    Args:
        project_names: Names of all sibling subprojects.
        excluded: Names left out of the ordering.
        active: Name of the project being configured.
        test_task: Name of the standard test task.
        hammer_task: Name of the extended (hammer) test task.
        project_paths: Optional name → Gradle project path mapping. Projects
            found in it get task paths under their real path (``:a:b:test``),
            all others the flat ``:name:test`` form.

    Returns:
        Either an empty list or exactly two constraints.
    """
    predecessor = predecessor_of(project_names, excluded, active)
    if predecessor is None:
        return []

    def _task(name, task):
        if project_paths and name in project_paths:
            return project_task_path(project_paths[name], task)
        return task_path(name, task)

    return [
        OrderingConstraint(
            task=_task(active, test_task),
            must_run_after=(
                _task(predecessor, test_task),
                _task(predecessor, hammer_task),
            ),
        ),
        OrderingConstraint(
            task=_task(active, hammer_task),
            must_run_after=(
                _task(active, test_task),
                _task(predecessor, hammer_task),
            ),
        ),
    ]


def build_test_order(
    project_names: Iterable[str],
    excluded: Iterable[str],
    test_task: str = TEST_TASK,
    hammer_task: str = HAMMER_TEST_TASK,
) -> dict[str, list[OrderingConstraint]]:
    """Constraints for every ordered project, keyed by name in execution order."""
    names = list(project_names)
    excluded = list(excluded)
    return {
        name: sequential_test_constraints(names, excluded, name, test_task, hammer_task)
        for name in ordered_projects(names, excluded)
    }
