"""CLI entry point, build discovery, and file I/O.

Wires together settings parsing, configuration, test ordering, and
generation to apply the shared conventions to a Gradle build.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from .convention_config import load_convention_settings
from .conventions_file_generator import (
    generate_convention_plugin_kts,
    generate_test_order_kts,
    generate_test_order_report,
)
from .sequential_ordering import ordered_projects, predecessor_of, sequential_test_constraints
from .settings_parser import SETTINGS_FILE_NAMES, find_settings_file, parse_settings

MODES = ["plugin", "static", "report"]

# Precompiled script plugins live in the included build-logic build.
PLUGIN_SOURCE_DIR = Path("build-logic") / "src" / "main" / "kotlin"
TEST_ORDER_FILE_NAME = "test-order.gradle.kts"


def apply_conventions(
    project_path: Path,
    output_path: Optional[Path] = None,
    dry_run: bool = False,
    mode: str = "plugin",
    project: Optional[str] = None,
    excluded: Optional[list] = None,
    group: Optional[str] = None,
):
    """Apply the shared conventions to a Gradle build.

    Parses the settings file, assembles the convention settings, and then
    depending on ``mode``:

        - ``plugin``: generates the shared convention plugin
        - ``static``: generates a ``test-order.gradle.kts`` per subproject
        - ``report``: prints the sequential test order

    Args:
        project_path: Root directory of the Gradle build.
        output_path: Directory to write generated files to. Defaults to ``project_path``.
        dry_run: If ``True``, prints generated content to stdout instead of writing files.
        mode: One of ``"plugin"``, ``"static"``, ``"report"``.
        project: Limit ``static`` output to this subproject name.
        excluded: Project names to exclude from ordering, replacing the configured ones.
        group: Group override for the convention plugin.
    """
    if mode not in MODES:
        print(f"ERROR: Unknown mode '{mode}', expected one of: {', '.join(MODES)}", file=sys.stderr)
        sys.exit(1)

    settings_file = find_settings_file(project_path)
    if settings_file is None:
        print(f"ERROR: No {' or '.join(SETTINGS_FILE_NAMES)} found in {project_path}", file=sys.stderr)
        sys.exit(1)

    out = output_path or project_path
    build = parse_settings(settings_file)
    settings = load_convention_settings(build.properties, group=group, excluded=excluded)
    names = build.subproject_names()

    for name in sorted(set(settings.excluded_projects) - set(names)):
        print(f"WARNING: Excluded project '{name}' is not part of build '{build.root_name}'",
              file=sys.stderr)

    if mode == "report":
        print(generate_test_order_report(names, settings))
        return

    if mode == "plugin":
        file_name = f"{settings.group}.conventions.gradle.kts"
        content = generate_convention_plugin_kts(settings)
        if dry_run:
            _print_section(str(PLUGIN_SOURCE_DIR / file_name), content)
        else:
            _write(out / PLUGIN_SOURCE_DIR / file_name, content)
            print(f"\n✅ Convention plugin generated in: {out / PLUGIN_SOURCE_DIR}")
            print("\n⚠️  Next steps:")
            print(f'  1. Apply it in each subproject: plugins {{ id("{settings.group}.conventions") }}')
            print("  2. Run: ./gradlew test")
        return

    # static
    ordered = ordered_projects(names, settings.excluded_projects)
    targets = ordered
    if project is not None:
        if project not in ordered:
            print(f"WARNING: Project '{project}' is not part of the sequential test order "
                  f"(unknown or excluded), nothing to generate", file=sys.stderr)
            return
        targets = [project]

    # Names shared by several projects cannot be mapped to one task path
    paths_by_name = {}
    for gradle_project in build.projects:
        paths_by_name.setdefault(gradle_project.name, []).append(gradle_project.path)
    project_paths = {name: paths[0] for name, paths in paths_by_name.items() if len(paths) == 1}

    written = []
    for name in targets:
        if name not in project_paths:
            print(f"WARNING: Project name '{name}' is shared by {', '.join(paths_by_name[name])}, "
                  f"skipping its test order script", file=sys.stderr)
            continue
        predecessor = predecessor_of(names, settings.excluded_projects, name)
        if predecessor is not None and predecessor not in project_paths:
            print(f"WARNING: Predecessor '{predecessor}' of project '{name}' is shared by "
                  f"{', '.join(paths_by_name[predecessor])}, skipping its test order script",
                  file=sys.stderr)
            continue
        constraints = sequential_test_constraints(
            names, settings.excluded_projects, name,
            settings.test_task, settings.hammer_test_task,
            project_paths=project_paths,
        )
        content = generate_test_order_kts(name, constraints)
        gradle_project = build.find_project(name)
        relative = Path(gradle_project.project_dir) / TEST_ORDER_FILE_NAME
        if dry_run:
            _print_section(str(relative), content)
        else:
            _write(out / relative, content)
            written.append(relative)

    if not dry_run:
        print(f"\n✅ Test order scripts generated for {len(written)} projects in: {out}")
        print("\n⚠️  Next steps:")
        print(f'  1. Apply in each build file: apply(from = "{TEST_ORDER_FILE_NAME}")')
        print("  2. Regenerate whenever subprojects are added or renamed")


def _print_section(title: str, content: str):
    """Print generated content under a banner (dry-run output)."""
    print("=" * 60)
    print(title)
    print("=" * 60)
    print(content)
    print()


def _write(path: Path, content: str):
    """Write content to a file, creating parent directories as needed.

    Args:
        path: Filesystem path to write to.
        content: File content string (UTF-8 encoded).
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    print(f"  ✓ {path}")


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list, defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Apply shared Gradle conventions and sequential test ordering to a multi-project build"
    )
    parser.add_argument("project", type=Path, help="Path to the Gradle build root")
    parser.add_argument("--output", "-o", type=Path, default=None, help="Output directory (default: project dir)")
    parser.add_argument("--dry-run", "-n", action="store_true", help="Print output without writing files")
    parser.add_argument(
        "--mode", "-m", choices=MODES, default="plugin",
        help="'plugin' (default) for the convention plugin, 'static' for per-project "
             "test order scripts, 'report' to print the test order"
    )
    parser.add_argument(
        "--project", "-p", default=None, dest="only_project",
        help="Only generate for this subproject (static mode)"
    )
    parser.add_argument(
        "--exclude", "-x", action="append", default=None, dest="exclude",
        help="Project name to leave out of test ordering (repeatable, replaces configured exclusions)"
    )
    parser.add_argument("--group", "-g", default=None, help="Group applied by the convention plugin")
    return parser.parse_args(argv)


def main():
    """CLI entry point. Parses arguments and delegates to ``apply_conventions()``."""
    args = parse_args()
    apply_conventions(
        args.project, args.output, args.dry_run, args.mode,
        project=args.only_project,
        excluded=args.exclude, group=args.group,
    )
