"""Gradle settings and properties parsing.

Handles all interaction with ``settings.gradle.kts`` / ``settings.gradle``
and ``gradle.properties`` files: project includes, the root project name,
project directory overrides, and property entries.

Settings scripts are code, not data. Only the literal forms commonly used
in settings files are recognized; computed includes are ignored.
"""

import re
from pathlib import Path

from .convention_models import GradleBuild, GradleProject
from .convention_mappings import normalize_project_path, project_dir_for, project_name_for

# Settings file names, preferred first.
SETTINGS_FILE_NAMES = ["settings.gradle.kts", "settings.gradle"]

# String literals are matched first so comment markers inside them survive.
_COMMENT_RE = re.compile(
    r'"(?:\\.|[^"\\])*"|\'(?:\\.|[^\'\\])*\'|//[^\n]*|/\*.*?\*/',
    re.DOTALL,
)
_STRING_RE = re.compile(r'"([^"]*)"|\'([^\']*)\'')
_ROOT_NAME_RE = re.compile(r'rootProject\.name\s*=\s*["\']([^"\']+)["\']')
# Kotlin: include("a", "b")   Groovy: include("a") or include 'a', 'b'
_INCLUDE_CALL_RE = re.compile(r"\binclude\s*\(([^)]*)\)")
_INCLUDE_GROOVY_RE = re.compile(
    r"\binclude\s+((?:[\"'][^\"']+[\"']\s*,\s*)*[\"'][^\"']+[\"'])"
)
_PROJECT_DIR_RE = re.compile(
    r'project\(\s*["\']([^"\']+)["\']\s*\)\s*\.projectDir\s*=\s*'
    r'(?:file\(\s*)?["\']([^"\']+)["\']'
)


def _strip_comments(source: str) -> str:
    """Remove ``//`` and ``/* */`` comments, leaving string literals intact."""
    def _keep_strings(match):
        token = match.group(0)
        if token.startswith("/"):
            # Keep line structure so later regexes see the same statements
            return "\n" * token.count("\n")
        return token
    return _COMMENT_RE.sub(_keep_strings, source)


def _string_args(args: str) -> list[str]:
    """Extract the string literal arguments of a call."""
    return [m.group(1) if m.group(1) is not None else m.group(2) for m in _STRING_RE.finditer(args)]


def _include_paths(source: str) -> list[str]:
    """Collect included project paths in declaration order."""
    found = []
    for match in _INCLUDE_CALL_RE.finditer(source):
        found.append((match.start(), _string_args(match.group(1))))
    for match in _INCLUDE_GROOVY_RE.finditer(source):
        found.append((match.start(), _string_args(match.group(1))))
    found.sort(key=lambda item: item[0])
    return [arg for _pos, args in found for arg in args]


def parse_settings(settings_path: Path) -> GradleBuild:
    """Parse a Gradle settings file into a GradleBuild.

    Recognizes ``rootProject.name``, ``include(...)`` calls (Kotlin and
    Groovy syntax) and ``project(":x").projectDir = file("...")``
    overrides. Including ``:a:b`` also creates ``:a``, as Gradle does.
    The root ``gradle.properties`` next to the settings file is read as well.

    Args:
        settings_path: Filesystem path to ``settings.gradle.kts`` or ``settings.gradle``.

    Returns:
        A GradleBuild with projects deduplicated by path, in declaration order.
    """
    root_dir = settings_path.parent
    source = _strip_comments(settings_path.read_text(encoding="utf-8"))

    root_match = _ROOT_NAME_RE.search(source)
    root_name = root_match.group(1) if root_match else root_dir.resolve().name

    project_dirs = {}
    for match in _PROJECT_DIR_RE.finditer(source):
        project_dirs[normalize_project_path(match.group(1))] = match.group(2).rstrip("/")

    projects = []
    seen_paths = set()
    for raw_path in _include_paths(source):
        path = normalize_project_path(raw_path)
        if path == ":":
            continue
        segments = path.split(":")[1:]
        # Implicit parents first, then the project itself
        for depth in range(1, len(segments) + 1):
            current = ":" + ":".join(segments[:depth])
            if current in seen_paths:
                continue
            seen_paths.add(current)
            projects.append(GradleProject(
                path=current,
                name=project_name_for(current),
                project_dir=project_dirs.get(current, project_dir_for(current)),
            ))

    return GradleBuild(
        root_name=root_name,
        projects=projects,
        properties=parse_gradle_properties(root_dir / "gradle.properties"),
        root_dir=root_dir,
    )


def parse_gradle_properties(properties_path: Path) -> dict:
    """Parse a ``gradle.properties`` file.

    Supports ``key=value`` and ``key: value`` entries, ``#`` and ``!``
    comment lines, and backslash line continuations.

    Args:
        properties_path: Filesystem path to the properties file.

    Returns:
        A dict of property entries. Empty if the file does not exist.
    """
    if not properties_path.exists():
        return {}
    properties = {}
    pending = ""
    for raw_line in properties_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not pending and (not line or line[0] in "#!"):
            continue
        if line.endswith("\\"):
            pending += line[:-1]
            continue
        _store_property(properties, pending + line)
        pending = ""
    # A continuation on the last line still ends the entry
    if pending:
        _store_property(properties, pending)
    return properties


def _store_property(properties: dict, line: str):
    match = re.match(r"^([^=:\s]+)\s*[=:]?\s*(.*)$", line)
    if match:
        properties[match.group(1)] = match.group(2).strip()


def find_settings_file(project_path: Path):
    """Return the settings file of the build rooted at ``project_path``, or ``None``."""
    for file_name in SETTINGS_FILE_NAMES:
        candidate = project_path / file_name
        if candidate.exists():
            return candidate
    return None
