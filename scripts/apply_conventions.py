#!/usr/bin/env python3
"""Shared Gradle conventions for multi-project builds.

Reads a build's settings.gradle.kts (and gradle.properties) and generates
the shared convention plugin, including the configuration-time chain that
makes subproject test tasks run one project after another.

Usage:
    python apply_conventions.py <path-to-gradle-build> [--output <dir>] [--dry-run]
    python apply_conventions.py <path-to-gradle-build> --mode static [--project <name>]
    python apply_conventions.py <path-to-gradle-build> --mode report [--exclude <name> ...]

Modes:
    plugin (default) — <group>.conventions.gradle.kts under build-logic/src/main/kotlin
    static           — test-order.gradle.kts in every ordered subproject directory
    report           — print the sequential test order, write nothing
"""

from gradle_conventions.conventions_pipeline import main

if __name__ == "__main__":
    main()
