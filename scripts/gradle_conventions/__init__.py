"""Shared Gradle conventions and sequential test ordering package."""

from .conventions_pipeline import apply_conventions, main
from .settings_parser import parse_settings
from .sequential_ordering import ordered_projects, sequential_test_constraints
from .convention_models import ConventionSettings, GradleBuild, GradleProject, OrderingConstraint

__all__ = [
    "apply_conventions", "main", "parse_settings", "ordered_projects", "sequential_test_constraints",
    "ConventionSettings", "GradleBuild", "GradleProject", "OrderingConstraint",
]
