"""Tests for conventions_file_generator.py — Kotlin DSL and report generation."""

from gradle_conventions.convention_config import load_convention_settings
from gradle_conventions.conventions_file_generator import (
    generate_convention_plugin_kts,
    generate_test_order_kts,
    generate_test_order_report,
)
from gradle_conventions.sequential_ordering import sequential_test_constraints


class TestGenerateConventionPluginKts:
    def test_plugins_block(self, default_settings):
        content = generate_convention_plugin_kts(default_settings)
        assert content.startswith("plugins {\n")
        assert '    id("java-library")' in content
        assert '    id("com.hedera.hashgraph.java")' in content
        assert '    id("com.gorylenko.gradle-git-properties")' in content

    def test_group(self, default_settings):
        assert 'group = "com.swirlds"' in generate_convention_plugin_kts(default_settings)

    def test_version_alignment(self, default_settings):
        content = generate_convention_plugin_kts(default_settings)
        assert 'javaModuleDependencies { versionsFromConsistentResolution(":swirlds-platform-core") }' in content

    def test_version_alignment_omitted(self):
        settings = load_convention_settings({"conventions.versionsFrom": ""})
        assert "javaModuleDependencies" not in generate_convention_plugin_kts(settings)

    def test_configuration_extension(self, default_settings):
        content = generate_convention_plugin_kts(default_settings)
        assert 'configurations.getByName("mainRuntimeClasspath") {' in content
        assert '    extendsFrom(configurations.getByName("internal"))' in content

    def test_git_properties(self, default_settings):
        content = generate_convention_plugin_kts(default_settings)
        assert (
            'gitProperties { keys = listOf("git.build.version", "git.commit.id", "git.commit.id.abbrev") }'
            in content
        )

    def test_git_properties_omitted_without_keys(self):
        settings = load_convention_settings({"conventions.gitProperties.keys": ""})
        assert "gitProperties" not in generate_convention_plugin_kts(settings)

    def test_sequential_ordering_block(self, default_settings):
        content = generate_convention_plugin_kts(default_settings)
        assert "rootProject.subprojects" in content
        assert '.filter { it !in listOf("swirlds", "swirlds-benchmarks", "swirlds-sign-tool") }' in content
        assert "        .sorted()" in content
        assert "val sequentialTestIndex = sequentialTestProjects.indexOf(name)" in content
        assert "if (sequentialTestIndex > 0) {" in content
        assert "sequentialTestProjects[sequentialTestIndex - 1]" in content

    def test_must_run_after_lines(self, default_settings):
        content = generate_convention_plugin_kts(default_settings)
        assert '    tasks.named("test") {\n' in content
        assert '        mustRunAfter(":$predecessorProject:test")' in content
        assert '        mustRunAfter(":$predecessorProject:hammerTest")' in content
        assert '    tasks.named("hammerTest") {\n        mustRunAfter(tasks.named("test"))' in content

    def test_custom_task_names(self):
        settings = load_convention_settings({
            "conventions.sequentialTests.testTask": "unitTest",
            "conventions.sequentialTests.hammerTestTask": "stressTest",
        })
        content = generate_convention_plugin_kts(settings)
        assert 'tasks.named("unitTest")' in content
        assert 'mustRunAfter(":$predecessorProject:stressTest")' in content
        assert "hammerTest" not in content

    def test_no_filter_without_exclusions(self):
        settings = load_convention_settings({}, excluded=[])
        assert ".filter" not in generate_convention_plugin_kts(settings)

    def test_exclusions_sorted_and_deduplicated(self):
        settings = load_convention_settings({}, excluded=["b", "a", "b"])
        content = generate_convention_plugin_kts(settings)
        assert '.filter { it !in listOf("a", "b") }' in content

    def test_deterministic(self, default_settings):
        assert generate_convention_plugin_kts(default_settings) == generate_convention_plugin_kts(default_settings)


class TestGenerateTestOrderKts:
    def test_with_predecessor(self):
        constraints = sequential_test_constraints(["a", "b", "c"], [], "b")
        content = generate_test_order_kts("b", constraints)
        assert content == "\n".join([
            "// Sequential test order for project 'b'",
            "",
            'tasks.named("test") {',
            '    mustRunAfter(":a:test")',
            '    mustRunAfter(":a:hammerTest")',
            "}",
            "",
            'tasks.named("hammerTest") {',
            '    mustRunAfter(":b:test")',
            '    mustRunAfter(":a:hammerTest")',
            "}",
            "",
        ])

    def test_without_constraints(self):
        content = generate_test_order_kts("a", [])
        assert "// Sequential test order for project 'a'" in content
        assert "No predecessor" in content
        assert "tasks.named" not in content


class TestGenerateTestOrderReport:
    def test_lists_projects_in_order(self, platform_project_names, default_settings):
        report = generate_test_order_report(platform_project_names, default_settings)
        lines = report.splitlines()
        assert lines[0] == "Sequential test order (4 projects):"
        assert lines[1] == "  1. swirlds-base  (first)"
        assert lines[2] == "  2. swirlds-common  (after swirlds-base)"
        assert lines[3] == "  3. swirlds-logging  (after swirlds-common)"
        assert lines[4] == "  4. swirlds-platform-core  (after swirlds-logging)"

    def test_lists_excluded_projects(self, platform_project_names, default_settings):
        report = generate_test_order_report(platform_project_names, default_settings)
        assert "Excluded from ordering:" in report
        assert "  - swirlds\n" in report
        assert "  - swirlds-benchmarks\n" in report
        assert "  - swirlds-sign-tool\n" in report

    def test_excluded_section_omitted_when_none_present(self, default_settings):
        report = generate_test_order_report(["a", "b"], default_settings)
        assert "Excluded from ordering" not in report

    def test_index_alignment(self, default_settings):
        names = [f"p{i:02d}" for i in range(10)]
        report = generate_test_order_report(names, default_settings)
        assert "   1. p00  (first)" in report
        assert "  10. p09  (after p08)" in report

    def test_empty_build(self, default_settings):
        report = generate_test_order_report([], default_settings)
        assert report.startswith("Sequential test order (0 projects):")
