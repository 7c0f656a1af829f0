"""Tests for the resdeps command line interface."""

import json

import pytest
from click.testing import CliRunner

from resdeps.cli.main import cli

CATALOG_YAML = """
resources:
  - resource: a
    name: A
    sdesc: Resource A
    ldesc: The first resource in the alphabetical order
    category: example
  - resource: b
    name: B
    sdesc: Resource B
    ldesc: The second resource, dependent on A
    category: example
    requires: [a]
  - resource: c
    name: C
    sdesc: Resource C
    ldesc: The third resource, dependent on B
    category: example
    requires: [b]
"""


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "catalog.yaml"
    path.write_text(CATALOG_YAML)
    return str(path)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestQueryCommands:
    """Test the four core queries."""

    def test_show(self, runner, catalog_file) -> None:
        result = runner.invoke(cli, ["-c", catalog_file, "show", "a"])
        assert result.exit_code == 0
        assert result.stdout == (
            "Resource: a\n"
            "Name: A\n"
            "Short Description: Resource A\n"
            "Long Description: The first resource in the alphabetical order\n"
            "Category: example\n"
            "Requirements: []\n"
        )

    def test_chain(self, runner, catalog_file) -> None:
        result = runner.invoke(cli, ["-c", catalog_file, "chain", "c"])
        assert result.exit_code == 0
        assert result.stdout == "c\nc -> b\nc -> b -> a\n"

    def test_tree(self, runner, catalog_file) -> None:
        result = runner.invoke(cli, ["-c", catalog_file, "tree", "c"])
        assert result.exit_code == 0
        assert result.stdout == "c <- b <- a\n"

    def test_order(self, runner, catalog_file) -> None:
        result = runner.invoke(cli, ["-c", catalog_file, "order", "c"])
        assert result.exit_code == 0
        assert result.stdout == "a\nb\nc\n"

    def test_deps_and_rdeps(self, runner, catalog_file) -> None:
        result = runner.invoke(cli, ["-c", catalog_file, "deps", "c"])
        assert result.stdout == "a\nb\n"

        result = runner.invoke(cli, ["-c", catalog_file, "rdeps", "a"])
        assert result.stdout == "b\nc\n"

    def test_catalog_from_environment(self, runner, catalog_file) -> None:
        result = runner.invoke(cli, ["order", "b"], env={"RESDEPS_CATALOG": catalog_file})
        assert result.exit_code == 0
        assert result.stdout == "a\nb\n"

    @pytest.mark.parametrize("command", ["show", "chain", "tree", "order"])
    def test_unknown_resource(self, runner, catalog_file, command) -> None:
        """Test unknown resources exit with an error and no output."""
        result = runner.invoke(cli, ["-c", catalog_file, command, "missing"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "Unknown resource 'missing'" in result.stderr

    def test_cycle(self, runner, tmp_path) -> None:
        path = tmp_path / "cycle.yaml"
        path.write_text("- resource: a\n  requires: [b]\n- resource: b\n  requires: [a]\n")

        result = runner.invoke(cli, ["-c", str(path), "order", "a"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "a -> b -> a" in result.stderr

    def test_missing_catalog_option(self, runner) -> None:
        result = runner.invoke(cli, ["chain", "a"], env={"RESDEPS_CATALOG": None})
        assert result.exit_code == 2
        assert "No catalog given" in result.output

    def test_unreadable_catalog(self, runner, tmp_path) -> None:
        result = runner.invoke(cli, ["-c", str(tmp_path / "nope.yaml"), "chain", "a"])
        assert result.exit_code == 1
        assert "Cannot read catalog" in result.stderr

    def test_undecodable_catalog(self, runner, tmp_path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_bytes(b"- resource: a\n  name: \xff\xfe\n")
        result = runner.invoke(cli, ["-c", str(path), "show", "a"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "Cannot read catalog" in result.stderr

    @pytest.mark.parametrize("command", ["chain", "tree"])
    def test_path_listing_help_points_to_order(self, runner, command) -> None:
        result = runner.invoke(cli, [command, "--help"])
        assert result.exit_code == 0
        assert "\"order\"" in result.stdout


class TestGraphCommands:
    """Test whole-graph commands."""

    def test_graph(self, runner, catalog_file) -> None:
        result = runner.invoke(cli, ["-c", catalog_file, "graph"])
        assert result.exit_code == 0
        assert '"c" -> "b";' in result.stdout

    def test_graph_to_file(self, runner, catalog_file, tmp_path) -> None:
        output = tmp_path / "deps.dot"
        result = runner.invoke(cli, ["-c", catalog_file, "graph", "b", "-o", str(output)])
        assert result.exit_code == 0
        assert "Graph written to" in result.stdout
        text = output.read_text()
        assert '"b" -> "a";' in text
        assert '"c"' not in text

    def test_stats_json(self, runner, catalog_file) -> None:
        result = runner.invoke(cli, ["-c", catalog_file, "stats", "--format", "json"])
        assert result.exit_code == 0
        stats = json.loads(result.stdout)
        assert stats["total_resources"] == 3
        assert stats["max_depth"] == 3

    def test_stats_table(self, runner, catalog_file) -> None:
        result = runner.invoke(cli, ["-c", catalog_file, "stats"])
        assert result.exit_code == 0
        assert "Total resources" in result.stdout


class TestCatalogCommands:
    """Test validation and export."""

    def test_validate_clean(self, runner, catalog_file) -> None:
        result = runner.invoke(cli, ["-c", catalog_file, "validate"])
        assert result.exit_code == 0
        assert "no problems found" in result.stdout

    def test_validate_problems(self, runner, tmp_path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text(
            "- resource: a\n  requires: [b]\n"
            "- resource: b\n  requires: [a]\n"
            "- resource: c\n  requires: [ghost]\n",
        )
        result = runner.invoke(cli, ["-c", str(path), "validate"])
        assert result.exit_code == 1
        assert "c requires ghost" in result.stdout
        assert "a -> b -> a" in result.stdout

    def test_export_json(self, runner, catalog_file) -> None:
        result = runner.invoke(cli, ["-c", catalog_file, "export", "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [item["resource"] for item in data["resources"]] == ["a", "b", "c"]
        assert "metadata" not in data

    def test_export_to_file(self, runner, catalog_file, tmp_path) -> None:
        output = tmp_path / "copy.yaml"
        result = runner.invoke(cli, ["-c", catalog_file, "export", "-o", str(output)])
        assert result.exit_code == 0
        copy = runner.invoke(cli, ["-c", str(output), "chain", "c"])
        assert copy.stdout == "c\nc -> b\nc -> b -> a\n"


def test_version(runner) -> None:
    result = runner.invoke(cli, ["version"])
    assert result.exit_code == 0
    assert "resdeps 1.0.0" in result.stdout

    result = runner.invoke(cli, ["version", "--json"])
    assert json.loads(result.stdout)["resdeps"]["version"] == "1.0.0"
