"""Unit tests for output formatting."""

from pathlib import Path

from actions_model.cli_components.output_formatter import ColoredFormatter
from actions_model.globals.errors import DecodeError
from actions_model.pos import Pos
from actions_model.workflow import ast
from actions_model.workflow.names import NodeKind, RawNames


class TestColoredFormatter:
    """Unit tests for ColoredFormatter output formatting."""

    def test_format_file_header(self):
        """Test file header formatting includes underline and path."""
        formatter = ColoredFormatter()
        file_path = Path("/test/workflow.yml")

        header = formatter.format_file_header(file_path)

        assert str(file_path) in header
        assert "\033[4m" in header  # underline code
        assert "\033[0m" in header  # reset code

    def test_format_events(self):
        formatter = ColoredFormatter()

        assert formatter.format_events(["push", "pull_request"]) == "  on: push, pull_request"
        assert formatter.format_events([]) == "  on: -"

    def test_format_job(self):
        """Test job formatting lists runner, needs, variants and steps."""
        formatter = ColoredFormatter()
        job = ast.Job(
            name_="Unit tests",
            runs_on_="ubuntu-latest",
            needs_=RawNames(NodeKind.sequence, ["lint", "build"]),
            steps_=[
                ast.Step(uses_="actions/checkout@v4"),
                ast.Step(name_="Test", run_="npm test\nnpm run e2e", shell_="sh"),
                ast.Step(uses_="./.github/actions/report"),
                ast.Step(uses_="docker://alpine"),
            ],
        )
        variants = [{"node": 16}, {"node": 18, "experimental": True}]

        formatted = formatter.format_job("test", job, variants)

        assert "test" in formatted
        assert "(Unit tests)" in formatted
        assert "runs-on: ubuntu-latest" in formatted
        assert "needs: lint, build" in formatted
        assert "variants: 2" in formatted
        assert "node=18, experimental=True" in formatted
        assert "1. [action]" in formatted
        assert "2. [run]" in formatted
        assert "sh -e -c {0}" in formatted
        assert "3. [local]" in formatted
        assert "4. [docker]" in formatted
        assert "npm run e2e" not in formatted

    def test_format_job_single_run(self):
        """Test a job without matrix shows one variant and no variant lines."""
        formatter = ColoredFormatter()
        job = ast.Job(name_="build", steps_=[ast.Step(run_="make")])

        formatted = formatter.format_job("build", job, [{}])

        assert "(build)" not in formatted
        assert "runs-on: -" in formatted
        assert "needs" not in formatted
        assert "variants: 1" in formatted
        assert "bash --noprofile --norc -eo pipefail {0}" in formatted

    def test_format_error(self):
        """Test errors include position, description and rule."""
        formatter = ColoredFormatter()
        error = DecodeError("Invalid integer for job 'timeout-minutes': 'ten'", Pos(4, 21), "jobs-syntax-error")

        formatted = formatter.format_error(error)

        assert "5:22" in formatted  # line:col (1-based)
        assert "Invalid integer" in formatted
        assert "jobs-syntax-error" in formatted
        assert "\033[31m" in formatted  # red color for errors

    def test_format_summary_success(self):
        formatter = ColoredFormatter()

        summary = formatter.format_summary(2, 0)

        assert "2 workflows" in summary
        assert "0 failed to decode" in summary
        assert "\033[1;92m" in summary

    def test_format_summary_failure(self):
        formatter = ColoredFormatter()

        summary = formatter.format_summary(3, 1)

        assert "3 workflows" in summary
        assert "1 failed to decode" in summary
        assert "\033[1;31m" in summary
