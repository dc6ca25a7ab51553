"""Unit tests for DecodeError and WorkflowReport."""

from pathlib import Path

import pytest

from actions_model.globals.errors import DEFAULT_RULE, DecodeError
from actions_model.globals.workflow_report import WorkflowReport
from actions_model.pos import Pos
from actions_model.workflow import ast


class TestDecodeError:
    def test_str_with_position(self):
        error = DecodeError("Step 'run' must be a string", Pos(2, 6), "steps-syntax-error")

        assert str(error) == "3:7: Step 'run' must be a string"
        assert error.desc == "Step 'run' must be a string"
        assert error.rule == "steps-syntax-error"

    def test_str_without_position(self):
        error = DecodeError("Workflow document is empty")

        assert str(error) == "Workflow document is empty"
        assert error.pos is None
        assert error.rule == DEFAULT_RULE

    def test_is_an_exception(self):
        with pytest.raises(DecodeError):
            raise DecodeError("boom")


class TestWorkflowReport:
    def test_ok_report(self):
        report = WorkflowReport(file=Path("ci.yml"), workflow=ast.Workflow())

        assert report.ok

    def test_failed_report(self):
        report = WorkflowReport(file=Path("ci.yml"), error=DecodeError("boom"))

        assert not report.ok
        assert report.workflow is None
