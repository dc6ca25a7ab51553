from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from actions_model.globals.errors import DecodeError
from actions_model.globals.workflow_report import WorkflowReport
from actions_model.workflow.director import BaseDirector, Director


class DescribeService(ABC):
    """Interface for services that decode workflow files for display."""

    @abstractmethod
    def describe_file(self, file: Path) -> WorkflowReport:
        """Decode a single workflow file and return the outcome."""
        pass


class StandardDescribeService(DescribeService):
    """
    Standard describe service using the default director.

    Decode errors are captured in the report instead of being raised, so one
    broken file does not stop the others from being described.
    """

    def __init__(self, director: Optional[Director] = None):
        self.director = director or BaseDirector()

    def describe_file(self, file: Path) -> WorkflowReport:
        try:
            with open(file, "rb") as f:
                workflow = self.director.build(f)
        except DecodeError as e:
            return WorkflowReport(file=file, error=e)
        return WorkflowReport(file=file, workflow=workflow)
