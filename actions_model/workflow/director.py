import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from actions_model.workflow import ast
from actions_model.workflow.jobs_builder import BaseJobsBuilder
from actions_model.workflow.parser import Document, PyYAMLParser, YAMLParser
from actions_model.workflow.steps_builder import BaseStepsBuilder
from actions_model.workflow.workflow_builder import BaseWorkflowBuilder, WorkflowBuilder

logger = logging.getLogger(__name__)


class Director(ABC):
    @abstractmethod
    def build(self, document: Document) -> ast.Workflow:
        """
        Build a structured workflow representation from a YAML document.

        Returns:
            Workflow: The decoded workflow.

        Raises:
            DecodeError: If the document does not match the workflow schema.
        """
        pass


class BaseDirector(Director):
    """
    Decodes a GitHub Actions workflow document.

    Composes the document with the parser and hands the root node to the
    workflow builder, which in turn drives the jobs and steps builders.
    """

    def __init__(
        self,
        parser: Optional[YAMLParser] = None,
        workflow_builder: Optional[WorkflowBuilder] = None,
    ) -> None:
        """Initialize a BaseDirector instance.

        Args:
            parser (YAMLParser): Parser used to compose the document.
                Defaults to PyYAMLParser.
            workflow_builder (WorkflowBuilder): Builder used to create the
                workflow from the composed root node. Defaults to the
                standard workflow, jobs and steps builder chain.
        """
        self.parser = parser or PyYAMLParser()
        self.workflow_builder = workflow_builder or BaseWorkflowBuilder(
            BaseJobsBuilder(BaseStepsBuilder())
        )

    def build(self, document: Document) -> ast.Workflow:
        root = self.parser.parse(document)
        workflow = self.workflow_builder.build(root)
        logger.debug(
            f"Decoded workflow '{workflow.name_}' with jobs {workflow.get_job_ids()}"
        )
        return workflow


def read_workflow(document: Document) -> ast.Workflow:
    """Decodes a workflow from YAML text, bytes or a readable stream.

    Raises:
        DecodeError: If the document does not match the workflow schema.
    """
    return BaseDirector().build(document)


def read_workflow_file(path: Union[str, Path]) -> ast.Workflow:
    """Decodes the workflow stored in a file.

    The file is read as bytes, so the YAML reader detects its encoding and
    reports undecodable bytes as a DecodeError.

    Raises:
        DecodeError: If the file does not hold a valid workflow.
        OSError: If the file cannot be read.
    """
    with open(path, 'rb') as f:
        return read_workflow(f)
