import logging
from abc import ABC, abstractmethod

import yaml

from actions_model.workflow import ast, helper
from actions_model.workflow.jobs_builder import JobsBuilder
from actions_model.workflow.names import decode_raw_names

logger = logging.getLogger(__name__)


class WorkflowBuilder(ABC):
    @abstractmethod
    def build(self, workflow_node: yaml.MappingNode) -> ast.Workflow:
        """
        Build a structured workflow representation from the composed YAML root.

        Returns:
            Workflow: The built Workflow object.

        Raises:
            DecodeError: If a field does not have the expected shape.
        """
        pass


class BaseWorkflowBuilder(WorkflowBuilder):
    """
    Constructs a structured representation of a GitHub Actions workflow file.

    Top-level keys are decoded into a Workflow; the 'jobs' mapping is
    delegated to the jobs builder. Unknown keys are ignored.
    """

    def __init__(self, jobs_builder: JobsBuilder) -> None:
        self.RULE_NAME = "workflow-syntax-error"
        self.jobs_builder = jobs_builder

    def build(self, workflow_node: yaml.MappingNode) -> ast.Workflow:
        workflow = ast.Workflow()

        for key, value in helper.iter_mapping(workflow_node, "Workflow"):
            match key:
                case "name":
                    workflow.name_ = helper.decode_str(value, "Workflow 'name'")
                case "on":
                    workflow.on_ = decode_raw_names(value, "on")
                case "env":
                    workflow.env_ = helper.decode_str_map(value, "Workflow 'env'")
                case "jobs":
                    workflow.jobs_ = self.jobs_builder.build(value)
                case _:
                    logger.debug(f"Ignoring unknown top-level workflow key: {key}")

        if not workflow.jobs_:
            logger.debug("Workflow defines no jobs")

        return workflow

