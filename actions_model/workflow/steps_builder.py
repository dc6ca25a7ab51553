import logging
from abc import ABC, abstractmethod
from typing import List

import yaml

from actions_model.globals.errors import DecodeError
from actions_model.pos import Pos
from actions_model.workflow import ast, helper

logger = logging.getLogger(__name__)


class StepsBuilder(ABC):
    """
    Builder for steps in a GitHub Actions workflow.
    Converts a list of step definitions into a list of Step objects.
    """

    @abstractmethod
    def build(self, steps_node: yaml.Node) -> List[ast.Step]:
        pass


class BaseStepsBuilder(StepsBuilder):
    def __init__(self) -> None:
        self.RULE_NAME = "steps-syntax-error"

    def build(self, steps_node: yaml.Node) -> List[ast.Step]:
        steps_out: List[ast.Step] = []
        for step_node in helper.decode_list(steps_node, "'steps'"):
            steps_out.append(self.__build_step(step_node))
        return steps_out

    def __build_step(self, step_node: yaml.Node) -> ast.Step:
        step = ast.Step(pos=Pos.from_node(step_node))

        try:
            for key, value in helper.iter_mapping(step_node, "Step"):
                match key:
                    case "id":
                        step.id_ = helper.decode_str(value, "Step 'id'")
                    case "if":
                        step.if_ = helper.decode_str(value, "Step 'if'")
                    case "name":
                        step.name_ = helper.decode_str(value, "Step 'name'")
                    case "uses":
                        step.uses_ = helper.decode_str(value, "Step 'uses'")
                    case "run":
                        step.run_ = helper.decode_str(value, "Step 'run'")
                    case "working-directory":
                        step.working_directory_ = helper.decode_str(
                            value, "Step 'working-directory'"
                        )
                    case "shell":
                        step.shell_ = helper.decode_str(value, "Step 'shell'")
                    case "env":
                        step.env_ = helper.decode_str_map(value, "Step 'env'")
                    case "with":
                        step.with_ = helper.decode_str_map(value, "Step 'with'")
                    case "continue-on-error":
                        step.continue_on_error_ = helper.decode_bool(
                            value, "step 'continue-on-error'"
                        )
                    case "timeout-minutes":
                        step.timeout_minutes_ = helper.decode_int(
                            value, "step 'timeout-minutes'"
                        )
                    case _:
                        logger.debug(f"Ignoring unknown step key: {key}")
        except DecodeError as e:
            e.rule = self.RULE_NAME
            raise

        return step
