import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import yaml

from actions_model.globals.errors import DEFAULT_RULE, DecodeError
from actions_model.pos import Pos
from actions_model.workflow import ast, helper
from actions_model.workflow.matrix import EXCLUDE_KEY, INCLUDE_KEY
from actions_model.workflow.names import decode_raw_names
from actions_model.workflow.steps_builder import StepsBuilder

logger = logging.getLogger(__name__)


class JobsBuilder(ABC):
    @abstractmethod
    def build(self, jobs_node: yaml.Node) -> Dict[str, ast.Job]:
        """
        Build jobs from the 'jobs' mapping of a workflow.
        """
        pass


class BaseJobsBuilder(JobsBuilder):
    def __init__(self, steps_builder: StepsBuilder) -> None:
        self.RULE_NAME = 'jobs-syntax-error'
        self.steps_builder = steps_builder

    def build(self, jobs_node: yaml.Node) -> Dict[str, ast.Job]:
        jobs: Dict[str, ast.Job] = {}
        for job_id, job_node in helper.iter_mapping(jobs_node, "'jobs'"):
            if job_id in jobs:
                raise DecodeError(
                    f"Duplicate job id: {job_id}", Pos.from_node(job_node), self.RULE_NAME
                )
            jobs[job_id] = self.__build_job(job_id, job_node)
        return jobs

    def __build_job(self, job_id: str, job_node: yaml.Node) -> ast.Job:
        job = ast.Job(pos=Pos.from_node(job_node))

        try:
            for key, value in helper.iter_mapping(job_node, f"Job '{job_id}'"):
                match key:
                    case 'name':
                        job.name_ = helper.decode_str(value, "Job 'name'")
                    case 'needs':
                        job.needs_ = decode_raw_names(value, 'needs')
                    case 'runs-on':
                        job.runs_on_ = helper.decode_str(value, "Job 'runs-on'")
                    case 'env':
                        job.env_ = helper.decode_str_map(value, "Job 'env'")
                    case 'if':
                        job.if_ = helper.decode_str(value, "Job 'if'")
                    case 'steps':
                        job.steps_ = self.steps_builder.build(value)
                    case 'timeout-minutes':
                        job.timeout_minutes_ = helper.decode_int(value, "job 'timeout-minutes'")
                    case 'container':
                        job.container_ = self._build_container(value, "Job 'container'")
                    case 'services':
                        job.services_ = {
                            service_name: self._build_container(
                                service_node, f"Service '{service_name}'"
                            )
                            for service_name, service_node in helper.iter_mapping(
                                value, "Job 'services'"
                            )
                        }
                    case 'strategy':
                        job.strategy_ = self._build_strategy(value)
                    case _:
                        logger.debug(f"Ignoring unknown key '{key}' in job '{job_id}'")
        except DecodeError as e:
            if e.rule == DEFAULT_RULE:
                e.rule = self.RULE_NAME
            raise

        return job

    def _build_container(self, node: yaml.Node, what: str) -> Optional[ast.ContainerSpec]:
        if helper.is_null(node):
            return None
        container = ast.ContainerSpec()
        for key, value in helper.iter_mapping(node, what):
            match key:
                case 'image':
                    container.image_ = helper.decode_str(value, f"{what} 'image'")
                case 'env':
                    container.env_ = helper.decode_str_map(value, f"{what} 'env'")
                case 'ports':
                    container.ports_ = helper.decode_int_list(value, f"{what} 'ports'")
                case 'volumes':
                    container.volumes_ = helper.decode_str_list(value, f"{what} 'volumes'")
                case 'options':
                    container.options_ = helper.decode_str(value, f"{what} 'options'")
                case _:
                    logger.debug(f"Ignoring unknown key '{key}' in {what}")
        return container

    def _build_strategy(self, node: yaml.Node) -> Optional[ast.Strategy]:
        if helper.is_null(node):
            return None
        strategy = ast.Strategy()
        for key, value in helper.iter_mapping(node, "Strategy"):
            match key:
                case 'fail-fast':
                    strategy.fail_fast_ = helper.decode_bool(value, "strategy 'fail-fast'")
                case 'max-parallel':
                    strategy.max_parallel_ = helper.decode_int(value, "strategy 'max-parallel'")
                case 'matrix':
                    strategy.matrix_ = self._build_matrix(value)
                case _:
                    logger.debug(f"Ignoring unknown strategy key: {key}")
        return strategy

    def _build_matrix(self, node: yaml.Node) -> Dict[str, List[Any]]:
        matrix: Dict[str, List[Any]] = {}
        for key, value in helper.iter_mapping(node, "Strategy matrix"):
            if key in (INCLUDE_KEY, EXCLUDE_KEY):
                matrix[key] = self._build_matrix_entries(key, value)
            else:
                matrix[key] = [
                    helper.construct_value(item)
                    for item in helper.decode_list(value, f"Matrix axis '{key}'")
                ]
        return matrix

    def _build_matrix_entries(self, key: str, node: yaml.Node) -> List[Dict[str, Any]]:
        """Parses the mappings listed under matrix 'include' or 'exclude'."""
        entries: List[Dict[str, Any]] = []
        for item in helper.decode_list(node, f"Matrix {key}"):
            if not isinstance(item, yaml.MappingNode):
                raise DecodeError(
                    f"Each item in matrix {key} must be a mapping", Pos.from_node(item)
                )
            entries.append({
                entry_key: helper.construct_value(entry_value)
                for entry_key, entry_value in helper.iter_mapping(item, f"Matrix {key} item")
            })
        return entries
