# Workflow package imports - available for AST and decoding
from .ast import *  # noqa: F401, F403
from .director import BaseDirector, Director, read_workflow, read_workflow_file
from .jobs_builder import BaseJobsBuilder, JobsBuilder
from .matrix import expand_matrix, get_matrixes
from .names import NodeKind, RawNames, normalize_names
from .parser import PyYAMLParser, YAMLParser
from .step_descriptor import display_name, shell_command, step_env, step_type
from .steps_builder import BaseStepsBuilder, StepsBuilder
from .workflow_builder import BaseWorkflowBuilder, WorkflowBuilder

__all__ = [
    "BaseDirector",
    "Director",
    "read_workflow",
    "read_workflow_file",
    "BaseJobsBuilder",
    "JobsBuilder",
    "expand_matrix",
    "get_matrixes",
    "NodeKind",
    "RawNames",
    "normalize_names",
    "PyYAMLParser",
    "YAMLParser",
    "display_name",
    "shell_command",
    "step_env",
    "step_type",
    "BaseStepsBuilder",
    "StepsBuilder",
    "BaseWorkflowBuilder",
    "WorkflowBuilder",
]
