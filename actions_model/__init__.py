"""actions-model: in-memory model of GitHub Actions workflow files.

This package decodes workflow YAML into a typed model, normalizes fields
that may be written as a scalar, a list or a mapping, expands job matrix
strategies into their variants and describes how each step would be run.
It can be used both as a CLI tool and as a Python library.

Example:
    CLI usage:
        $ actions-model                          # Describe all workflows
        $ actions-model workflow.yml             # Describe a specific file
        $ actions-model workflow.yml --job test  # Describe a single job

    Library usage:
        from actions_model import read_workflow_file, expand_matrix

        workflow = read_workflow_file('.github/workflows/ci.yml')
        job = workflow.get_job('test')
        for variant in expand_matrix(job.strategy_):
            print(variant)
"""

from .globals.errors import DecodeError
from .workflow import (
    ContainerSpec,
    Job,
    NodeKind,
    RawNames,
    Step,
    StepType,
    Strategy,
    Workflow,
    display_name,
    expand_matrix,
    get_matrixes,
    normalize_names,
    read_workflow,
    read_workflow_file,
    shell_command,
    step_env,
    step_type,
)

__all__ = [
    # Decoding
    "read_workflow",
    "read_workflow_file",
    "DecodeError",

    # Model
    "Workflow",
    "Job",
    "Strategy",
    "ContainerSpec",
    "Step",
    "StepType",
    "RawNames",
    "NodeKind",

    # Semantics
    "normalize_names",
    "expand_matrix",
    "get_matrixes",
    "display_name",
    "step_type",
    "step_env",
    "shell_command",
]
