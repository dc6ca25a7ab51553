from dataclasses import dataclass
from typing import Optional


@dataclass
class CLIConfig:
    """
    Configuration for CLI operations.

    Attributes:
        workflow_file: Path to specific workflow file, or None to describe all
        job: Only describe the job with this id, or None for every job
        verbose: Whether to emit debug logging
    """

    workflow_file: Optional[str] = None
    job: Optional[str] = None
    verbose: bool = False
