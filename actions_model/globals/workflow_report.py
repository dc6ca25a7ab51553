from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from actions_model.globals.errors import DecodeError
from actions_model.workflow.ast import Workflow


@dataclass
class WorkflowReport:
    """Outcome of decoding one workflow file.

    Exactly one of ``workflow`` and ``error`` is set.
    """

    file: Path
    workflow: Optional[Workflow] = None
    error: Optional[DecodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
