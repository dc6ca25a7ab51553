from typing import Optional

from actions_model.pos import Pos


DEFAULT_RULE = 'workflow-syntax-error'


class DecodeError(Exception):
    """Raised when a workflow document does not match the expected shape.

    Attributes:
        desc: Human-readable description of the problem
        pos: Position of the offending node (0-based), if known
        rule: Identifier of the check that failed
    """

    def __init__(
        self,
        desc: str,
        pos: Optional[Pos] = None,
        rule: str = DEFAULT_RULE
    ) -> None:
        super().__init__(desc)
        self.desc = desc
        self.pos = pos
        self.rule = rule

    def __str__(self) -> str:
        if self.pos is None:
            return self.desc
        return f'{self.pos.line + 1}:{self.pos.col + 1}: {self.desc}'
