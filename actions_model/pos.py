from dataclasses import dataclass

from yaml import Node


@dataclass
class Pos:
    line: int
    col: int

    @classmethod
    def from_node(cls, node: Node) -> 'Pos':
        """Creates a Pos instance from a composed YAML node."""
        return cls(node.start_mark.line, node.start_mark.column)
