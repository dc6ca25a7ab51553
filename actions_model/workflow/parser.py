from abc import ABC, abstractmethod
from typing import IO, Union

import yaml

from actions_model.globals.errors import DecodeError
from actions_model.pos import Pos

Document = Union[str, bytes, IO]


class YAMLParser(ABC):
    """Abstract base class for YAML parser implementations.

    Args:
        ABC: Abstract base class from the abc module.
    """
    @abstractmethod
    def parse(self, document: Document) -> yaml.MappingNode:
        """Parse a YAML document into its root mapping node.

        Args:
            document (Document): Text, bytes or a readable stream.

        Returns:
            yaml.MappingNode: The composed root node of the document.

        Raises:
            DecodeError: If the document is not a single YAML mapping.
        """
        pass


class PyYAMLParser(YAMLParser):
    """YAML parser implementation using the PyYAML composer.

    Composing (rather than loading) keeps the node kinds and source marks,
    which the builders need to tell scalars, sequences and mappings apart.
    """

    def __init__(self) -> None:
        self.RULE = 'workflow-syntax-error'

    def parse(self, document: Document) -> yaml.MappingNode:
        try:
            root = yaml.compose(document, Loader=yaml.SafeLoader)
        except yaml.MarkedYAMLError as e:
            pos = Pos(e.problem_mark.line, e.problem_mark.column) if e.problem_mark else None
            raise DecodeError(
                f"Error parsing YAML document: {e.problem or e}", pos, self.RULE
            ) from e
        except yaml.YAMLError as e:
            raise DecodeError(f"Error parsing YAML document: {e}", None, self.RULE) from e

        if root is None:
            raise DecodeError("Workflow document is empty", None, self.RULE)
        if not isinstance(root, yaml.MappingNode):
            raise DecodeError(
                "Workflow document must be a mapping", Pos.from_node(root), self.RULE
            )
        return root
