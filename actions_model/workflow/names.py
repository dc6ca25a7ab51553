"""Normalization of fields that may be authored as a scalar, a list or a mapping.

Both the workflow trigger field (``on``) and a job's dependency field
(``needs``) accept any of::

    on: push
    on: [push, pull_request]
    on:
      push:
        branches: [main]

The node kind is recorded explicitly in a :class:`RawNames` while decoding,
and :func:`normalize_names` turns every kind into one ordered list of names.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List

import yaml

from actions_model.globals.errors import DecodeError
from actions_model.pos import Pos
from actions_model.workflow import helper


class NodeKind(Enum):
    none = auto()
    scalar = auto()
    sequence = auto()
    mapping = auto()


@dataclass
class RawNames:
    kind: NodeKind = NodeKind.none
    values: List[str] = field(default_factory=list)


def decode_raw_names(node: yaml.Node, what: str) -> RawNames:
    """Decodes a polymorphic name field from its node kind.

    Raises:
        DecodeError: If a list item or mapping key is not a scalar.
    """
    if helper.is_null(node):
        return RawNames()
    if isinstance(node, yaml.ScalarNode):
        return RawNames(NodeKind.scalar, [node.value])
    if isinstance(node, yaml.SequenceNode):
        values = []
        for item in node.value:
            if not isinstance(item, yaml.ScalarNode):
                raise DecodeError(
                    f"Items of '{what}' must be strings", Pos.from_node(item)
                )
            values.append(item.value)
        return RawNames(NodeKind.sequence, values)
    if isinstance(node, yaml.MappingNode):
        keys = [key for key, _ in helper.iter_mapping(node, f"'{what}'")]
        return RawNames(NodeKind.mapping, keys)
    return RawNames()


def normalize_names(raw: RawNames) -> List[str]:
    """Returns the canonical ordered list of names for any kind of field.

    Mapping keys come back in document order.
    """
    if raw.kind is NodeKind.none:
        return []
    return list(raw.values)
