from typing import Any, Dict, Iterator, List, Tuple

import yaml
from yaml.constructor import ConstructorError, SafeConstructor

from actions_model.globals.errors import DecodeError
from actions_model.pos import Pos

NULL_TAG = 'tag:yaml.org,2002:null'
BOOL_TAG = 'tag:yaml.org,2002:bool'
INT_TAG = 'tag:yaml.org,2002:int'
MERGE_TAG = 'tag:yaml.org,2002:merge'


def is_null(node: yaml.Node) -> bool:
    return isinstance(node, yaml.ScalarNode) and node.tag == NULL_TAG


def iter_mapping(
    node: yaml.Node,
    what: str
) -> Iterator[Tuple[str, yaml.Node]]:
    """Yields (key, value node) pairs of a mapping node in document order.

    A null node is treated as an empty mapping. Merge keys (``<<``) are
    resolved first, the merged pairs coming before the mapping's own.
    """
    if is_null(node):
        return
    if not isinstance(node, yaml.MappingNode):
        raise DecodeError(f"{what} must be a mapping", Pos.from_node(node))
    for key_node, value_node in merged_pairs(node):
        if not isinstance(key_node, yaml.ScalarNode):
            raise DecodeError(f"Keys of {what} must be strings", Pos.from_node(key_node))
        yield key_node.value, value_node


def merged_pairs(node: yaml.MappingNode) -> List[Tuple[yaml.Node, yaml.Node]]:
    """Returns the pairs of a mapping node with its merge keys resolved.

    A key set by the mapping itself overrides a merged one, and among merged
    mappings the first listed wins.
    """
    if not any(key_node.tag == MERGE_TAG for key_node, _ in node.value):
        return list(node.value)

    own = [(k, v) for k, v in node.value if k.tag != MERGE_TAG]
    flat = yaml.MappingNode(node.tag, list(node.value), node.start_mark, node.end_mark)
    try:
        SafeConstructor().flatten_mapping(flat)
    except ConstructorError as e:
        raise DecodeError(f"Invalid merge key: {e.problem}", Pos.from_node(node)) from e

    own_keys = {k.value for k, _ in own if isinstance(k, yaml.ScalarNode)}
    merged: Dict[str, Tuple[yaml.Node, yaml.Node]] = {}
    for key_node, value_node in flat.value[:len(flat.value) - len(own)]:
        if not isinstance(key_node, yaml.ScalarNode):
            raise DecodeError("Keys of merged mappings must be strings", Pos.from_node(key_node))
        if key_node.value not in own_keys:
            merged[key_node.value] = (key_node, value_node)
    return list(merged.values()) + own


def decode_str(node: yaml.Node, what: str) -> str:
    """Decodes any scalar as its source text, e.g. ``16`` becomes ``"16"``."""
    if is_null(node):
        return ''
    if not isinstance(node, yaml.ScalarNode):
        raise DecodeError(f"{what} must be a string", Pos.from_node(node))
    return node.value


def decode_int(node: yaml.Node, what: str) -> int:
    if is_null(node):
        return 0
    if not isinstance(node, yaml.ScalarNode) or node.tag != INT_TAG:
        raise DecodeError(
            f"Invalid integer for {what}: {_describe(node)}", Pos.from_node(node)
        )
    return construct_value(node)


def decode_bool(node: yaml.Node, what: str) -> bool:
    if is_null(node):
        return False
    if not isinstance(node, yaml.ScalarNode) or node.tag != BOOL_TAG:
        raise DecodeError(
            f"Invalid boolean for {what}: {_describe(node)}", Pos.from_node(node)
        )
    return construct_value(node)


def decode_str_map(node: yaml.Node, what: str) -> Dict[str, str]:
    return {
        key: decode_str(value, f"{what}.{key}")
        for key, value in iter_mapping(node, what)
    }


def decode_list(node: yaml.Node, what: str) -> List[yaml.Node]:
    if is_null(node):
        return []
    if not isinstance(node, yaml.SequenceNode):
        raise DecodeError(f"{what} must be a list", Pos.from_node(node))
    return list(node.value)


def decode_str_list(node: yaml.Node, what: str) -> List[str]:
    return [decode_str(item, f"items of {what}") for item in decode_list(node, what)]


def decode_int_list(node: yaml.Node, what: str) -> List[int]:
    return [decode_int(item, f"items of {what}") for item in decode_list(node, what)]


def construct_value(node: yaml.Node) -> Any:
    """Builds the native Python value of a node with PyYAML's safe constructor."""
    try:
        return SafeConstructor().construct_object(node, deep=True)
    except ConstructorError as e:
        raise DecodeError(f"Invalid value: {e.problem}", Pos.from_node(node)) from e


def _describe(node: yaml.Node) -> str:
    if isinstance(node, yaml.ScalarNode):
        return repr(node.value)
    if isinstance(node, yaml.SequenceNode):
        return 'a list'
    return 'a mapping'
