"""
Total accessors over a parsed JSON tree.

Manifest stores come from many producers and schema revisions, so nothing
about their shape can be assumed. Every helper here returns None on a missing
key, out-of-range index or wrong type instead of raising. Extractors are built
only from these.
"""
from typing import Any, Dict, List, Optional, Union

Key = Union[str, int]


def get(node: Any, key: str) -> Any:
    if isinstance(node, dict):
        return node.get(key)
    return None


def has(node: Any, key: str) -> bool:
    # A JSON null still counts as present.
    return isinstance(node, dict) and key in node


def at(node: Any, index: int) -> Any:
    if isinstance(node, list) and -len(node) <= index < len(node):
        return node[index]
    return None


def path(node: Any, *keys: Key) -> Any:
    cur = node
    for k in keys:
        if cur is None:
            return None
        # bool is an int subclass; never treat it as an index
        if isinstance(k, int) and not isinstance(k, bool):
            cur = at(cur, k)
        else:
            cur = get(cur, k)
    return cur


def as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def as_bool(value: Any) -> Optional[bool]:
    return value if isinstance(value, bool) else None


def as_list(value: Any) -> Optional[List[Any]]:
    return value if isinstance(value, list) else None


def as_dict(value: Any) -> Optional[Dict[str, Any]]:
    return value if isinstance(value, dict) else None


def label_contains(assertion: Any, *fragments: str) -> bool:
    """True when the assertion's string label contains any fragment.

    Labels carry producer namespaces and version suffixes
    (``c2pa.actions.v2``, ``c2pa.thumbnail.claim.jpeg``), so only a
    fragment has to match. Matching is case-sensitive.
    """
    label = as_str(get(assertion, 'label'))
    if label is None:
        return False
    return any(f in label for f in fragments)


def assertions(node: Any) -> List[Any]:
    return as_list(get(node, 'assertions')) or []
