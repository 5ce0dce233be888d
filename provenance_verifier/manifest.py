
from typing import Any
import json


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _reject_surrogates(tree: Any) -> None:
    # An unpaired \\ud800-style escape decodes to a str that cannot be encoded as UTF-8
    stack = [tree]
    while stack:
        v = stack.pop()
        if isinstance(v, str):
            try:
                v.encode('utf-8')
            except UnicodeEncodeError as e:
                raise ValueError(f"unpaired surrogate in manifest string: {e}") from e
        elif isinstance(v, list):
            stack.extend(v)
        elif isinstance(v, dict):
            stack.extend(v.keys())
            stack.extend(v.values())


def load_manifest_text(text: str) -> Any:
    """Parse manifest store JSON; raises ValueError on malformed text.

    Strict JSON only: NaN/Infinity and unpaired surrogate escapes are rejected.
    """
    tree = json.loads(text, parse_constant=_reject_constant)
    _reject_surrogates(tree)
    return tree


def pretty(obj: Any) -> str:
    return json.dumps(obj, indent=2, ensure_ascii=False)


def encodable_text(text: Any) -> Any:
    """Return text unchanged unless it cannot be written as UTF-8."""
    if not isinstance(text, str):
        return text
    try:
        text.encode('utf-8')
    except UnicodeEncodeError:
        return text.encode('utf-8', 'backslashreplace').decode('utf-8')
    return text
