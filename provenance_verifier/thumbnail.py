
from typing import Any, Optional

from .tree import as_str, assertions, get, has, label_contains

DATA_URL_PREFIX = "data:image"


def _from_data_url(url: Optional[str]) -> Optional[str]:
    if url is None or not url.startswith(DATA_URL_PREFIX):
        return None
    _, sep, payload = url.partition(",")
    if not sep:
        return None
    # anything past a second comma is not base64
    return payload.split(",", 1)[0]


def extract_thumbnail(node: Any) -> Optional[str]:
    """Return the base64 payload of the first inline thumbnail assertion.

    Thumbnails that reference an external resource (``data.identifier``)
    are skipped, not resolved.
    """
    for a in assertions(node):
        if not label_contains(a, "thumbnail"):
            continue
        data = get(a, 'data')
        if has(data, 'identifier'):
            continue
        if isinstance(data, str):
            return data
        payload = _from_data_url(as_str(get(a, 'url')))
        if payload is not None:
            return payload
    return None
