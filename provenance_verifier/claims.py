
from typing import Any, Optional

from .result import Claims
from .tree import as_list, as_str, assertions, at, get, has, label_contains, path


def _tool(node: Any) -> Optional[str]:
    tool = as_str(get(node, 'claim_generator'))
    info = get(node, 'claim_generator_info')
    # name replaces claim_generator outright, even when it is not a string
    if has(info, 'name'):
        tool = as_str(get(info, 'name'))
    if has(info, 'version') and tool is not None:
        version = as_str(get(info, 'version')) or ""
        tool = f"{tool} {version}"
    return tool


def _author_name(author: Any, current: Optional[str]) -> Optional[str]:
    authors = as_list(author)
    if authors is not None:
        if not authors:
            return current
        return as_str(get(at(authors, 0), 'name'))
    if has(author, 'name'):
        return as_str(get(author, 'name'))
    return current


def extract_claims(node: Any) -> Optional[Claims]:
    """Collect creator, tool, date and title claims from a manifest node.

    Later matching assertions override earlier ones. Returns None (rather
    than an empty Claims) when nothing was found.
    """
    tool = _tool(node)
    creator: Optional[str] = None
    title: Optional[str] = None

    for a in assertions(node):
        if label_contains(a, "creativeWork", "creator"):
            data = get(a, 'data')
            if has(data, 'author'):
                creator = _author_name(get(data, 'author'), creator)
        if label_contains(a, "creativeWork"):
            name = as_str(path(a, 'data', 'name'))
            if name is not None:
                title = name

    date = as_str(path(node, 'metadata', 'dateTime'))
    if date is None:
        date = as_str(path(node, 'signature_info', 'time'))

    if creator is None and tool is None and date is None and title is None:
        return None
    return Claims(creator=creator, tool=tool, date=date, title=title)
