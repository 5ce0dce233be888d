
from typing import Any, List, Optional

from .result import HistoryEvent
from .tree import as_dict, as_list, as_str, assertions, get, label_contains, path


def _str_or(value: Any, default: str) -> str:
    s = as_str(value)
    return default if s is None else s


def _event(action: Any, with_source_type: bool) -> HistoryEvent:
    tool: Optional[str] = as_str(get(action, 'softwareAgent'))
    if tool is None and with_source_type:
        tool = as_str(get(action, 'digitalSourceType'))
    return HistoryEvent(
        action=_str_or(get(action, 'action'), "unknown"),
        tool="Unknown" if tool is None else tool,
        timestamp=_str_or(get(action, 'when'), ""),
    )


def extract_history(node: Any) -> List[HistoryEvent]:
    """Return edit events in the order the manifest declares them.

    When no action assertion yields anything, a single ``created`` event is
    synthesized from ``claim_generator`` (if that is a string).
    """
    events: List[HistoryEvent] = []
    for a in assertions(node):
        if not label_contains(a, "actions"):
            continue
        data = get(a, 'data')
        actions = as_list(get(data, 'actions'))
        if actions is not None:
            events.extend(_event(item, with_source_type=True) for item in actions)
        elif as_dict(data) is not None:
            events.append(_event(data, with_source_type=False))

    if not events:
        generator = as_str(get(node, 'claim_generator'))
        if generator is not None:
            events.append(HistoryEvent(
                action="created",
                tool=generator,
                timestamp=_str_or(path(node, 'metadata', 'dateTime'), ""),
            ))
    return events
