
from typing import Any

from .tree import as_dict, as_str, get


def resolve(store: Any) -> Any:
    """Return the active manifest node of a manifest store.

    A missing or non-string ``active_manifest`` is looked up as the empty id.
    Flat (legacy) input, or an id missing from ``manifests``, is treated as
    the manifest itself.
    """
    active_id = as_str(get(store, 'active_manifest'))
    if active_id is None:
        active_id = ""
    manifests = as_dict(get(store, 'manifests'))
    if manifests is not None and active_id in manifests:
        return manifests[active_id]
    return store
