
from enum import Enum
from typing import Any, Optional

from .tree import as_bool, as_list, as_str, get, has, path


class StatusCode(str, Enum):
    VALID = "valid"
    INVALID = "invalid"
    EXPIRED = "expired"
    NONE = "none"
    # only produced by the assembler when the manifest text cannot be read
    ERROR = "error"


# Statuses that mean a credential was found, whatever its verdict.
CREDENTIAL_STATUSES = frozenset({StatusCode.VALID, StatusCode.INVALID, StatusCode.EXPIRED})


def _code_status(code: str) -> Optional[StatusCode]:
    if "expired" in code:
        return StatusCode.EXPIRED
    if "invalid" in code or "failed" in code:
        return StatusCode.INVALID
    return None


def classify(node: Any) -> StatusCode:
    """Map validation signals of a manifest node to a single StatusCode.

    Explicit failures win over the mere presence of a claim: the first
    failing ``validation_status`` entry decides, then an unvalidated
    signature, then any claim structure counts as valid.
    """
    for record in as_list(get(node, 'validation_status')) or []:
        code = as_str(get(record, 'code'))
        if code is None:
            continue
        st = _code_status(code)
        if st is not None:
            return st

    if as_bool(path(node, 'signature_info', 'validated')) is False:
        return StatusCode.INVALID

    if has(node, 'claim_generator') or has(node, 'assertions'):
        return StatusCode.VALID

    return StatusCode.NONE
