
from .result import Claims, HistoryEvent, VerificationResult
from .status import StatusCode
from .verifier import parse_manifest, verify_bytes, verify_c2pa, verify_path

__all__ = [
    "Claims",
    "HistoryEvent",
    "VerificationResult",
    "StatusCode",
    "parse_manifest",
    "verify_bytes",
    "verify_c2pa",
    "verify_path",
]
