
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .status import StatusCode


@dataclass(frozen=True)
class Claims:
    creator: Optional[str] = None
    tool: Optional[str] = None
    date: Optional[str] = None
    title: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'creator': self.creator,
            'tool': self.tool,
            'date': self.date,
            'title': self.title,
        }


@dataclass(frozen=True)
class HistoryEvent:
    action: str = "unknown"
    tool: str = "Unknown"
    timestamp: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {'action': self.action, 'tool': self.tool, 'timestamp': self.timestamp}


@dataclass(frozen=True)
class VerificationResult:
    status: StatusCode
    claims: Optional[Claims] = None
    history: Tuple[HistoryEvent, ...] = field(default_factory=tuple)
    thumbnail: Optional[str] = None  # base64, never decoded
    raw_manifest: Optional[str] = None  # manifest text, or an error description

    def to_dict(self) -> Dict[str, Any]:
        return {
            'status': self.status.value,
            'claims': self.claims.to_dict() if self.claims is not None else None,
            'history': [e.to_dict() for e in self.history],
            'thumbnail': self.thumbnail,
            'raw_manifest': self.raw_manifest,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(',', ':'))


def none_result() -> VerificationResult:
    return VerificationResult(status=StatusCode.NONE)


def error_result(description: Optional[str]) -> VerificationResult:
    return VerificationResult(status=StatusCode.ERROR, raw_manifest=description)


# Last-resort payload when even serialization of a result fails.
FALLBACK_ERROR_JSON = '{"status":"error","claims":null,"history":[],"thumbnail":null,"raw_manifest":null}'
