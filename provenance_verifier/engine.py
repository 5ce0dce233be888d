"""
Boundary to the trust verification engine.

The engine decodes the media container, validates signatures and trust
chains, and hands back the manifest store as JSON text. Everything past that
text is handled by this package; nothing here looks at media bytes itself.
"""
import io
import logging
from typing import Protocol

log = logging.getLogger("provenance_verifier.engine")


class ProvenanceError(Exception):
    """Base class for outcomes reported by a trust engine."""


class NoProvenanceData(ProvenanceError):
    """The media carries no provenance record."""


class ExtractionError(ProvenanceError):
    """A provenance record exists but could not be extracted."""


class TrustEngine(Protocol):
    def read_manifest(self, data: bytes, mime_type: str) -> str:
        """Return the manifest store JSON, or raise a ProvenanceError."""
        ...


class C2paEngine:
    """Trust engine backed by the c2pa-python SDK."""

    def read_manifest(self, data: bytes, mime_type: str) -> str:
        # Lazy import keeps the normalization core usable without the native SDK
        import c2pa

        try:
            reader = c2pa.Reader(mime_type, io.BytesIO(data))
        except Exception as e:
            # The SDK reports "no manifest" and "unsupported format" the same way
            log.debug("no provenance data (%s): %s", mime_type, e)
            raise NoProvenanceData(str(e)) from e

        with reader:
            try:
                return reader.json()
            except Exception as e:
                raise ExtractionError(str(e)) from e
