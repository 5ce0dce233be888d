
import logging
from typing import Optional

from .claims import extract_claims
from .engine import C2paEngine, ExtractionError, NoProvenanceData, TrustEngine
from .history import extract_history
from .locator import resolve
from .manifest import encodable_text, load_manifest_text
from .mime import detect_mime_type
from .result import FALLBACK_ERROR_JSON, VerificationResult, error_result, none_result
from .status import classify
from .thumbnail import extract_thumbnail

log = logging.getLogger("provenance_verifier.verifier")


def parse_manifest(manifest_text: str) -> VerificationResult:
    """Normalize manifest store JSON into a VerificationResult.

    Malformed text yields an ``error`` result carrying the original text.
    """
    try:
        store = load_manifest_text(manifest_text)
    except (ValueError, TypeError, RecursionError) as e:
        log.warning("manifest text is not valid JSON: %s", e)
        return error_result(encodable_text(manifest_text))

    node = resolve(store)
    status = classify(node)
    log.debug("classified active manifest as %s", status.value)
    return VerificationResult(
        status=status,
        claims=extract_claims(node),
        history=tuple(extract_history(node)),
        thumbnail=extract_thumbnail(node),
        raw_manifest=manifest_text,
    )


def verify_bytes(data: bytes, mime_type: Optional[str] = None,
                 engine: Optional[TrustEngine] = None, name: str = "") -> VerificationResult:
    """Run the trust engine over media bytes and normalize what it reports.

    Never raises: engine failures and unexpected faults become ``error``
    results with a description in ``raw_manifest``.
    """
    engine = engine or C2paEngine()
    try:
        mime_type = mime_type or detect_mime_type(data, name)
        manifest_text = engine.read_manifest(data, mime_type)
    except NoProvenanceData:
        return none_result()
    except ExtractionError as e:
        log.warning("manifest extraction failed (%s): %s", mime_type, e)
        return error_result(f"Manifest extraction error: {e}")
    except Exception as e:
        log.exception("trust engine failed unexpectedly")
        return error_result(f"Verification engine failure: {e}")

    try:
        return parse_manifest(manifest_text)
    except Exception as e:
        log.exception("manifest normalization failed")
        return error_result(f"Manifest normalization failure: {e}")


def verify_path(path: str, mime_type: Optional[str] = None,
                engine: Optional[TrustEngine] = None) -> VerificationResult:
    with open(path, 'rb') as f:
        data = f.read()
    return verify_bytes(data, mime_type=mime_type, engine=engine, name=path)


def verify_c2pa(data: bytes, mime_type: Optional[str] = None,
                engine: Optional[TrustEngine] = None) -> str:
    """Serialized entry point: always returns a well-formed result JSON string."""
    try:
        return verify_bytes(data, mime_type=mime_type, engine=engine).to_json()
    except Exception:
        log.exception("could not serialize verification result")
        return FALLBACK_ERROR_JSON
