
from typing import Optional

JPEG = "image/jpeg"
PNG = "image/png"
WEBP = "image/webp"

_EXTENSIONS = {
    ".jpg": JPEG,
    ".jpeg": JPEG,
    ".png": PNG,
    ".webp": WEBP,
}


def sniff_magic(data: bytes) -> Optional[str]:
    head = data[:12]
    if head[:3] == b"\xFF\xD8\xFF":  # SOI + first marker
        return JPEG
    if head[:4] == b"\x89PNG":
        return PNG
    if head[8:12] == b"WEBP":  # RIFF....WEBP
        return WEBP
    return None


def detect_mime_type(data: bytes, name: str = "", default: str = JPEG) -> str:
    """
    Guess the image media type for the trust engine.
    Magic bytes win; otherwise the file name / URL extension; otherwise `default`.
    """
    found = sniff_magic(data)
    if found:
        return found
    lower = (name or "").lower()
    for ext, mime in _EXTENSIONS.items():
        if lower.endswith(ext):
            return mime
    return default
