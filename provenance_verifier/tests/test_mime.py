from provenance_verifier.mime import detect_mime_type


def test_magic_bytes() -> None:
    assert detect_mime_type(b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01", "https://example.com/image") == "image/jpeg"
    assert detect_mime_type(b"\x89PNG\r\n\x1a\n\x00\x00\x00\r", "https://example.com/image.jpg") == "image/png"
    assert detect_mime_type(b"RIFF\x00\x00\x00\x00WEBP", "") == "image/webp"


def test_extension_fallback() -> None:
    assert detect_mime_type(b"", "https://example.com/a.JPEG") == "image/jpeg"
    assert detect_mime_type(b"????", "photo.png") == "image/png"
    assert detect_mime_type(b"????", "photo.webp") == "image/webp"


def test_default() -> None:
    assert detect_mime_type(b"GIF89a", "anim.gif") == "image/jpeg"
    assert detect_mime_type(b"", "", default="image/avif") == "image/avif"
