import io
import json

from provenance_verifier.config import Settings
from provenance_verifier.engine import ExtractionError
from provenance_verifier.webapp import create_app


class _Engine:
    def __init__(self):
        self.mime_types = []

    def read_manifest(self, data, mime_type):
        self.mime_types.append(mime_type)
        if data == b"broken":
            raise ExtractionError("truncated manifest")
        return json.dumps({"assertions": [{"label": "c2pa.thumbnail", "data": "QUJD"}]})


def _client(engine=None, **settings):
    app = create_app(Settings(**settings), engine=engine or _Engine())
    app.config["TESTING"] = True
    return app.test_client()


def test_health() -> None:
    r = _client().get("/health")
    assert r.status_code == 200
    assert r.get_json() == {"status": "ok"}


def test_verify_upload() -> None:
    engine = _Engine()
    r = _client(engine).post(
        "/verify",
        data={"file": (io.BytesIO(b"\x89PNG\r\n\x1a\n...."), "x.bin")},
        content_type="multipart/form-data",
    )
    assert r.status_code == 200
    body = r.get_json()
    assert body["status"] == "valid"
    assert body["thumbnail"] == "QUJD"
    assert body["claims"] is None
    assert engine.mime_types == ["image/png"]


def test_verify_upload_explicit_mime_and_engine_error() -> None:
    engine = _Engine()
    r = _client(engine).post(
        "/verify",
        data={"file": (io.BytesIO(b"broken"), "x.jpg"), "mime_type": "image/avif"},
        content_type="multipart/form-data",
    )
    body = r.get_json()
    assert body["status"] == "error"
    assert body["raw_manifest"] == "Manifest extraction error: truncated manifest"
    assert engine.mime_types == ["image/avif"]


def test_verify_requires_file() -> None:
    r = _client().post("/verify", data={}, content_type="multipart/form-data")
    assert r.status_code == 400


def test_upload_limit() -> None:
    r = _client(max_upload_bytes=16).post(
        "/verify",
        data={"file": (io.BytesIO(b"x" * 1024), "big.jpg")},
        content_type="multipart/form-data",
    )
    assert r.status_code == 413


def test_parse_endpoint() -> None:
    c = _client()
    r = c.post("/parse", data='{"claim_generator": "Cam"}', content_type="application/json")
    assert r.get_json()["history"] == [{"action": "created", "tool": "Cam", "timestamp": ""}]

    r = c.post("/parse", data="{oops", content_type="text/plain")
    assert r.get_json()["status"] == "error"

    assert c.post("/parse", data="").status_code == 400
