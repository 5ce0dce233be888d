
import logging
from typing import Optional

from flask import Flask, request, jsonify

from .config import Settings
from .engine import TrustEngine
from .logging_setup import configure_logging
from .mime import detect_mime_type
from .verifier import parse_manifest, verify_bytes

log = logging.getLogger("provenance_verifier.webapp")


def create_app(settings: Optional[Settings] = None, engine: Optional[TrustEngine] = None) -> Flask:
    settings = settings or Settings.from_env()
    app = Flask(__name__)
    app.config['MAX_CONTENT_LENGTH'] = settings.max_upload_bytes

    @app.get('/health')
    def health():
        return jsonify({'status': 'ok'})

    @app.post('/verify')
    def verify():
        if 'file' not in request.files:
            return jsonify({'error': 'no file'}), 400
        f = request.files['file']
        # processed in memory; nothing is written to disk
        data = f.read()
        mime_type = (request.form.get('mime_type')
                     or detect_mime_type(data, f.filename or "", default=settings.default_mime_type))
        res = verify_bytes(data, mime_type=mime_type, engine=engine)
        log.info("verified upload: %d bytes, %s -> %s", len(data), mime_type, res.status.value)
        return jsonify(res.to_dict())

    @app.post('/parse')
    def parse():
        text = request.get_data(as_text=True)
        if not text:
            return jsonify({'error': 'empty body'}), 400
        return jsonify(parse_manifest(text).to_dict())

    return app


if __name__ == '__main__':
    _settings = Settings.from_env()
    configure_logging(_settings.log_level)
    create_app(_settings).run(debug=_settings.debug)
