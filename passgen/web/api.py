import logging
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request

from passgen import __version__
from passgen.config import load_config
from passgen.errors import PasswordGenError
from passgen.service import bulk_payload, generate_payload, quick_payload, strength_payload

logger = logging.getLogger(__name__)


def _json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def create_app(cfg: Optional[Dict[str, Any]] = None) -> Flask:
    cfg = cfg if cfg is not None else load_config()
    app = Flask(__name__)
    cors_origin = cfg.get("cors_origin", "*")

    @app.after_request
    def add_cors_headers(response):
        response.headers['Access-Control-Allow-Origin'] = cors_origin
        response.headers['Access-Control-Allow-Headers'] = 'Content-Type'
        return response

    @app.errorhandler(PasswordGenError)
    def handle_validation_error(err):
        logger.info("rejected %s %s: %s", request.method, request.path, err.message)
        return jsonify({'success': False, 'error': err.message}), 400

    @app.route('/')
    def home():
        return jsonify({
            'message': 'Password Generator API',
            'version': __version__,
            'endpoints': {
                'POST /api/generate': 'Generate a custom password',
                'POST /api/generate/bulk': 'Generate up to 20 passwords at once',
                'POST /api/check-strength': 'Check password strength',
                'GET /api/generate/quick': 'Generate a password with the default policy',
            },
        })

    @app.route('/api/generate/quick', methods=['GET'])
    def quick_route():
        return jsonify(quick_payload())

    @app.route('/api/generate', methods=['POST'])
    def generate_route():
        return jsonify(generate_payload(_json_body()))

    @app.route('/api/generate/bulk', methods=['POST'])
    def bulk_route():
        return jsonify(bulk_payload(_json_body()))

    @app.route('/api/check-strength', methods=['POST'])
    def strength_route():
        return jsonify(strength_payload(_json_body()))

    return app


if __name__ == "__main__":
    settings = load_config()
    create_app(settings).run(host=settings["host"], port=settings["port"], debug=settings["debug"])
