"""
Plagiarism Engine - Flask Application

Application factory for the JSON API. One detector is built per app and
injected into the blueprints.
"""
from flask import Flask, jsonify, request
from flask_cors import CORS

from plagiarism_engine.blueprints import detect_bp, init_detect_blueprint
from plagiarism_engine.config import app_config
from plagiarism_engine.detector import PlagiarismDetector
from plagiarism_engine.logging_config import setup_logging, get_logger


def create_app(config=None, detector=None):
    setup_logging()
    app_logger = get_logger('app')

    config = config or app_config
    detector = detector or PlagiarismDetector(config)

    app = Flask(__name__)
    CORS(app)
    app.json.ensure_ascii = False

    init_detect_blueprint(detector)
    app.register_blueprint(detect_bp)
    app_logger.info("Blueprints registered.")

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({'error': 'Not found', 'path': request.path}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({'error': 'Method not allowed'}), 405

    return app
