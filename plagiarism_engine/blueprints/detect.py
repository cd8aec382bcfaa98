"""
Plagiarism Engine - Detection Blueprint

JSON endpoints around PlagiarismDetector.detect. No file handling and no
persistence: documents arrive as text in the request body and the report
is returned directly.
"""

# =============================================================================
# IMPORTS
# =============================================================================
from flask import Blueprint, jsonify, request

from plagiarism_engine.detector import InvalidInputError
from plagiarism_engine.logging_config import get_logger

logger = get_logger('api')


# =============================================================================
# BLUEPRINT SETUP
# =============================================================================
detect_bp = Blueprint('detect', __name__, url_prefix='/api')

# Shared detector, injected via init_detect_blueprint
_detector = None


def init_detect_blueprint(detector):
    """Inject the detector used by every request"""
    global _detector
    _detector = detector


# =============================================================================
# ENDPOINTS
# =============================================================================

@detect_bp.route('/detect', methods=['POST'])
def detect():
    """Compare targetText against sourceText and return the full report"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        logger.warning("Rejected detect request: body is not a JSON object")
        return jsonify({'error': 'Request body must be a JSON object'}), 400

    try:
        report = _detector.detect(
            data.get('targetText'),
            data.get('sourceText'),
            data.get('sourceDocument', '')
        )
    except InvalidInputError as e:
        logger.warning(f"Rejected detect request: {e}")
        return jsonify({'error': str(e)}), 400

    return jsonify(report.to_dict())


@detect_bp.route('/health', methods=['GET'])
def health():
    config = _detector.config
    return jsonify({
        'status': 'ok',
        'algorithm': config.algorithm,
        'settings': config.get_settings()
    })
