"""
Plagiarism Engine - Flask Blueprints
"""
from plagiarism_engine.blueprints.detect import detect_bp, init_detect_blueprint

__all__ = [
    'detect_bp', 'init_detect_blueprint'
]
