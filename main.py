"""
Plagiarism Engine - Main entry point
Runs the JSON API with the Flask development server
"""
import os
import sys

from plagiarism_engine.app import create_app

app = create_app()

if __name__ == '__main__':
    port = int(os.environ.get('PORT', '5000'))
    debug_mode = os.environ.get('FLASK_DEBUG', 'false').lower() == 'true'

    print(f"Starting plagiarism API on 0.0.0.0:{port}...")
    sys.stdout.flush()

    app.run(host='0.0.0.0', port=port, debug=debug_mode, threaded=True)
