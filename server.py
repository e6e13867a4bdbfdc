#!/usr/bin/env python3
"""
BFHL Server
A small Flask server exposing /health and the single-key /bfhl endpoint
"""

from flask import Flask
from flask_cors import CORS

from config import Settings
from llm_service import GeminiTextGenerator
from routes.bfhl_routes import register_bfhl_routes


def create_app(settings=None, text_generator=None):
    """Build the Flask app.

    ``settings`` defaults to Settings.from_env(); ``text_generator`` to a
    GeminiTextGenerator using the configured API key. Tests pass both.
    """
    if settings is None:
        settings = Settings.from_env()
    if text_generator is None:
        text_generator = GeminiTextGenerator(api_key=settings.gemini_api_key)

    app = Flask(__name__)
    CORS(app)

    app.config['BFHL_SETTINGS'] = settings
    # Keep response keys in insertion order
    app.json.sort_keys = False
    app.extensions['text_generator'] = text_generator

    register_bfhl_routes(app)
    return app


if __name__ == '__main__':
    app = create_app()
    port = app.config['BFHL_SETTINGS'].port

    print("=" * 60)
    print("🔢 BFHL Server")
    print("=" * 60)
    print(f"Server running on port {port}")
    print("=" * 60)

    app.run(host='0.0.0.0', port=port)
