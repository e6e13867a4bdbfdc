"""
Pytest configuration and shared fixtures for BFHL server tests
"""
import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import Settings


TEST_EMAIL = 'tester@example.com'


class StubTextGenerator:
    """Stands in for GeminiTextGenerator; records prompts and replays a reply."""

    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def settings():
    return Settings(official_email=TEST_EMAIL, gemini_api_key='test-gemini-key', port=3000)


@pytest.fixture
def text_generator():
    """A stub generator answering 'Paris is the capital.'"""
    return StubTextGenerator(reply='Paris is the capital.')


@pytest.fixture
def app(settings, text_generator):
    """Create and configure a test Flask application instance"""
    from server import create_app

    flask_app = create_app(settings=settings, text_generator=text_generator)
    flask_app.config.update({'TESTING': True})
    return flask_app


@pytest.fixture
def client(app):
    """Create a test client for the Flask application"""
    return app.test_client()


@pytest.fixture
def make_client(settings):
    """Build a test client around a custom stub generator"""
    from server import create_app

    def _make(reply=None, error=None):
        generator = StubTextGenerator(reply=reply, error=error)
        flask_app = create_app(settings=settings, text_generator=generator)
        flask_app.config.update({'TESTING': True})
        return flask_app.test_client(), generator
    return _make
