"""
BFHL Routes — health check plus the single-key /bfhl dispatcher.
"""
import json
from flask import current_app, jsonify, request
from core.bfhl import dispatch, ValidationError


def _read_body():
    """Parse the JSON request body.

    Missing, non-JSON or malformed bodies give None, which fails the
    single-key check. Other parse errors (e.g. an integer literal too long
    to convert) propagate with their own message.
    """
    if not request.is_json:
        return None
    raw = request.get_data(cache=True)
    if not raw:
        return None
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None


def register_bfhl_routes(app):

    @app.route('/health', methods=['GET'])
    def health():
        """Report service identity."""
        settings = current_app.config['BFHL_SETTINGS']
        return jsonify({
            'is_success': True,
            'official_email': settings.official_email,
        })

    @app.route('/bfhl', methods=['POST'])
    def bfhl():
        """Run the operation named by the body's single key."""
        settings = current_app.config['BFHL_SETTINGS']
        generator = current_app.extensions['text_generator']

        try:
            data = dispatch(_read_body(), generator)
            # Encoding can fail too (integers past the str conversion limit)
            return jsonify({
                'is_success': True,
                'official_email': settings.official_email,
                'data': data,
            })
        except ValidationError as e:
            return jsonify({'is_success': False, 'error': str(e)}), 400
        except Exception as e:
            print(f"❌ /bfhl error: {e!r}")
            return jsonify({'is_success': False, 'error': str(e)}), 400
