"""
Text generation client for the BFHL service.
Talks to the Gemini generateContent API via raw HTTP requests.
"""
import requests


GEMINI_ENDPOINT = 'https://generativelanguage.googleapis.com/v1beta/models'
DEFAULT_MODEL = 'gemini-pro'


class GeminiTextGenerator:
    """
    Sends a single user prompt to Gemini and returns the first candidate's text.

    generate() returns None when the API answers with a non-2xx status or
    when the reply has no text where one is expected. Network errors from
    ``requests`` are not caught.
    """

    def __init__(self, api_key, model=DEFAULT_MODEL, endpoint_url=None, timeout=None):
        self.api_key = api_key
        self.model = model
        self.endpoint_url = endpoint_url or GEMINI_ENDPOINT
        # None means no timeout, same as requests' own default
        self.timeout = timeout

    @property
    def url(self):
        return f'{self.endpoint_url}/{self.model}:generateContent'

    def build_payload(self, prompt):
        return {
            'contents': [
                {'role': 'user', 'parts': [{'text': prompt}]},
            ],
        }

    def generate(self, prompt):
        headers = {'Content-Type': 'application/json'}
        resp = requests.post(
            self.url,
            params={'key': self.api_key},
            headers=headers,
            json=self.build_payload(prompt),
            timeout=self.timeout,
        )
        if not resp.ok:
            print(f'⚠️ Gemini API error ({resp.status_code}): {resp.text[:300]}')
            return None

        return extract_text(resp.json())


def extract_text(data):
    """Pull ``candidates[0].content.parts[0].text`` out of a Gemini reply."""
    if not isinstance(data, dict):
        return None
    candidates = data.get('candidates')
    if not isinstance(candidates, list) or not candidates:
        return None
    content = candidates[0].get('content') if isinstance(candidates[0], dict) else None
    if not isinstance(content, dict):
        return None
    parts = content.get('parts')
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        return None
    text = parts[0].get('text')
    return text if isinstance(text, str) else None
