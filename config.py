"""
Runtime settings for the BFHL service.
Read once from the environment at start-up and never reloaded.
"""
from dataclasses import dataclass
import os

from dotenv import find_dotenv, load_dotenv


DEFAULT_PORT = 3000


@dataclass(frozen=True)
class Settings:
    official_email: str = ''
    gemini_api_key: str = ''
    port: int = DEFAULT_PORT

    @classmethod
    def from_env(cls, environ=None, dotenv=True):
        """Build settings from environment variables.

        A ``.env`` file in the working directory is loaded first unless
        ``dotenv`` is False. Variables already set in the process win.
        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))
        env = os.environ if environ is None else environ

        raw_port = env.get('PORT') or DEFAULT_PORT
        try:
            port = int(raw_port)
        except (TypeError, ValueError):
            raise ValueError(f'PORT must be an integer, got {raw_port!r}')

        return cls(
            official_email=env.get('OFFICIAL_EMAIL', ''),
            gemini_api_key=env.get('GEMINI_API_KEY', ''),
            port=port,
        )
