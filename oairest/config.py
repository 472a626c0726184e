import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .core.errors import InvalidArgumentError
from .core.transport import API_BASE


def _env(name: str, default: str = None) -> Optional[str]:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return value.strip()


class Config:
    """Runtime settings read from the environment and an optional .env file."""

    API_KEY: Optional[str] = None
    ORGANIZATION: Optional[str] = None
    BASE_URL: str = API_BASE
    TIMEOUT: Optional[float] = None
    DEFAULT_MODEL = "gpt-4o-mini"
    ACTIVE_MODEL: Optional[str] = None
    LOG_LEVEL = "WARNING"
    CODE_THEME = "monokai"

    @classmethod
    def load(cls, dotenv_path: str = None) -> None:
        """Populate the class attributes. Existing environment variables win over .env."""
        load_dotenv(dotenv_path or find_dotenv(usecwd=True))
        cls.API_KEY = _env("OPENAI_API_KEY")
        cls.ORGANIZATION = _env("OPENAI_ORG_ID")
        cls.BASE_URL = _env("OPENAI_BASE_URL", API_BASE)
        cls.TIMEOUT = cls._parse_timeout(_env("OPENAI_TIMEOUT"))
        cls.ACTIVE_MODEL = _env("OPENAI_MODEL")
        cls.LOG_LEVEL = _env("OAIREST_LOG_LEVEL", "WARNING").upper()

    @staticmethod
    def _parse_timeout(value: Optional[str]) -> Optional[float]:
        if value is None:
            return None
        try:
            timeout = float(value)
        except ValueError:
            raise InvalidArgumentError(f"OPENAI_TIMEOUT must be a number of seconds, got {value!r}")
        if timeout <= 0:
            raise InvalidArgumentError("OPENAI_TIMEOUT must be positive")
        return timeout

    @classmethod
    def get_model(cls) -> str:
        return cls.ACTIVE_MODEL or cls.DEFAULT_MODEL
