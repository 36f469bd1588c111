"""
Runtime configuration from the environment

A .env file in the working directory is loaded for local development;
variables already set in the environment take precedence.
"""

import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_INPUT_ENCODING = 'hk'
DEFAULT_OUTPUT_ENCODING = 'slp1'
DEFAULT_BATCH_WORKERS = 4
DEFAULT_PORT = 5000


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name, '').strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{value}'") from None


def _bool_env(name: str, default: bool = False) -> bool:
    value = os.getenv(name, '').strip().lower()
    if not value:
        return default
    return value in ('1', 'true', 'yes', 'on')


INPUT_ENCODING = os.getenv('PRAKRIT_INPUT_ENCODING', DEFAULT_INPUT_ENCODING)
OUTPUT_ENCODING = os.getenv('PRAKRIT_OUTPUT_ENCODING', DEFAULT_OUTPUT_ENCODING)
BATCH_WORKERS = max(1, _int_env('PRAKRIT_BATCH_WORKERS', DEFAULT_BATCH_WORKERS))

PORT = _int_env('PORT', DEFAULT_PORT)
FLASK_DEBUG = _bool_env('FLASK_DEBUG')

# Turso database configuration
TURSO_DATABASE_URL = os.getenv('TURSO_DATABASE_URL', '')
TURSO_AUTH_TOKEN = os.getenv('TURSO_AUTH_TOKEN', '')
