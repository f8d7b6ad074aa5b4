"""
Application Constants and Configuration Values

This module contains centralized configuration values for the entire application.
Environment variables override the defaults below; they are read when a request
is made so that a .env file loaded at startup is honoured.
"""
from pathlib import Path
import os

# Application paths
APP_DIR = Path(__file__).parent.parent
ROOT_DIR = APP_DIR.parent

# OpenRouter configuration
DEFAULT_OPENROUTER_URL = "https://openrouter.ai/api/v1/chat/completions"
DEFAULT_OPENROUTER_MODEL_NAME = "google/gemini-2.0-flash-001"
DEFAULT_OPENROUTER_TIMEOUT_SECONDS = 60.0
DEFAULT_OPENROUTER_TEMPERATURE = 0.0

# Separator between "abbreviation: value" pairs in the results string
RESULTS_SEPARATOR = " | "


def get_openrouter_api_key() -> str:
    return os.getenv("OPENROUTER_API_KEY", "")


def get_openrouter_url() -> str:
    return os.getenv("OPENROUTER_URL", DEFAULT_OPENROUTER_URL)


def get_openrouter_model_name() -> str:
    return os.getenv("OPENROUTER_MODEL_NAME", DEFAULT_OPENROUTER_MODEL_NAME)


def get_openrouter_timeout() -> float:
    return float(os.getenv("OPENROUTER_TIMEOUT_SECONDS", DEFAULT_OPENROUTER_TIMEOUT_SECONDS))


def get_openrouter_temperature() -> float:
    return float(os.getenv("OPENROUTER_TEMPERATURE", DEFAULT_OPENROUTER_TEMPERATURE))
