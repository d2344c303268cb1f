"""
config.py — Settings
=====================
Everything tunable comes from the environment, optionally via a .env
file in the working directory.  main.py applies Config to the Flask app.
"""

import os
import secrets
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _int_list(raw: str) -> List[int]:
    return [int(part) for part in raw.split(",") if part.strip()]


class Config:
    SECRET_KEY          = os.getenv("FLASK_SECRET") or secrets.token_hex(32)

    # API_KEY is the older name for the same credential
    GEMINI_API_KEY      = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY", "")
    GEMINI_MODEL        = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
    QUIZ_QUESTION_COUNT = int(os.getenv("QUIZ_QUESTION_COUNT", "20"))

    STEP_DELAY          = float(os.getenv("STEP_DELAY", "0.6"))
    INITIAL_ARRAY       = _int_list(os.getenv("INITIAL_ARRAY", "45,9,78,23,12,60,31,55"))

    # per-browser states held in memory; least recently used dropped first
    MAX_SESSIONS        = int(os.getenv("MAX_SESSIONS", "500"))

    LOG_LEVEL           = os.getenv("LOG_LEVEL", "INFO").upper()
