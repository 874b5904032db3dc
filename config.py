# config.py
import os
import logging

from dotenv import load_dotenv

load_dotenv()

# -----------------------------
# Quiz / simulation defaults
# -----------------------------
DEFAULT_QUESTION_COUNT = int(os.getenv("DEFAULT_QUESTION_COUNT", "5"))
DEFAULT_TRIALS = int(os.getenv("DEFAULT_TRIALS", "100"))
ANSWER_TOLERANCE = float(os.getenv("ANSWER_TOLERANCE", "0.001"))
DISPLAY_DIGITS = int(os.getenv("DISPLAY_DIGITS", "3"))
ODDS_CHART_CAP = float(os.getenv("ODDS_CHART_CAP", "20"))

# -----------------------------
# Entrypoints
# -----------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8080"))


def configure_logging(level: str = None):
    """Set up root logging once for the CLI / server entrypoints."""
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
