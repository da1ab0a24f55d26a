# config.py
"""
Central settings for the gita command line tool. Everything that can be
tuned without touching code (data file, wrap width, log level) lives here
and is read from the environment, optionally via a .env file in the
directory the command is run from.
"""

import os
import sys
from pathlib import Path
from dotenv import find_dotenv, load_dotenv

PACKAGE_DIR = Path(__file__).resolve().parent

# --- Dataset ---
# The corpus ships inside the package. GITA_DATA_PATH points at another file
# with the same layout (e.g. the full 700 verse dump).
BUNDLED_DATA_PATH = PACKAGE_DIR / "data" / "gita.json"

# --- Display ---
DEFAULT_DISPLAY_WIDTH = 70

# --- Logging ---
# Log records go to stderr, the verse itself goes to stdout.
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

# --- Languages ---
# Chapter meaning/summary are stored per language in the dataset.
LANGUAGES = ("en", "hi")
DEFAULT_LANGUAGE = "en"


def _positive_int_env(name, default):
    # reads an integer setting, warning and falling back on junk values
    raw = os.getenv(name, "")
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        print(f"WARNING: {name}={raw!r} is not an integer, using {default}.", file=sys.stderr)
        return default
    if value <= 0:
        print(f"WARNING: {name} must be positive, using {default}.", file=sys.stderr)
        return default
    return value


def load_settings():
    """
    (Re)reads the settings below from the environment. A .env file is searched
    for from the current working directory upwards, not from the package
    directory, since the command can be run from anywhere. Variables already
    set in the environment win over the .env file.
    """
    global DATA_PATH, DISPLAY_WIDTH, LOG_LEVEL

    load_dotenv(find_dotenv(usecwd=True))

    DATA_PATH = Path(os.getenv("GITA_DATA_PATH") or BUNDLED_DATA_PATH)
    DISPLAY_WIDTH = _positive_int_env("GITA_DISPLAY_WIDTH", DEFAULT_DISPLAY_WIDTH)
    LOG_LEVEL = os.getenv("GITA_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


DATA_PATH = BUNDLED_DATA_PATH
DISPLAY_WIDTH = DEFAULT_DISPLAY_WIDTH
LOG_LEVEL = DEFAULT_LOG_LEVEL

load_settings()
