"""Configuration management for retag."""

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

DEFAULT_OUTPUT_SUFFIX = "-edited"
DEFAULT_ID3_VERSION = 4
SUPPORTED_ID3_VERSIONS = (3, 4)


def eprint(*args, **kwargs):
    """Print to stderr."""
    print(*args, file=sys.stderr, **kwargs)


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


def load_config(env_file: Optional[str] = None) -> dict:
    """
    Load configuration from .env file.

    Args:
        env_file: Path to .env file. Defaults to .env in current directory.

    Returns:
        Dictionary of configuration values.
    """
    if env_file is None:
        env_file = ".env"

    env_path = Path(env_file)
    if env_path.exists():
        load_dotenv(dotenv_path=env_path)
        eprint(f"Loaded environment from {env_path.resolve()}")
    else:
        eprint(
            f"Warning: .env file not found at {env_path.resolve()} "
            "- falling back to process env."
        )

    raw_version = os.getenv("RETAG_ID3_VERSION", str(DEFAULT_ID3_VERSION)).strip()
    try:
        id3_version = int(raw_version)
    except ValueError:
        id3_version = None

    return {
        "output_suffix": os.getenv("RETAG_OUTPUT_SUFFIX", DEFAULT_OUTPUT_SUFFIX),
        "id3_version": id3_version,
        "no_color": _env_flag("RETAG_NO_COLOR"),
    }


def validate_config(config: dict) -> List[str]:
    """
    Validate configuration and return list of problems.

    Args:
        config: Configuration dictionary from load_config()

    Returns:
        List of human readable problems (empty if the config is usable).
    """
    problems = []

    if config.get("id3_version") not in SUPPORTED_ID3_VERSIONS:
        problems.append(
            "RETAG_ID3_VERSION must be one of "
            + ", ".join(str(v) for v in SUPPORTED_ID3_VERSIONS)
        )

    suffix = config.get("output_suffix")
    if not suffix or not suffix.strip():
        problems.append("RETAG_OUTPUT_SUFFIX must not be empty")
    elif "/" in suffix or "\\" in suffix:
        problems.append("RETAG_OUTPUT_SUFFIX must not contain path separators")

    return problems


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the package logger with a console handler."""
    logger = logging.getLogger("retag")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(console_handler)

    return logger
