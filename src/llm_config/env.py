# src/llm_config/env.py

"""Environment-file helpers.

Thin wrappers over python-dotenv. ``load_env_file`` mutates the process
environment the way a startup script would; ``read_env`` builds a plain
mapping for ``load_llm_config`` without touching ``os.environ``.
"""

import logging
import os
from pathlib import Path

from dotenv import dotenv_values, find_dotenv, load_dotenv

logger = logging.getLogger(__name__)


def _locate(path: str | Path | None) -> str:
    if path is not None:
        return str(path)
    return find_dotenv(usecwd=True)


def load_env_file(path: str | Path | None = None, *, override: bool = False) -> bool:
    """Populate ``os.environ`` from a .env file.

    Args:
        path: File to read. Searched upwards from the working directory if None.
        override: Let file values replace variables already set.

    Returns:
        True if a file was found and defined at least one variable.
    """
    dotenv_path = _locate(path)
    if not dotenv_path:
        logger.debug("No .env file found")
        return False

    loaded = load_dotenv(dotenv_path, override=override)
    logger.debug("Loaded env file %s (override=%s): %s", dotenv_path, override, loaded)
    return loaded


def read_env(path: str | Path | None = None) -> dict[str, str]:
    """Return .env file values overlaid by the process environment.

    Keys declared without a value in the file are dropped.
    """
    dotenv_path = _locate(path)
    file_values: dict[str, str] = {}
    if dotenv_path:
        file_values = {
            k: v for k, v in dotenv_values(dotenv_path).items() if v is not None
        }
        logger.debug("Read %d values from %s", len(file_values), dotenv_path)

    return {**file_values, **os.environ}
