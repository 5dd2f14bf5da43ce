"""
Shared utilities for the Dealership Leaderboard.

This module provides common functions used across multiple modules
to avoid code duplication.
"""

import logging
import shutil
import tempfile
from pathlib import Path


# --- Logging Setup ---
def setup_logging(name: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (usually __name__ from the calling module)
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


# --- File Operations ---
def atomic_write_text(text: str, path: Path, encoding: str = "utf-8") -> None:
    """
    Write text to a file atomically using a temporary file.

    This prevents a half-written page from being served if the write is
    interrupted.

    Args:
        text: Content to write
        path: Destination path
        encoding: Text encoding (default: utf-8)
    """
    logger = setup_logging(__name__)

    # Ensure parent directory exists
    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        with tempfile.NamedTemporaryFile(
            mode='w',
            encoding=encoding,
            delete=False,
            suffix=path.suffix or '.tmp',
            dir=path.parent  # Same filesystem for atomic move
        ) as tmp:
            tmp.write(text)
            tmp_path = Path(tmp.name)

        # Atomic move (rename) to final destination
        shutil.move(str(tmp_path), str(path))
        logger.debug(f"Atomically wrote {len(text)} characters to {path}")

    except Exception:
        # Clean up temp file if it exists
        if 'tmp_path' in locals() and tmp_path.exists():
            tmp_path.unlink()
        raise


__all__ = [
    # Logging
    'setup_logging',
    # File operations
    'atomic_write_text',
]
