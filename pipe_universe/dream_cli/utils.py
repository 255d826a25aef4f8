"""
Utility functions for the pipe dream command line.

Provides:
- Logging setup
- Run receipt generation and saving
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from dream_core.dream import Dream
from dream_core.generate import mitosis_word
from dream_core.order_hash import dream_set_hash
from dream_core.perm import Perm
from dream_core.words import lex_first_reduced_word
from dream_poly.schubert import Schubert


def setup_logger(
    name: str,
    log_file: Optional[Path] = None,
    level=logging.INFO,
    shared_with: Sequence[str] = (),
) -> logging.Logger:
    """
    Setup a named logger writing to stderr and, optionally, to a file.

    Args:
        name: Logger name
        log_file: Optional path to log file (parent directories are created)
        level: Logging level
        shared_with: Other logger names (e.g. "dream_core") that get the same
            level and the same handler objects, so one log file has one writer

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    # Clear any existing handlers
    logger.handlers = []

    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    for other in [name, *shared_with]:
        target = logging.getLogger(other)
        target.setLevel(level)
        target.handlers = list(logger.handlers)

    return logger


def build_receipt(
    perm: Perm, dreams: Sequence[Dream], schubert: Schubert
) -> Dict[str, Any]:
    """
    Build a receipt dictionary for one run.

    Args:
        perm: Input permutation
        dreams: Generated reduced dreams (generation order)
        schubert: Assembled polynomial

    Returns:
        Receipt dictionary (JSON-serializable)
    """
    return {
        "perm": perm.to_list(),
        "length": perm.length(),
        "word": lex_first_reduced_word(perm * Perm.long(len(perm))),
        "mitosis_word": mitosis_word(perm),
        "num_dreams": len(dreams),
        "num_terms": len(schubert.parts),
        "dream_set_hash": dream_set_hash(dreams),
        "polynomial": str(schubert),
        "timestamp": datetime.now().isoformat(),
    }


def save_receipt(receipt: Dict[str, Any], output_dir: Path) -> Path:
    """
    Save receipt to ``<output_dir>/<perm joined by '-'>.json``.

    Returns:
        Path of the written file
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    stem = "-".join(str(v) for v in receipt["perm"]) or "empty"
    receipt_file = output_dir / f"{stem}.json"

    with open(receipt_file, "w") as f:
        json.dump(receipt, f, indent=2)

    return receipt_file


__all__ = ["setup_logger", "build_receipt", "save_receipt"]
