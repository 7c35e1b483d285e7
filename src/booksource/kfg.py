#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/kfg.py
"""Reading and writing KFG configuration text.

KFG is the configuration language used for package descriptors, document
metadata blocks and the ``kfg`` output format. Its indentation-based
mapping/list syntax is the YAML subset, so this module is a thin layer over
PyYAML's safe loader and dumper that reports failures as booksource errors.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from booksource.constants import SOURCE_ENCODING
from booksource.exceptions import ConfigSyntaxError, SourceReadError

logger = logging.getLogger(__name__)


def parse(text: str, file_path: Optional[str] = None) -> Any:
    """Parse KFG text into Python data.

    Parameters
    ----------
    text : str
        KFG source text
    file_path : str, optional
        File the text came from, used in error messages

    Returns
    -------
    Any
        Parsed data (``None`` for empty text)

    Raises
    ------
    ConfigSyntaxError
        If the text is not valid KFG

    """
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        where = f" in {file_path}" if file_path else ""
        raise ConfigSyntaxError(f"Invalid KFG{where}: {e}", file_path=file_path, original_error=e) from e


def parse_json(text: str, file_path: Optional[str] = None) -> Any:
    """Parse JSON text, reporting failures as :class:`ConfigSyntaxError`."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        where = f" in {file_path}" if file_path else ""
        raise ConfigSyntaxError(f"Invalid JSON{where}: {e}", file_path=file_path, original_error=e) from e


def load(path: Path | str, display_path: Optional[str] = None) -> Any:
    """Read and parse a KFG or JSON file.

    The syntax is picked from the file extension: ``.json`` files go through
    the JSON parser, everything else through the KFG parser.

    Parameters
    ----------
    path : Path or str
        File to read
    display_path : str, optional
        Path to report in error messages (defaults to ``path``)

    Raises
    ------
    SourceReadError
        If the file cannot be read
    ConfigSyntaxError
        If its content does not parse

    """
    path = Path(path)
    shown = display_path or str(path)
    try:
        text = path.read_text(encoding=SOURCE_ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(shown, e) from e

    logger.debug(f"Loaded {len(text)} characters from {path}")
    if path.suffix == ".json":
        return parse_json(text, file_path=shown)
    return parse(text, file_path=shown)


def stringify(data: Any) -> str:
    """Serialize Python data as KFG text.

    Keys keep their insertion order and non-ASCII text is written as-is.
    """
    return yaml.safe_dump(
        data,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
        indent=2,
    )
