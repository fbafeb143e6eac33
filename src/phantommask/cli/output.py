# SPDX-License-Identifier: MIT
# Copyright (c) 2026 PhantomMask Contributors

"""Output formatting for CLI commands.

Handles JSON vs human-readable text output.
"""

from __future__ import annotations

import json
import sys
from typing import Any


def output_result(data: dict[str, Any], text_lines: list[str], as_json: bool = False) -> None:
    """Print a command result.

    If as_json is set, pretty-print data as JSON; otherwise print the
    prepared text lines.
    """
    if as_json:
        print(json.dumps(data, indent=2, default=str))
    else:
        for line in text_lines:
            print(line)


def output_error(message: str) -> None:
    """Print error message to stderr."""
    print(f"Error: {message}", file=sys.stderr)


def rule(char: str = "=", width: int = 60) -> str:
    return char * width
