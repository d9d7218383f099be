#!/usr/bin/env python3
"""
K8SPLIT SPLITTER - Document Boundaries
--------------------------------------
Cuts a raw composite manifest into per-document byte chunks.
The separator is a line made only of '---', matched with the line
break convention detected for the file.

Author: K8Split Team
Date: 2026-10-18
"""

import sys
from typing import List, Optional

from k8split.core.models import LineEnding


def detect_line_ending(raw: bytes, platform: Optional[str] = None,
                       from_content: bool = False) -> LineEnding:
    """
    Picks the line break used to build the separator.

    By default CRLF is only honoured when running on Windows, matching the
    historical behaviour of the tool. With from_content=True the platform
    is ignored and the file content alone decides.
    """
    has_crlf = b"\r\n" in raw
    if from_content:
        return LineEnding.CRLF if has_crlf else LineEnding.LF

    platform = platform or sys.platform
    if has_crlf and platform == "win32":
        return LineEnding.CRLF
    return LineEnding.LF


def split_documents(raw: bytes, line_ending: LineEnding) -> List[bytes]:
    """
    Splits raw bytes on the separator. A trailing separator does not
    produce an empty extra document.
    """
    parts = raw.split(line_ending.separator)
    if parts[-1] == b"":
        parts.pop()
    return parts
