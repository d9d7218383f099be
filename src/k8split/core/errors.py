#!/usr/bin/env python3
"""
K8SPLIT ERRORS
--------------
Every fatal condition of a split run. Any of these stops the whole
batch; files written before the failure are left in place.

Author: K8Split Team
Date: 2026-10-18
"""


class K8SplitError(Exception):
    """Base class for all fatal split errors."""


class UsageError(K8SplitError):
    """No input file was given, or it does not exist."""


class OutputDirectoryError(K8SplitError):
    """The output directory is missing or is not a directory."""


class InputReadError(K8SplitError):
    """The input file exists but could not be read."""


class DocumentParseError(K8SplitError):
    """A chunk could not be parsed as a YAML mapping."""

    def __init__(self, index: int, reason: str):
        self.index = index
        self.reason = reason
        super().__init__(f"error loading yaml for the {index}'th document in this file: {reason}")


class SchemaError(K8SplitError):
    """A required identity field is missing or has the wrong type."""

    def __init__(self, index: int, field: str):
        self.index = index
        self.field = field
        super().__init__(f"no `{field}` field specified for the {index}'th document in this file.")


class WriteError(K8SplitError):
    """An output file could not be written."""
