#!/usr/bin/env python3
"""
K8SPLIT EXTRACTOR - Resource Identity
-------------------------------------
Parses one document chunk and pulls out the (kind, name, namespace)
triple that names its output file.

Extraction never raises: it returns an Extraction that either holds
the identity or names the field path that could not be resolved.

Author: K8Split Team
Date: 2026-10-18
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from k8split.core.errors import DocumentParseError
from k8split.core.models import ResourceIdentity

NAMESPACE_KIND = "Namespace"


@dataclass(frozen=True)
class Extraction:
    """Result of an identity extraction attempt."""
    identity: Optional[ResourceIdentity] = None
    missing: Optional[str] = None  # Dotted path of the failing field

    @property
    def ok(self) -> bool:
        return self.identity is not None


def parse_document(chunk: bytes, index: int) -> Optional[Dict[str, Any]]:
    """
    Loads a chunk as a YAML mapping. Returns None for a blank document
    (nothing but whitespace/comments, or an empty mapping).

    Only the first YAML document of the chunk is read; anything after an
    embedded '---' is kept in the written bytes but never parsed.
    Repeated mapping keys are accepted, the first value is kept.
    """
    yaml = YAML(typ='safe')
    yaml.allow_duplicate_keys = True
    try:
        text = chunk.decode("utf-8-sig")
        data = next(iter(yaml.load_all(text)), None)
    except UnicodeDecodeError as e:
        raise DocumentParseError(index, f"invalid UTF-8 content ({e})") from e
    except YAMLError as e:
        raise DocumentParseError(index, str(e)) from e

    if data is None:
        return None
    if not isinstance(data, dict):
        raise DocumentParseError(index, f"expected a mapping at the top level, got {type(data).__name__}")
    if not data:
        return None
    return data


def _string_field(mapping: Dict[str, Any], key: str) -> Optional[str]:
    value = mapping.get(key)
    return value if isinstance(value, str) else None


def extract_identity(document: Dict[str, Any]) -> Extraction:
    """Resolves kind, metadata.name and metadata.namespace."""
    kind = _string_field(document, "kind")
    if kind is None:
        return Extraction(missing="kind")

    metadata = document.get("metadata")
    if not isinstance(metadata, dict):
        return Extraction(missing="metadata")

    name = _string_field(metadata, "name")
    if name is None:
        return Extraction(missing="metadata.name")

    namespace = _string_field(metadata, "namespace")
    if namespace is None:
        # A Namespace lives in itself
        if kind != NAMESPACE_KIND:
            return Extraction(missing="metadata.namespace")
        namespace = name

    return Extraction(identity=ResourceIdentity(kind=kind, name=name, namespace=namespace))
