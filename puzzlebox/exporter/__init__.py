"""Export puzzles as standalone, offline-playable HTML documents."""

from .generator import (
    Artifact,
    artifact_filename,
    build_artifact,
    export,
    export_puzzle,
    extract_payload,
    extract_variant,
    serialize_state,
)

__all__ = [
    "Artifact",
    "artifact_filename",
    "build_artifact",
    "export",
    "export_puzzle",
    "extract_payload",
    "extract_variant",
    "serialize_state",
]
