"""Generate self-contained, playable HTML artifacts from puzzle state."""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel

from ..puzzles.models import PayloadModel, PuzzleType
from ..puzzles.registry import get_variant

logger = logging.getLogger(__name__)

MODULE_DIR = Path(__file__).parent
TEMPLATE_PATH = MODULE_DIR / "templates" / "player.html"
ASSETS_DIR = MODULE_DIR / "assets"

_STATE_SCRIPT = re.compile(
    r'<script type="application/json" id="puzzle-state">(.*?)</script>', re.DOTALL
)
_TYPE_META = re.compile(r'<meta name="puzzle-type" content="([A-Z_]+)"\s*/?>')


class Artifact(BaseModel):
    """A rendered, standalone puzzle document."""
    variant: PuzzleType
    filename: str
    html: str


def artifact_filename(variant_tag: Union[PuzzleType, str]) -> str:
    """File name derived from the variant tag, e.g. ``word-search-puzzle.html``."""
    spec = get_variant(variant_tag)
    return f"{spec.tag.value.lower().replace('_', '-')}-puzzle.html"


def serialize_state(state: Dict[str, Any]) -> str:
    """
    Encode state as JSON safe to inline inside a <script> element.

    Markup-significant characters are written as \\u escapes, which JSON
    parsers turn back into the same characters.
    """
    text = json.dumps(state, indent=2, ensure_ascii=False)
    return text.replace("<", "\\u003c").replace(">", "\\u003e").replace("&", "\\u0026")


def _read(path: Path) -> str:
    with open(path, encoding="utf-8") as f:
        return f.read()


def build_artifact(variant_tag: Union[PuzzleType, str], state: Union[Dict[str, Any], PayloadModel]) -> Artifact:
    """
    Combine a state snapshot with the player for its variant.

    The snapshot is validated against the variant's state model and then
    embedded exactly as given, so parsing it back out of the artifact yields
    an equal dict.

    Args:
        variant_tag: PuzzleType or its string value
        state: Snapshot as returned by a puzzle's export_state()

    Returns:
        The rendered Artifact

    Raises:
        UnknownVariant: If the tag has no dispatch entry
        pydantic.ValidationError: If the snapshot does not match the variant
    """
    spec = get_variant(variant_tag)
    if isinstance(state, PayloadModel):
        state = state.to_payload()
    spec.state_cls.model_validate(state)

    from .. import __version__

    template = _read(TEMPLATE_PATH)
    replacements = {
        "{{ inline_css }}": _read(ASSETS_DIR / "styles.css"),
        "{{ runtime_js }}": _read(ASSETS_DIR / "runtime.js"),
        "{{ secret_js }}": _read(ASSETS_DIR / "secret.js"),
        "{{ player_js }}": _read(ASSETS_DIR / "players" / spec.player_script),
        "{{ bootstrap_js }}": _read(ASSETS_DIR / "bootstrap.js"),
        "{{ player_name }}": spec.player_name,
        "{{ puzzle_type }}": spec.tag.value,
        "{{ puzzle_title }}": spec.title,
        "{{ version }}": __version__,
    }

    html = template
    for placeholder, value in replacements.items():
        html = html.replace(placeholder, value)
    # Substitute the payload last so nothing inside it is treated as a placeholder
    html = html.replace("{{ puzzle_state_json }}", serialize_state(state))

    return Artifact(variant=spec.tag, filename=artifact_filename(spec.tag), html=html)


def export(variant_tag: Union[PuzzleType, str], state: Union[Dict[str, Any], PayloadModel]) -> Artifact:
    """Export a puzzle snapshot as a standalone artifact."""
    return build_artifact(variant_tag, state)


def export_puzzle(
    variant_tag: Union[PuzzleType, str],
    state: Union[Dict[str, Any], PayloadModel],
    output_dir: Union[str, Path] = ".",
    output_path: Optional[Union[str, Path]] = None,
) -> Path:
    """
    Export a puzzle snapshot and write it to disk.

    Args:
        variant_tag: PuzzleType or its string value
        state: Snapshot as returned by a puzzle's export_state()
        output_dir: Directory for the derived file name
        output_path: Explicit output file, overriding output_dir

    Returns:
        Path to the generated HTML file
    """
    artifact = build_artifact(variant_tag, state)
    path = Path(output_path) if output_path is not None else Path(output_dir) / artifact.filename

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(artifact.html)

    logger.info("Exported %s puzzle to %s", artifact.variant.value, path)
    return path


def extract_payload(html: str) -> Dict[str, Any]:
    """
    Parse the embedded state snapshot back out of an artifact.

    Raises:
        ValueError: If the document carries no puzzle state
    """
    match = _STATE_SCRIPT.search(html)
    if not match:
        raise ValueError("No puzzle state found in document")
    return json.loads(match.group(1))


def extract_variant(html: str) -> PuzzleType:
    """
    Read the variant tag recorded in an artifact.

    Raises:
        ValueError: If the document carries no puzzle type
    """
    match = _TYPE_META.search(html)
    if not match:
        raise ValueError("No puzzle type found in document")
    return PuzzleType(match.group(1))
