"""Generating sub-state shared by the provider-backed variants."""

import logging
from typing import Any, Callable, Optional, TypeVar

from ..errors import GenerationFailure, GenerationInProgress, PhaseError
from .models import Phase

logger = logging.getLogger(__name__)

T = TypeVar("T")


def run_generation(puzzle: Any, kind: str, fetch: Callable[[], Any], coerce: Callable[[Any], T]) -> T:
    """
    Fetch content for a puzzle while it sits in the generating phase.

    The puzzle moves to GENERATING for the duration of the request, so a
    second request arriving meanwhile is rejected. On failure the puzzle
    goes back to CONFIGURING with nothing committed; on success it is left
    in GENERATING for the caller to commit the content and start play.

    Raises:
        GenerationInProgress: If a request is already outstanding
        PhaseError: If the puzzle is past configuration
        GenerationFailure: If the provider returned nothing usable
    """
    if puzzle.phase == Phase.GENERATING:
        raise GenerationInProgress(f"A {kind} is already being generated")
    if puzzle.phase != Phase.CONFIGURING:
        raise PhaseError(f"Cannot generate a {kind} once play has started")

    puzzle.phase = Phase.GENERATING
    content: Optional[T] = None
    try:
        raw = fetch()
        if raw is not None:
            content = coerce(raw)
    except Exception as e:
        puzzle.phase = Phase.CONFIGURING
        logger.warning("Unusable %s content: %s", kind, e)
        raise GenerationFailure(f"Failed to generate {kind}. Please try again.") from e

    if content is None:
        puzzle.phase = Phase.CONFIGURING
        raise GenerationFailure(f"Failed to generate {kind}. Please try again.")
    return content
