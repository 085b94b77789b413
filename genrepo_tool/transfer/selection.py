"""Ranking and selection of download candidates."""

import logging
from typing import Callable, List, Optional, Sequence

from ..exceptions import SelectionAbortedError
from ..models.artifacts import Candidate

# Receives the ranked candidates and returns the chosen index, or None to cancel
Chooser = Callable[[Sequence[Candidate]], Optional[int]]


def rank_candidates(candidates: Sequence[Candidate]) -> List[Candidate]:
    """
    Order candidates newest first.

    Ties on the timestamp are broken by name, also descending, so the order is
    total and does not depend on the listing order.
    """
    return sorted(candidates, key=lambda c: (c.timestamp, c.name), reverse=True)


def select_candidate(ranked: Sequence[Candidate], chooser: Optional[Chooser] = None) -> Candidate:
    """
    Pick the candidate to download.

    Args:
        ranked: Candidates as returned by rank_candidates
        chooser: Interactive chooser; the first candidate is taken when omitted

    Returns:
        The selected candidate

    Raises:
        ValueError: If ranked is empty
        SelectionAbortedError: If the chooser cancels or returns an invalid index
    """
    if not ranked:
        raise ValueError("No candidates to select from")

    if chooser is None:
        logging.debug("Automatic selection: %s", ranked[0].name)
        return ranked[0]

    index = chooser(ranked)
    if index is None:
        raise SelectionAbortedError("Selection cancelled", operation="select artifact")
    if not 0 <= index < len(ranked):
        raise SelectionAbortedError(
            f"Index {index} is out of range (0-{len(ranked) - 1})", operation="select artifact"
        )

    logging.debug("Interactive selection: [%d] %s", index, ranked[index].name)
    return ranked[index]


__all__ = ["Chooser", "rank_candidates", "select_candidate"]
