from __future__ import annotations

import logging

from .lookups import AMBITION_IDS, UNKNOWN_AMBITION_PODIUM, marker_label

logger = logging.getLogger(__name__)


def compute_podium(ranking: list[int]) -> list[list[int]]:
    """Compute `[winners, runners_up]` player indices for one ambition.

    Tie rules:
    - A tie for first voids first place; every player sharing the top value
      is listed as a runner-up instead.
    - A tie for second (with a clear winner) leaves runners-up empty.

    Indices come from the first occurrence of each value in `ranking`.
    """
    if not ranking:
        return [[], []]

    ordered = sorted(ranking, reverse=True)
    first = ordered[0]
    second = ordered[1] if len(ordered) >= 2 else None
    third = ordered[2] if len(ordered) >= 3 else -1

    tied_for_first = first == second
    tied_for_second = second == third and not tied_for_first

    if tied_for_first:
        return [[], [index for index, value in enumerate(ranking) if value == first]]

    winners = [ranking.index(first)]
    if tied_for_second or second is None:
        return [winners, []]
    return [winners, [ranking.index(second)]]


class AmbitionsMixin:
    """Ambition projections: rankings, podiums and declared markers."""

    def get_ambition_ranking(self, ambition_id: str) -> list[int]:
        """Ranking vector for an ambition.

        Ambitions missing from the export (e.g. blightkin outside the
        campaign) rank every player at zero, so the overlay can always index
        by player.
        """
        ambition = self._find_ambition(ambition_id)
        if ambition is None:
            return [0] * self.player_count
        return list(ambition.get("ranking") or [])

    def get_ambition_podium(self, ambition_id: str) -> list[list[int]]:
        """`[winners, runners_up]` for an ambition, or `[[-1], [-1]]` if absent."""
        ambition = self._find_ambition(ambition_id)
        if ambition is None:
            logger.warning("Ambition %r not present in export; podium unavailable", ambition_id)
            return [list(place) for place in UNKNOWN_AMBITION_PODIUM]
        return compute_podium(list(ambition.get("ranking") or []))

    def get_ambition_declarations(self, ambition_id: str) -> list[str]:
        """Labels of the markers declared on an ambition (e.g. "firstGold").

        Markers outside the known power values are dropped.
        """
        ambition = self._find_ambition(ambition_id)
        if ambition is None:
            logger.debug("Ambition %r not present in export; no declarations", ambition_id)
            return []

        labels: list[str] = []
        for marker in ambition.get("declared") or []:
            label = marker_label(marker)
            if label is None:
                logger.warning(
                    "Dropping unknown ambition marker %r declared on %s", marker, ambition_id
                )
                continue
            labels.append(label)
        return labels

    def get_all_ambition_rankings(self) -> dict[str, list[int]]:
        return {ambition_id: self.get_ambition_ranking(ambition_id) for ambition_id in AMBITION_IDS}

    def get_all_ambition_podiums(self) -> dict[str, list[list[int]]]:
        return {ambition_id: self.get_ambition_podium(ambition_id) for ambition_id in AMBITION_IDS}

    def get_all_ambition_declarations(self) -> dict[str, list[str]]:
        return {
            ambition_id: self.get_ambition_declarations(ambition_id) for ambition_id in AMBITION_IDS
        }
