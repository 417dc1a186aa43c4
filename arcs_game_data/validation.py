"""Shape and semantic validation for Arcs exports.

The transformer assumes a well-formed export. This module is the caller-side
gate: `validate_export()` checks the shape with pydantic and raises
`MalformedExportError`, and `ExportValidator` reports softer problems (length
mismatches, unknown markers, missing fate cards) without rejecting the export.

Models are strict: the transformer reads the original dict, so a value that
only passes after type coercion ("false", "4") must be rejected here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .lookups import (
    AMBITION_IDS,
    FATE_MARKER,
    PLAYER_COLORS,
    fate_name,
    marker_label,
    normalize_token,
)


class MalformedExportError(ValueError):
    """Raised when an export is missing required collections or has bad types."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = errors or []


class RawPlayer(BaseModel):
    """One entry of the export's `players` list."""

    model_config = ConfigDict(extra="ignore", strict=True)

    name: str | None = None
    color: str | None = None
    initiative: bool = False
    power: int = 0
    objective: int | None = None
    resources: list[str | None] = Field(default_factory=list)
    outrage: Any = None
    cities: int = 0
    spaceports: int = 0
    ships: int = 0
    agents: int = 0
    cards: list[str] = Field(default_factory=list)
    court: list[str] = Field(default_factory=list)
    titles: list[str] = Field(default_factory=list)


class RawAmbition(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)

    id: str
    declared: list[int | str] = Field(default_factory=list)
    ranking: list[int] = Field(default_factory=list)


class RawCourtCard(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)

    id: str
    influence: list[int] = Field(default_factory=list)


class RawExport(BaseModel):
    """Top-level export written by the Tabletop Playground mod."""

    model_config = ConfigDict(extra="ignore", strict=True)

    campaign: bool = False
    players: list[RawPlayer]
    ambitions: list[RawAmbition]
    court: list[RawCourtCard]
    discard: list[str] = Field(default_factory=list)
    edicts: list[str] = Field(default_factory=list)
    laws: list[str] = Field(default_factory=list)


def validate_export(raw: Any) -> RawExport:
    """Check that `raw` has the shape the transformer expects.

    Returns:
        The parsed `RawExport` model.

    Raises:
        MalformedExportError: with one `location: message` entry per problem.
    """
    if not isinstance(raw, dict):
        raise MalformedExportError(
            f"Export must be a JSON object, got {type(raw).__name__}",
            [f"<root>: expected object, got {type(raw).__name__}"],
        )
    try:
        return RawExport.model_validate(raw)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        ]
        raise MalformedExportError(
            f"Malformed export ({len(errors)} error(s)): " + "; ".join(errors), errors
        ) from e


@dataclass
class ValidationResult:
    """Outcome of the semantic checks on one export."""

    valid: bool = True
    issues: list[dict] = field(default_factory=list)
    warnings: list[dict] = field(default_factory=list)
    checks_passed: int = 0
    checks_failed: int = 0

    def add_issue(self, check: str, message: str, details: dict | None = None):
        """Record a problem that makes part of the output meaningless."""
        issue = {"check": check, "message": message}
        if details:
            issue["details"] = details
        self.issues.append(issue)
        self.checks_failed += 1
        self.valid = False

    def add_warning(self, check: str, message: str, details: dict | None = None):
        """Record something odd that the transformer papers over."""
        warning = {"check": check, "message": message}
        if details:
            warning["details"] = details
        self.warnings.append(warning)

    def add_pass(self):
        self.checks_passed += 1

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "issues": self.issues,
            "warnings": self.warnings,
            "summary": {
                "checks_passed": self.checks_passed,
                "checks_failed": self.checks_failed,
                "warnings": len(self.warnings),
            },
        }


class ExportValidator:
    """Semantic checks over an export that already passed `validate_export`.

    Checks:
    - ambition ids are known and unique
    - ranking and influence vectors line up with the player list
    - declared markers, color codes and fate cards are recognizable
    """

    def __init__(self, raw: dict[str, Any]):
        self.raw = raw
        self.players: list[dict[str, Any]] = raw.get("players") or []

    def validate(self) -> ValidationResult:
        result = ValidationResult()
        self._check_ambitions(result)
        self._check_court(result)
        self._check_players(result)
        return result

    def _check_ambitions(self, result: ValidationResult) -> None:
        seen: set[str] = set()
        for ambition in self.raw.get("ambitions") or []:
            ambition_id = ambition.get("id")

            if ambition_id not in AMBITION_IDS:
                result.add_issue(
                    "ambition_id",
                    f"Unknown ambition id {ambition_id!r}",
                    {"known": list(AMBITION_IDS)},
                )
            elif ambition_id in seen:
                result.add_issue(
                    "ambition_unique",
                    f"Ambition {ambition_id!r} appears more than once; only the first is used",
                )
            else:
                result.add_pass()
            seen.add(ambition_id)

            ranking = ambition.get("ranking") or []
            if len(ranking) != len(self.players):
                result.add_issue(
                    "ranking_length",
                    f"Ranking for {ambition_id!r} has {len(ranking)} entries "
                    f"for {len(self.players)} players",
                )
            else:
                result.add_pass()

            unknown = [
                marker
                for marker in ambition.get("declared") or []
                if marker_label(marker) is None
            ]
            if unknown:
                result.add_warning(
                    "declared_markers",
                    f"Unknown markers declared on {ambition_id!r} will be dropped",
                    {"markers": unknown},
                )

    def _check_court(self, result: ValidationResult) -> None:
        for card in self.raw.get("court") or []:
            influence = card.get("influence") or []
            if len(influence) != len(self.players):
                result.add_issue(
                    "influence_length",
                    f"Court card {card.get('id')!r} has {len(influence)} influence entries "
                    f"for {len(self.players)} players",
                )
            else:
                result.add_pass()

    def _check_players(self, result: ValidationResult) -> None:
        for index, player in enumerate(self.players):
            color = player.get("color")
            if color not in PLAYER_COLORS:
                result.add_warning(
                    "player_color",
                    f"Player {index} has unknown color {color!r}; shown as white",
                )

            fates = [card for card in player.get("cards") or [] if FATE_MARKER in card]
            if not fates:
                result.add_warning(
                    "player_fate",
                    f"Player {index} holds no fate card; defaulting to Steward",
                )
            elif len(fates) > 1:
                result.add_warning(
                    "player_fate",
                    f"Player {index} holds {len(fates)} fate cards; using {fates[0]!r} "
                    f"({fate_name(normalize_token(fates[0]))})",
                    {"cards": fates},
                )
