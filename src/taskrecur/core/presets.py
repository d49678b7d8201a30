"""Catalog of canonical recurrence presets."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from taskrecur.exceptions import UnknownPresetError
from taskrecur.models.pattern import EndCondition, Frequency, PatternConfig, PatternKind

# Custom rules without a sensible frequency of their own default to weekly.
_DEFAULT_FREQUENCY = {
    PatternKind.DAILY: Frequency.DAILY,
    PatternKind.WEEKLY: Frequency.WEEKLY,
    PatternKind.MONTHLY: Frequency.MONTHLY,
    PatternKind.YEARLY: Frequency.YEARLY,
    PatternKind.CUSTOM: Frequency.WEEKLY,
}


class Preset(BaseModel):
    """A named starting point for a recurrence rule."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    config: PatternConfig


def default_pattern_config(kind: PatternKind | str) -> PatternConfig:
    """Return the default never-ending rule for *kind*, repeating every unit."""
    kind = PatternKind(kind)
    return PatternConfig(
        kind=kind,
        frequency=_DEFAULT_FREQUENCY[kind],
        end_condition=EndCondition.NEVER,
        interval=1,
    )


def _custom(frequency: Frequency, interval: int) -> PatternConfig:
    return PatternConfig(
        kind=PatternKind.CUSTOM,
        frequency=frequency,
        end_condition=EndCondition.NEVER,
        interval=interval,
    )


_PRESETS: tuple[Preset, ...] = (
    Preset(id="daily", name="Daily", config=default_pattern_config(PatternKind.DAILY)),
    Preset(
        id="weekdays",
        name="Weekdays (Mon-Fri)",
        config=_custom(Frequency.WEEKDAYS, 1),
    ),
    Preset(id="weekly", name="Weekly", config=default_pattern_config(PatternKind.WEEKLY)),
    Preset(id="biweekly", name="Bi-weekly", config=_custom(Frequency.BIWEEKLY, 2)),
    Preset(id="monthly", name="Monthly", config=default_pattern_config(PatternKind.MONTHLY)),
    Preset(id="quarterly", name="Quarterly", config=_custom(Frequency.QUARTERLY, 3)),
    Preset(id="yearly", name="Yearly", config=default_pattern_config(PatternKind.YEARLY)),
)

PRESET_IDS = [preset.id for preset in _PRESETS]


def presets() -> list[Preset]:
    """Return all presets in display order."""
    return list(_PRESETS)


def get_preset(preset_id: str) -> Preset:
    """Look up a preset by id (case-insensitive).

    Raises:
        UnknownPresetError: If no preset has this id
    """
    key = preset_id.strip().lower()
    for preset in _PRESETS:
        if preset.id == key:
            return preset
    raise UnknownPresetError(preset_id)
