"""Recurring-task occurrence generation.

Pure functions over immutable ``PatternConfig`` values: validate a rule,
expand it into dated instances, describe it for display.
"""

from taskrecur.core.end_conditions import SAFETY_HORIZON_YEARS, should_stop
from taskrecur.core.fields import from_fields, to_fields
from taskrecur.core.formatter import describe, format_end_condition, format_pattern
from taskrecur.core.generator import next_date
from taskrecur.core.instances import (
    DEFAULT_MAX_INSTANCES,
    generate,
    next_occurrence,
    summarize,
)
from taskrecur.core.presets import default_pattern_config, get_preset, presets
from taskrecur.core.validator import (
    ValidationResult,
    complexity_score,
    ensure_valid,
    pattern_warnings,
    validate,
)

__all__ = [
    "DEFAULT_MAX_INSTANCES",
    "SAFETY_HORIZON_YEARS",
    "ValidationResult",
    "complexity_score",
    "default_pattern_config",
    "describe",
    "ensure_valid",
    "format_end_condition",
    "format_pattern",
    "from_fields",
    "generate",
    "get_preset",
    "next_date",
    "next_occurrence",
    "pattern_warnings",
    "presets",
    "should_stop",
    "summarize",
    "to_fields",
    "validate",
]
