"""
Criteria selection state.

Translates between the ``criteria`` query parameter and the selection the
aggregator consumes:

- parameter absent or empty → ``None`` (every criterion enabled)
- ``none`` → explicit empty selection
- otherwise a comma-separated list of criterion keys

Selection updates never mutate their input.
"""

from typing import FrozenSet, Iterable, Optional, Union

from src.drug_harm.models import CriteriaSchema, HarmCategory, key_value

NONE_SENTINEL = "none"
ALL_CATEGORIES = "all"

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


def parse_criteria_param(param: Optional[Union[str, Iterable[str]]]) -> Optional[FrozenSet[str]]:
    """
    Selection encoded by a ``criteria`` query parameter.

    Accepts the raw comma-separated string or an already split list
    (``st.query_params.get_all``). Unknown keys are kept; they match nothing.
    """
    if param is None:
        return None
    if isinstance(param, str):
        parts = param.split(",")
    else:
        parts = [piece for item in param for piece in str(item).split(",")]
    keys = [part.strip() for part in parts if part.strip()]
    if not keys:
        return None
    if keys == [NONE_SENTINEL]:
        return frozenset()
    return frozenset(keys)


def encode_criteria_param(enabled: Optional[Iterable], schema: CriteriaSchema) -> Optional[str]:
    """
    Query parameter value for a selection.

    Returns None when the parameter should be cleared (every schema criterion
    enabled) and the ``none`` sentinel for an explicit empty selection. Keys
    are written in schema order so equal selections produce equal URLs.
    """
    if enabled is None:
        return None
    enabled = resolve_selection(enabled, schema)
    schema_keys = schema.all_keys
    if schema_keys and all(key in enabled for key in schema_keys):
        return None
    ordered = [key for key in schema_keys if key in enabled]
    ordered += sorted(key for key in enabled if key not in schema_keys)
    if not ordered:
        return NONE_SENTINEL
    return ",".join(ordered)


def resolve_selection(enabled: Optional[Iterable], schema: CriteriaSchema) -> FrozenSet[str]:
    """Concrete key set of a selection; None resolves to every schema key."""
    if enabled is None:
        return frozenset(schema.all_keys)
    return frozenset(key_value(key) for key in enabled)


def toggle_criterion(enabled: Optional[Iterable], key, schema: CriteriaSchema) -> FrozenSet[str]:
    """Selection with ``key`` flipped."""
    current = set(resolve_selection(enabled, schema))
    key = key_value(key)
    if key in current:
        current.discard(key)
    else:
        current.add(key)
    return frozenset(current)


def _category_keys(schema: CriteriaSchema, category) -> FrozenSet[str]:
    if category == ALL_CATEGORIES:
        return frozenset(schema.all_keys)
    if HarmCategory(category) == HarmCategory.USER:
        return frozenset(schema.user_keys)
    return frozenset(schema.others_keys)


def select_category(enabled: Optional[Iterable], category, schema: CriteriaSchema) -> Optional[FrozenSet[str]]:
    """Enable every criterion of ``category`` (user, others or all)."""
    if category == ALL_CATEGORIES:
        return None
    return resolve_selection(enabled, schema) | _category_keys(schema, category)


def clear_category(enabled: Optional[Iterable], category, schema: CriteriaSchema) -> FrozenSet[str]:
    """Disable every criterion of ``category`` (user, others or all)."""
    return resolve_selection(enabled, schema) - _category_keys(schema, category)


def enabled_count(enabled: Optional[Iterable], schema: CriteriaSchema, category=ALL_CATEGORIES) -> int:
    """Number of schema criteria of ``category`` that are enabled."""
    return len(resolve_selection(enabled, schema) & _category_keys(schema, category))


def parse_bool_param(value: Optional[str], default: bool = True) -> bool:
    """Boolean query parameter; missing or unrecognised values give ``default``."""
    if value is None:
        return default
    normalized = str(value).strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default
