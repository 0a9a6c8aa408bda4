# tripweek/typeconfig.py
"""Hard-stop classification of event/constraint types.

The type registry belongs to the caller. The core only needs a total
predicate `type_id -> bool`; unknown ids are soft.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Union

HardStopPredicate = Callable[[str], bool]
HardStopSource = Union[HardStopPredicate, Mapping[str, Any], None]


def _config_is_hard(cfg: Any) -> bool:
    if isinstance(cfg, Mapping):
        return cfg.get("isHardStop") is True or cfg.get("is_hard_stop") is True
    return cfg is True


def hard_stop_lookup(configs: Optional[Mapping[str, Any]]) -> HardStopPredicate:
    """Build a predicate from `{type_id: bool}` or `{type_id: {"isHardStop": bool, ...}}`.

    The mapping is snapshotted, so later changes to `configs` do not leak
    into the predicate.
    """
    hard = frozenset(
        str(type_id) for type_id, cfg in (configs or {}).items() if _config_is_hard(cfg)
    )

    def is_hard_stop(type_id: str) -> bool:
        return type_id in hard

    return is_hard_stop


def as_predicate(source: HardStopSource) -> HardStopPredicate:
    """Accept a predicate, a config mapping, or None (everything soft)."""
    if source is None:
        return hard_stop_lookup(None)
    if callable(source):
        return source
    return hard_stop_lookup(source)
