"""Duel outcome rules and their plugin registry.

A rule decides which of two contestants wins a duel.  Rules register
themselves under a name with :func:`register_duel_rule` so that the
configuration layer and CLI can pick one by string.

Built-in rules:

* ``"effectiveness"`` -- higher effectiveness wins; equal scores favour the
  odd-parity contestant.  Deterministic, consumes no randomness.
* ``"weighted"`` -- the odd contestant wins with probability
  ``odd / (odd + even)`` effectiveness, drawn from the shared random source.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, TypeVar, runtime_checkable

from district_games.engine.random_source import UniformSource
from district_games.ingest.schema import Person


@runtime_checkable
class DuelRule(Protocol):
    """Protocol for duel outcome rules."""

    @property
    def name(self) -> str:
        """Registry name of the rule."""
        ...

    def winner(self, odd: Person, even: Person, rng: UniformSource) -> Person:
        """Return whichever of *odd* and *even* wins the duel."""
        ...


_RT = TypeVar("_RT", bound=type[DuelRule])

_DUEL_RULE_REGISTRY: dict[str, type[DuelRule]] = {}


class DuelRuleNotFoundError(KeyError):
    """Raised when a requested duel rule name is not in the registry."""


def register_duel_rule(name: str) -> Callable[[_RT], _RT]:
    """Class decorator that registers a duel rule class.

    Usage::

        @register_duel_rule("coin_flip")
        class CoinFlipRule:
            ...

    Raises:
        ValueError: If *name* is already registered.
    """

    def decorator(cls: _RT) -> _RT:
        if name in _DUEL_RULE_REGISTRY:
            msg = f"Duel rule name {name!r} is already registered to {_DUEL_RULE_REGISTRY[name].__name__}"
            raise ValueError(msg)
        _DUEL_RULE_REGISTRY[name] = cls
        return cls

    return decorator


def get_duel_rule(name: str) -> type[DuelRule]:
    """Return the rule class registered under *name*.

    Raises :class:`DuelRuleNotFoundError` if not found.
    """
    try:
        return _DUEL_RULE_REGISTRY[name]
    except KeyError:
        msg = f"No duel rule registered with name {name!r}. Available: {list_duel_rules()}"
        raise DuelRuleNotFoundError(msg) from None


def list_duel_rules() -> list[str]:
    """Return all registered duel rule names (sorted)."""
    return sorted(_DUEL_RULE_REGISTRY)


@register_duel_rule("effectiveness")
class EffectivenessRule:
    """Higher effectiveness wins; ties go to the odd-parity contestant."""

    @property
    def name(self) -> str:
        return "effectiveness"

    def winner(self, odd: Person, even: Person, rng: UniformSource) -> Person:
        return even if even.effectiveness > odd.effectiveness else odd


@register_duel_rule("weighted")
class WeightedRule:
    """Effectiveness-weighted lottery.

    Draws ``r`` from ``[0, odd + even)``; the odd contestant wins when
    ``r < odd``.  When the combined effectiveness is not positive the odd
    contestant wins without consuming a draw.
    """

    @property
    def name(self) -> str:
        return "weighted"

    def winner(self, odd: Person, even: Person, rng: UniformSource) -> Person:
        odd_weight = max(odd.effectiveness, 0)
        total = odd_weight + max(even.effectiveness, 0)
        if total <= 0:
            return odd
        return odd if rng.next_uniform(total) < odd_weight else even
