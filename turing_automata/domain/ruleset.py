"""Rule lookup backends and the Program container.

Two backends implement the ``Ruleset`` capability:

- ``RuleMap``      – keyed by ``Head``; one tail per head, duplicates rejected.
- ``RuleSequence`` – insertion-ordered list; first matching rule wins.

``Program`` owns one backend plus the optional initial state, halt states,
and an optional closed state set.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, Sequence

from turing_automata.config.types import RulesetKind
from turing_automata.domain.rules import Head, Rule, Tail
from turing_automata.domain.state import State, as_state
from turing_automata.errors import DuplicateRuleError, StateNotFoundError

logger = logging.getLogger(__name__)

RuleLike = Rule | Sequence[Any]


class Ruleset(ABC):
    """Exact (state, symbol) -> Tail lookup over a collection of rules."""

    @abstractmethod
    def get(self, head: Head) -> Tail | None:
        """Return the tail for *head*, or ``None`` when no rule matches."""

    @abstractmethod
    def add(self, rule: Rule) -> None:
        """Register one rule."""

    @abstractmethod
    def __iter__(self) -> Iterator[Rule]: ...

    @abstractmethod
    def __len__(self) -> int: ...

    def find_tail(self, state: Any, symbol: Any) -> Tail | None:
        """Look up the tail for a raw or wrapped state and a symbol."""
        return self.get(Head(state, symbol))

    def extend(self, rules: Iterable[Rule]) -> None:
        for rule in rules:
            self.add(rule)

    def heads(self) -> list[Head]:
        return [rule.head for rule in self]

    def __contains__(self, head: object) -> bool:
        return isinstance(head, Head) and self.get(head) is not None


class RuleMap(Ruleset):
    """Hash-keyed ruleset for deterministic programs."""

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        self._table: dict[Head, Tail] = {}
        self.extend(rules)

    def get(self, head: Head) -> Tail | None:
        return self._table.get(head)

    def add(self, rule: Rule) -> None:
        if rule.head in self._table:
            raise DuplicateRuleError(rule.head)
        self._table[rule.head] = rule.tail

    def __iter__(self) -> Iterator[Rule]:
        for head, tail in self._table.items():
            yield Rule(head, tail)

    def __len__(self) -> int:
        return len(self._table)

    def as_dict(self) -> dict[Head, Tail]:
        """Return a copy of the head -> tail mapping."""
        return dict(self._table)


class RuleSequence(Ruleset):
    """Ordered ruleset scanned linearly; the earliest matching rule governs."""

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        self._rules: list[Rule] = []
        self.extend(rules)

    def get(self, head: Head) -> Tail | None:
        for rule in self._rules:
            if rule.head == head:
                return rule.tail
        return None

    def add(self, rule: Rule) -> None:
        self._rules.append(rule)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)


def new_ruleset(kind: RulesetKind, rules: Iterable[Rule] = ()) -> Ruleset:
    """Construct an empty-or-filled ruleset of the requested kind."""
    if kind == RulesetKind.MAP:
        return RuleMap(rules)
    if kind == RulesetKind.SEQUENCE:
        return RuleSequence(rules)
    raise ValueError(f"unsupported ruleset kind: {kind!r}")


class Program:
    """A transition table plus optional initial state and halt states.

    ``rules`` accepts ``Rule`` objects or literals understood by
    :meth:`Rule.from_tuple`. When ``states`` is given the program enforces a
    closed state set: every state a rule, the initial state, or a halt state
    names must be declared, or :exc:`StateNotFoundError` is raised at build
    time. A map-backed program raises :exc:`DuplicateRuleError` for a
    repeated head.

    Build the program before running it; ``extend`` and
    ``set_initial_state`` are meant for use between runs only.
    """

    def __init__(
        self,
        rules: Iterable[RuleLike] = (),
        *,
        initial_state: Any = None,
        kind: RulesetKind = RulesetKind.MAP,
        halt_states: Iterable[Any] = (),
        states: Iterable[Any] | None = None,
    ) -> None:
        self._kind = kind
        self._declared: frozenset[State[Any]] | None = (
            None if states is None else frozenset(as_state(q) for q in states)
        )
        self._halt_states: frozenset[State[Any]] = frozenset(as_state(q) for q in halt_states)
        for halt_state in self._halt_states:
            self._check_declared(halt_state)
        self._initial_state: State[Any] | None = None
        if initial_state is not None:
            self.set_initial_state(initial_state)
        self._ruleset = new_ruleset(kind)
        self.extend(rules)
        logger.debug(
            "Built %s program with %d rules (initial state %s)",
            kind.value,
            len(self._ruleset),
            self._initial_state,
        )

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_rules(cls, rules: Iterable[RuleLike], **kwargs: Any) -> Program:
        return cls(rules, **kwargs)

    def extend(self, rules: Iterable[RuleLike]) -> None:
        """Append rules after validating the whole batch.

        Nothing is added unless every rule parses, names only declared
        states, and (for a map-backed program) has a head not already present.
        """
        batch = [Rule.coerce(item) for item in rules]
        for rule in batch:
            self._check_declared(rule.head.state)
            self._check_declared(rule.tail.next_state)
        if self._kind == RulesetKind.MAP:
            seen: set[Head] = set()
            for rule in batch:
                if rule.head in seen or rule.head in self._ruleset:
                    raise DuplicateRuleError(rule.head)
                seen.add(rule.head)
        self._ruleset.extend(batch)

    def set_initial_state(self, state: Any) -> None:
        wrapped = as_state(state)
        self._check_declared(wrapped)
        self._initial_state = wrapped

    def with_initial_state(self, state: Any) -> Program:
        """Return a copy of this program that starts in *state*."""
        return Program(
            self._ruleset,
            initial_state=state,
            kind=self._kind,
            halt_states=self._halt_states,
            states=self._declared,
        )

    def _check_declared(self, state: State[Any]) -> None:
        if self._declared is not None and state not in self._declared:
            raise StateNotFoundError(state.value)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, head: Head) -> Tail | None:
        return self._ruleset.get(head)

    def find_tail(self, state: Any, symbol: Any) -> Tail | None:
        """Return the tail whose head is exactly ``(state, symbol)``, if any."""
        return self._ruleset.find_tail(state, symbol)

    def is_halt_state(self, state: Any) -> bool:
        return as_state(state) in self._halt_states

    def validate_state(self, state: Any) -> State[Any]:
        """Wrap *state*, raising :exc:`StateNotFoundError` if it is undeclared."""
        wrapped = as_state(state)
        self._check_declared(wrapped)
        return wrapped

    def filter_by_state(self, state: Any) -> list[Rule]:
        """Return every rule triggered from *state*, in iteration order."""
        wrapped = as_state(state)
        return [rule for rule in self._ruleset if rule.head.state == wrapped]

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def kind(self) -> RulesetKind:
        return self._kind

    @property
    def initial_state(self) -> State[Any] | None:
        return self._initial_state

    @property
    def halt_states(self) -> frozenset[State[Any]]:
        return self._halt_states

    @property
    def declared_states(self) -> frozenset[State[Any]] | None:
        return self._declared

    def rules(self) -> list[Rule]:
        return list(self._ruleset)

    def states(self) -> list[State[Any]]:
        """Return every state the rules mention, ordered by first appearance."""
        seen: dict[State[Any], None] = {}
        for rule in self._ruleset:
            seen.setdefault(rule.head.state, None)
            seen.setdefault(rule.tail.next_state, None)
        return list(seen)

    def symbols(self) -> list[Any]:
        """Return every symbol read or written by the rules, by first appearance."""
        seen: dict[Any, None] = {}
        for rule in self._ruleset:
            seen.setdefault(rule.head.symbol, None)
            seen.setdefault(rule.tail.write_symbol, None)
        return list(seen)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._ruleset)

    def __len__(self) -> int:
        return len(self._ruleset)

    def __contains__(self, head: object) -> bool:
        return head in self._ruleset

    def __repr__(self) -> str:
        return (
            f"Program(kind={self._kind.value}, rules={len(self._ruleset)}, "
            f"initial_state={self._initial_state!r})"
        )
