from dataclasses import dataclass, field, replace
from typing import Hashable, Iterable, Self


EPS = "ϵ"
ARROW = "→"
MATH_NA = "∅"


@dataclass(frozen=True)
class Terminal:
    value: Hashable

    def __str__(self) -> str:
        return f'"{self.value}"'


@dataclass(frozen=True)
class Nonterminal:
    value: Hashable

    def __str__(self) -> str:
        return str(self.value)


Symbol = Terminal | Nonterminal


@dataclass(frozen=True)
class Rule:
    lhs: Hashable
    rhs: tuple[Symbol, ...] = ()

    def __post_init__(self):
        # Rules are hashed into rule sets, so a list rhs is frozen here
        if not isinstance(self.rhs, tuple):
            object.__setattr__(self, "rhs", tuple(self.rhs))

    def is_empty(self) -> bool:
        return len(self.rhs) == 0

    def is_chain(self) -> bool:
        """A chain (unit) rule rewrites its lhs into exactly one nonterminal."""
        return len(self.rhs) == 1 and isinstance(self.rhs[0], Nonterminal)

    def __str__(self) -> str:
        rhs = " ".join(str(s) for s in self.rhs) if self.rhs else EPS
        return f"{self.lhs} {ARROW} {rhs}"


@dataclass(frozen=True)
class Grammar:
    """Immutable context-free grammar.

    `nonterminal` is the declared universe, `goal` the start symbol and
    `rules` an unordered rule set. Passes never mutate a grammar; they build
    a new one with `with_rules`.
    """

    nonterminal: frozenset
    goal: Hashable
    rules: frozenset[Rule] = field(default_factory=frozenset)

    def __post_init__(self):
        if not isinstance(self.rules, frozenset):
            object.__setattr__(self, "rules", frozenset(self.rules))
        if not isinstance(self.nonterminal, frozenset):
            object.__setattr__(self, "nonterminal", frozenset(self.nonterminal))

    @classmethod
    def build(
        cls, goal: str, terminal: set[str], rules: Iterable[tuple[str, list[str]]]
    ) -> Self:
        """Builds a grammar from plain strings.

        A string listed in `terminal` becomes a `Terminal`, anything else a
        `Nonterminal`. An empty symbol list is an epsilon rule.

        Examples:
            Grammar.build("S", {"a"}, [("S", ["A", "a"]), ("A", [])])
        """
        new_rules = []
        for lhs, rhs in rules:
            if lhs in terminal:
                raise ValueError(f"Terminal {lhs!r} cannot be the left side of a rule")
            symbols = tuple(Terminal(v) if v in terminal else Nonterminal(v) for v in rhs)
            new_rules.append(Rule(lhs=lhs, rhs=symbols))

        return cls(
            nonterminal=Grammar.select_nonterminal(new_rules) | {goal},
            goal=goal,
            rules=frozenset(new_rules),
        )

    @staticmethod
    def select_nonterminal(rules: Iterable[Rule]) -> frozenset:
        s = set()
        for r in rules:
            s.add(r.lhs)
            for v in r.rhs:
                if isinstance(v, Nonterminal):
                    s.add(v.value)
        return frozenset(s)

    @property
    def generators(self) -> frozenset:
        """Nonterminals heading at least one rule."""
        return frozenset(r.lhs for r in self.rules)

    @property
    def terminal(self) -> frozenset:
        return frozenset(s.value for r in self.rules for s in r.rhs if isinstance(s, Terminal))

    def rules_for(self, lhs: Hashable) -> list[Rule]:
        return [r for r in self.rules if r.lhs == lhs]

    def chain_rules(self) -> list[Rule]:
        return [r for r in self.rules if r.is_chain()]

    def with_rules(self, rules: Iterable[Rule]) -> Self:
        return replace(self, rules=frozenset(rules))

    def __str__(self) -> str:
        ordered = sorted(self.rules, key=lambda r: (r.lhs != self.goal, str(r)))
        return "\n".join(str(r) for r in ordered)
