"""Nullable nonterminals and epsilon rule elimination.

A nonterminal is nullable when it derives the empty sequence. The nullable
set is the least fixpoint of `add_nullables` started from the empty set;
`eliminate_nullable` then rewrites every rule into all of its variants with
nullable occurrences dropped, so that no rule of the result has an empty
right side. The empty string itself is lost: the language of the result is
the original language minus ε.
"""
import logging
from itertools import product
from typing import Hashable, Iterable

import pandas as pd

from normalizer.fixpoint import iterate
from normalizer.grammar import Grammar, Nonterminal, Rule, Symbol


log = logging.getLogger(__name__)


def is_nullable_sequence(rhs: Iterable[Symbol], nullable: frozenset) -> bool:
    """A sequence derives ϵ iff every symbol in it does. Terminals never do."""
    return all(isinstance(s, Nonterminal) and s.value in nullable for s in rhs)


def add_nullables(grammar: Grammar, nullable: frozenset) -> frozenset:
    new = set(nullable)
    for rule in grammar.rules:
        if is_nullable_sequence(rule.rhs, nullable):
            new.add(rule.lhs)
    return frozenset(new)


def _solve(grammar: Grammar) -> list[frozenset]:
    return iterate(
        frozenset(),
        lambda nullable: add_nullables(grammar, nullable),
        bound=len(grammar.generators),
    )


def compute_nullable(grammar: Grammar) -> frozenset:
    rounds = _solve(grammar)
    log.debug("%d nullable nonterminals after %d rounds", len(rounds[-1]), len(rounds) - 1)
    return rounds[-1]


def nullable_trace(grammar: Grammar) -> pd.DataFrame:
    """Returns the round in which each nullable nonterminal was first found."""
    first_seen: dict[Hashable, int] = {}
    for i, nullable in enumerate(_solve(grammar)):
        for v in nullable:
            first_seen.setdefault(v, i)

    records = [{"Nonterminal": v, "Round": first_seen[v]} for v in sorted(first_seen, key=str)]
    df = pd.DataFrame.from_records(records, columns=["Nonterminal", "Round"])
    return df.set_index("Nonterminal")


def expand_nullable(rhs: Iterable[Symbol], nullable: frozenset) -> set[tuple[Symbol, ...]]:
    """Returns every subsequence of `rhs` obtained by dropping nullable occurrences.

    Terminals and non-nullable nonterminals are always kept and the relative
    order of the kept symbols is preserved. For `k` nullable occurrences
    there are at most `2 ** k` candidates; the empty one is included.

    Examples:
        With `A` nullable, `a A B A` expands to
        `{a A B A, a B A, a A B, a B}`.
    """
    choices = []
    for s in rhs:
        if isinstance(s, Nonterminal) and s.value in nullable:
            choices.append(((s,), ()))
        else:
            choices.append(((s,),))

    return {sum(parts, ()) for parts in product(*choices)}


def eliminate_nullable(grammar: Grammar, nullable: frozenset) -> Grammar:
    new_rules = set()
    for rule in grammar.rules:
        for candidate in expand_nullable(rule.rhs, nullable):
            # An all-dropped candidate would be an epsilon rule again
            if candidate:
                new_rules.add(Rule(lhs=rule.lhs, rhs=candidate))

    log.debug("nullable elimination: %d rules -> %d rules", len(grammar.rules), len(new_rules))
    return grammar.with_rules(new_rules)


def eliminate_nullable_rules(grammar: Grammar) -> Grammar:
    return eliminate_nullable(grammar, compute_nullable(grammar))
