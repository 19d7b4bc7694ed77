"""Unit pairs and chain rule elimination.

`(u, v)` is a unit pair when `u` derives `[v]` through zero or more chain
rules. The relation is the least fixpoint of `add_unit_pairs` started from
the diagonal over the grammar's generators. Chain cycles such as
`A → B, B → A` only ever add pairs that are already bounded by
`generators × generators`, so the closure terminates on them.
"""
import logging
from collections import defaultdict
from typing import Hashable, Iterable

import pandas as pd

from normalizer.fixpoint import iterate
from normalizer.grammar import MATH_NA, Grammar, Rule


log = logging.getLogger(__name__)

UnitPair = tuple[Hashable, Hashable]


def add_unit_pairs(
    grammar: Grammar, pairs: frozenset[UnitPair], chains: Iterable[Rule] | None = None
) -> frozenset[UnitPair]:
    """One closure round: `u → v'` and `(v', w)` give `(u, w)`.

    `chains` are the grammar's chain rules; pass them to avoid re-selecting
    them every round.
    """
    if chains is None:
        chains = grammar.chain_rules()

    # (v', w) pairs grouped by v', so a chain rule only meets the pairs it extends
    reachable = defaultdict(set)
    for v, w in pairs:
        reachable[v].add(w)

    new = set(pairs)
    for rule in chains:
        target = rule.rhs[0].value
        for w in reachable.get(target, ()):
            new.add((rule.lhs, w))
    return frozenset(new)


def _solve(grammar: Grammar) -> list[frozenset[UnitPair]]:
    generators = grammar.generators
    chains = grammar.chain_rules()
    return iterate(
        frozenset((g, g) for g in generators),
        lambda pairs: add_unit_pairs(grammar, pairs, chains),
        bound=len(generators) ** 2,
    )


def compute_unit_pairs(grammar: Grammar) -> frozenset[UnitPair]:
    rounds = _solve(grammar)
    log.debug("%d unit pairs after %d rounds", len(rounds[-1]), len(rounds) - 1)
    return rounds[-1]


def unit_pair_table(grammar: Grammar) -> pd.DataFrame:
    """Returns a generators × generators table of the round each pair was added in.

    The diagonal is round 0, absent pairs are `∅`.
    """
    generators = sorted(grammar.generators, key=str)
    table = pd.DataFrame(MATH_NA, index=generators, columns=generators, dtype=object)

    for i, pairs in enumerate(_solve(grammar)):
        for u, w in pairs:
            if table.at[u, w] == MATH_NA:
                table.at[u, w] = i
    return table


def eliminate_unit_rules(grammar: Grammar, unit_pairs: frozenset[UnitPair] | None = None) -> Grammar:
    """Replaces chain rules by their transitive effect.

    For every unit pair `(u, v)` and every non-chain rule `v → output` the
    result holds `u → output`. Chain rules themselves are not copied. The
    reflexive pair `(v, v)` keeps the non-chain rules of `v` as they are.
    If `unit_pairs` is not given it is computed with `compute_unit_pairs`.
    """
    if unit_pairs is None:
        unit_pairs = compute_unit_pairs(grammar)

    outputs = defaultdict(list)
    for rule in grammar.rules:
        if not rule.is_chain():
            outputs[rule.lhs].append(rule.rhs)

    new_rules = set()
    for u, v in unit_pairs:
        for rhs in outputs.get(v, ()):
            new_rules.add(Rule(lhs=u, rhs=rhs))

    log.debug("unit rule elimination: %d rules -> %d rules", len(grammar.rules), len(new_rules))
    return grammar.with_rules(new_rules)
