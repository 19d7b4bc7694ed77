from normalizer.derivation import derives, language
from normalizer.fixpoint import FixpointError
from normalizer.grammar import EPS, Grammar, Nonterminal, Rule, Symbol, Terminal
from normalizer.nullable import compute_nullable, eliminate_nullable, eliminate_nullable_rules
from normalizer.unit import compute_unit_pairs, eliminate_unit_rules

__all__ = [
    "EPS",
    "FixpointError",
    "Grammar",
    "Nonterminal",
    "Rule",
    "Symbol",
    "Terminal",
    "compute_nullable",
    "compute_unit_pairs",
    "derives",
    "eliminate_nullable",
    "eliminate_nullable_rules",
    "eliminate_unit_rules",
    "language",
]
