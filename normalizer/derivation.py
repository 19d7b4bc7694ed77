"""Bounded derivations over a grammar.

These are finite renditions of the rewrite and derivation relations,
good enough to compare grammars on short strings.
"""
from collections import deque
from typing import Hashable, Iterator, Sequence

from normalizer.grammar import Grammar, Nonterminal, Symbol, Terminal


Form = tuple[Symbol, ...]


def rewrite(grammar: Grammar, form: Sequence[Symbol]) -> Iterator[Form]:
    """Yields every form reachable from `form` in one rule application."""
    form = tuple(form)
    for i, s in enumerate(form):
        if not isinstance(s, Nonterminal):
            continue
        for rule in grammar.rules_for(s.value):
            yield form[:i] + rule.rhs + form[i + 1:]


def count_terminals(form: Sequence[Symbol]) -> int:
    return sum(1 for s in form if isinstance(s, Terminal))


def derives(grammar: Grammar, source: Sequence[Symbol], target: Sequence[Symbol], max_steps: int) -> bool:
    """Checks whether `source` derives `target` in at most `max_steps` steps.

    Terminals are never rewritten, so forms holding more terminals than
    `target` are dropped from the search.
    """
    source, target = tuple(source), tuple(target)
    limit = count_terminals(target)

    seen = {source}
    queue = deque([(source, 0)])
    while queue:
        form, steps = queue.popleft()
        if form == target:
            return True
        if steps == max_steps:
            continue

        for new_form in rewrite(grammar, form):
            if new_form in seen or count_terminals(new_form) > limit:
                continue
            seen.add(new_form)
            queue.append((new_form, steps + 1))
    return False


def derives_empty(grammar: Grammar, lhs: Hashable, max_steps: int) -> bool:
    return derives(grammar, (Nonterminal(lhs),), (), max_steps)


def derived_strings(grammar: Grammar, max_length: int) -> dict[Hashable, frozenset[tuple]]:
    """Returns, per nonterminal, the terminal strings of length `<= max_length` it derives.

    Strings are tuples of terminal values. Sets only grow and are bounded by
    the strings of length `<= max_length`, so the loop stops even for
    ε-cycles and left recursion.
    """
    strings: dict[Hashable, set[tuple]] = {nt: set() for nt in grammar.nonterminal | grammar.generators}

    def of(s: Symbol) -> set[tuple]:
        if isinstance(s, Terminal):
            return {(s.value,)}
        return strings.setdefault(s.value, set())

    is_changing = True
    while is_changing:
        is_changing = False
        for rule in grammar.rules:
            produced = {()}
            for s in rule.rhs:
                produced = {a + b for a in produced for b in of(s) if len(a) + len(b) <= max_length}
                if not produced:
                    break

            is_changing = is_changing or len(produced.difference(strings[rule.lhs])) > 0
            strings[rule.lhs] |= produced

    return {nt: frozenset(v) for nt, v in strings.items()}


def language(grammar: Grammar, max_length: int) -> frozenset[tuple]:
    """Terminal strings of length `<= max_length` derivable from the goal."""
    return derived_strings(grammar, max_length).get(grammar.goal, frozenset())
