from normalizer import samples
from normalizer.derivation import derived_strings, derives, derives_empty, language, rewrite
from normalizer.grammar import Grammar, Nonterminal, Terminal


S, A = Nonterminal("S"), Nonterminal("A")
a = Terminal("a")


def test_rewrite_every_occurrence():
    forms = set(rewrite(samples.empty, (A, A)))

    assert forms == {
        (A, a, A),
        (a, A),
        (A,),
        (A, A, a),
        (A, a),
    }


def test_rewrite_leaves_terminals():
    assert list(rewrite(samples.empty, (a, a))) == []


def test_derives():
    goal = Nonterminal("goal")

    assert derives(samples.empty, (goal,), (a, a, a), max_steps=5)
    assert not derives(samples.empty, (goal,), (a, a, a), max_steps=2)
    assert derives(samples.empty, (goal,), (goal,), max_steps=0)


def test_derives_empty():
    assert derives_empty(samples.empty, "goal", max_steps=2)
    assert not derives_empty(samples.empty, "goal", max_steps=1)
    assert not derives_empty(samples.brackets, "goal", max_steps=6)


def test_language_of_brackets():
    strings = {"".join(s) for s in language(samples.brackets, max_length=4)}

    assert strings == {"()", "()()", "(())"}


def test_language_of_empty():
    assert language(samples.empty, max_length=3) == {(), ("a",), ("a", "a"), ("a", "a", "a")}


def test_language_of_dyck_with_cycles():
    strings = {"".join(s) for s in language(samples.dyck, max_length=4)}

    assert strings == {"", "[]", "[][]", "[[]]"}


def test_derived_strings_covers_every_nonterminal():
    strings = derived_strings(samples.math, max_length=1)

    assert set(strings) == samples.math.nonterminal
    assert strings["factor"] == {("n",)}
    assert strings["goal"] == {("n",)}


def test_goal_without_rules_has_empty_language():
    g = Grammar.build("S", {"a"}, [("A", ["a"])])

    assert language(g, max_length=3) == frozenset()


def test_unproductive_nonterminal():
    g = Grammar.build("S", {"a"}, [("S", ["a", "S"])])

    assert language(g, max_length=4) == frozenset()
