from normalizer.grammar import Grammar


brackets = Grammar.build(
    goal="goal",
    terminal={"(", ")"},
    rules=[
        ("goal", ["list"]),
        ("list", ["list", "pair"]),
        ("list", ["pair"]),
        ("pair", ["(", "list", ")"]),
        ("pair", ["(", ")"]),
    ],
)

math = Grammar.build(
    goal="goal",
    terminal={"+", "-", "*", "/", "(", ")", "n"},
    rules=[
        ("goal", ["expr"]),
        ("expr", ["expr", "+", "term"]),
        ("expr", ["expr", "-", "term"]),
        ("expr", ["term"]),
        ("term", ["term", "*", "factor"]),
        ("term", ["term", "/", "factor"]),
        ("term", ["factor"]),
        ("factor", ["(", "expr", ")"]),
        ("factor", ["n"]),
    ],
)

empty = Grammar.build(
    goal="goal",
    terminal={"a"},
    rules=[
        ("goal", ["A"]),
        ("A", ["A", "a"]),
        ("A", ["a"]),
        ("A", []),
    ],
)

# Every nonterminal is nullable, the goal included
optional = Grammar.build(
    goal="S",
    terminal={"a", "b"},
    rules=[
        ("S", ["A", "B"]),
        ("A", ["a"]),
        ("A", []),
        ("B", ["b"]),
        ("B", []),
    ],
)

cycle = Grammar.build(
    goal="A",
    terminal={"a"},
    rules=[
        ("A", ["B"]),
        ("B", ["A"]),
        ("A", ["a"]),
    ],
)

# Balanced brackets with an ε-rule and a chain back into the goal
dyck = Grammar.build(
    goal="S",
    terminal={"[", "]"},
    rules=[
        ("S", ["S", "S"]),
        ("S", ["[", "S", "]"]),
        ("S", ["T"]),
        ("T", ["S"]),
        ("T", []),
    ],
)

ALL = {
    "brackets": brackets,
    "math": math,
    "empty": empty,
    "optional": optional,
    "cycle": cycle,
    "dyck": dyck,
}
