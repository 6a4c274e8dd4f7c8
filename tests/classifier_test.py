from classifier import Classifier, ClassificationState, classify
from lexer import tokenize
from tables import Category, KEYWORDS, OPERATORS, SYMBOLS


def run(code):
    return Classifier().run(tokenize(code))


def test_simple_declaration():
    state = run("int x = 5;")
    assert state.snapshot() == {c: 1 for c in Category}
    assert state.unique_tokens(Category.KEYWORD) == ["int"]
    assert state.unique_tokens(Category.IDENTIFIER) == ["x"]
    assert state.unique_tokens(Category.OPERATOR) == ["="]
    assert state.unique_tokens(Category.CONSTANT) == ["5"]
    assert state.unique_tokens(Category.SYMBOL) == [";"]
    assert state.dropped == 3


def test_compound_assignment():
    state = run("x += 3.14;")
    assert state.counts[Category.KEYWORD] == 0
    assert state.counts[Category.IDENTIFIER] == 1
    assert state.counts[Category.OPERATOR] == 1
    assert state.counts[Category.CONSTANT] == 1
    assert state.counts[Category.SYMBOL] == 1


def test_include_header_is_dropped():
    state = run("#include <iostream>")
    assert state.counts[Category.SYMBOL] == 1
    assert state.counts[Category.KEYWORD] == 1
    assert state.total() == 2
    for category in Category:
        assert "<iostream>" not in state.unique_tokens(category)


def test_empty_input():
    state = run("")
    assert state.total() == 0
    assert state.dropped == 0
    for category in Category:
        assert state.unique_tokens(category) == []


def test_percent_is_always_an_operator():
    assert "%" in SYMBOLS
    assert classify("%") is Category.OPERATOR
    state = run("a % b;")
    assert "%" not in state.unique_tokens(Category.SYMBOL)
    assert "%" in state.unique_tokens(Category.OPERATOR)


def test_table_entries_classify_to_their_table():
    for word in KEYWORDS:
        assert classify(word) is Category.KEYWORD, word
    for op in OPERATORS:
        assert classify(op) is Category.OPERATOR, op
    for sym in SYMBOLS - OPERATORS:
        assert classify(sym) is Category.SYMBOL, sym


def test_library_names_are_keywords():
    for word in ("cout", "endl", "std", "include", "iostream"):
        assert classify(word) is Category.KEYWORD


def test_shapes():
    assert classify("_tmp1") is Category.IDENTIFIER
    assert classify("Main") is Category.IDENTIFIER
    assert classify("42") is Category.CONSTANT
    assert classify("-7") is Category.CONSTANT
    assert classify(".5") is Category.CONSTANT
    assert classify("6.02e23") is Category.CONSTANT
    assert classify("1E-3") is Category.CONSTANT


def test_unclassified_lexemes():
    for lexeme in (" ", "[", "]", "<iostream>", "3.", ":::", "", "\t"):
        assert classify(lexeme) is None, repr(lexeme)


def test_classify_is_stable():
    for lexeme in ("int", "x", "==", ";", "1.5", " "):
        assert classify(lexeme) is classify(lexeme)


def test_counts_plus_drops_equal_lexemes():
    code = "for (int i = 0; i < 10; i++) { a[i] = i * 2.5; }\n"
    tokens = tokenize(code)
    state = Classifier().run(tokens)
    assert state.total() + state.dropped == len(tokens)


def test_unique_tokens_keep_first_seen_order():
    state = run("while x do if x return y")
    assert state.unique_tokens(Category.KEYWORD) == ["while", "do", "if", "return"]
    assert state.unique_tokens(Category.IDENTIFIER) == ["x", "y"]
    assert state.counts[Category.IDENTIFIER] == 3


def test_callback_sees_each_classified_token_in_order():
    seen = []

    def on_token(lexeme, category, state):
        seen.append((lexeme, category, state.total()))

    Classifier(on_token=on_token).run(tokenize("int x;"))
    assert seen == [
        ("int", Category.KEYWORD, 1),
        ("x", Category.IDENTIFIER, 2),
        (";", Category.SYMBOL, 3),
    ]


def test_shared_state_accumulates():
    state = ClassificationState()
    Classifier(state=state).run(tokenize("int a;"))
    Classifier(state=state).run(tokenize("int b;"))
    assert state.counts[Category.KEYWORD] == 2
    assert state.unique_tokens(Category.KEYWORD) == ["int"]
