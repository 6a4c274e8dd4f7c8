from tables import Category, KEYWORDS, OPERATORS, SYMBOLS, IDENTIFIER_RE, CONSTANT_RE


def classify(lexeme):
    # first match wins: keyword, operator, symbol, identifier, constant
    if lexeme in KEYWORDS:
        return Category.KEYWORD
    if lexeme in OPERATORS:
        return Category.OPERATOR
    if lexeme in SYMBOLS:
        return Category.SYMBOL
    if IDENTIFIER_RE.fullmatch(lexeme):
        return Category.IDENTIFIER
    if CONSTANT_RE.fullmatch(lexeme):
        return Category.CONSTANT
    return None


class ClassificationState:
    def __init__(self):
        self.counts = {c: 0 for c in Category}
        self.unique = {c: {} for c in Category}  # dicts used as ordered sets
        self.dropped = 0

    def record(self, lexeme, category):
        self.counts[category] += 1
        self.unique[category].setdefault(lexeme, None)

    def unique_tokens(self, category):
        return list(self.unique[category])

    def total(self):
        return sum(self.counts.values())

    def snapshot(self):
        return dict(self.counts)


class Classifier:
    def __init__(self, state=None, on_token=None):
        self.state = state if state is not None else ClassificationState()
        self.on_token = on_token  # called as on_token(lexeme, category, state)

    def feed(self, lexeme):
        category = classify(lexeme)
        if category is None:
            # spaces, "[", "]", "<iostream>" and similar are not reported
            self.state.dropped += 1
            return None
        self.state.record(lexeme, category)
        if self.on_token is not None:
            self.on_token(lexeme, category, self.state)
        return category

    def run(self, lexemes):
        for lexeme in lexemes:
            self.feed(lexeme)
        return self.state
