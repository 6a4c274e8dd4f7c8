import re


# Alternatives are tried in this order at each position. The <...> unit sits
# before the operator run so "#include <iostream>" yields "<iostream>" whole.
TOKEN_RE = re.compile(
    r"""
      [a-zA-Z_][a-zA-Z0-9_]*     # identifier-shaped run
    | <[^<>\n]+>                 # angle-bracket unit, single line, unnested
    | [-+*/%=&|^!<>:]+           # operator-character run
    | \d+\.?\d*                  # number
    | \.
    | \t
    | \n
    | \s                         # other whitespace; no category claims it
    | [{}();.'",\[\]#]
    """,
    re.VERBOSE | re.ASCII,
)

NORMALIZE = {"\t": "\\t", "\n": "\\n"}
DENORMALIZE = {v: k for k, v in NORMALIZE.items()}


def denormalize(lexeme):
    return DENORMALIZE.get(lexeme, lexeme)


class Lexer:
    def __init__(self, text):
        self.text = text
        self.pos = 0

    def get_next_token(self):
        # characters no alternative accepts (e.g. "~", "@", "$") are skipped
        m = TOKEN_RE.search(self.text, self.pos)
        if m is None:
            self.pos = len(self.text)
            return None
        self.pos = m.end()
        match = m.group()
        return NORMALIZE.get(match, match)

    def __iter__(self):
        while True:
            token = self.get_next_token()
            if token is None:
                return
            yield token

    def tokenize(self):
        return list(self)


def tokenize(text):
    return Lexer(text).tokenize()
