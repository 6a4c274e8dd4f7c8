import re
from enum import Enum


class Category(Enum):
    # value: (report title, trace label); member order is report order
    KEYWORD = ("Keywords", "a keyword")
    IDENTIFIER = ("Identifiers", "an identifier")
    OPERATOR = ("Operators", "an operator")
    SYMBOL = ("Symbols", "a symbol")
    CONSTANT = ("Constants", "a constant")

    @property
    def title(self):
        return self.value[0]

    @property
    def label(self):
        return self.value[1]


# C++ reserved words plus a few library names that sample programs use a lot
KEYWORDS = frozenset({
    "asm", "else", "new", "this", "auto", "enum", "operator", "throw", "endl",
    "bool", "explicit", "private", "true", "break", "export", "protected",
    "try", "case", "extern", "public", "typedef", "catch", "false", "register",
    "typeid", "char", "float", "reinterpret_cast", "typename", "class", "for",
    "return", "union", "const", "friend", "short", "unsigned", "const_cast",
    "goto", "signed", "using", "continue", "if", "sizeof", "virtual", "default",
    "inline", "static", "void", "delete", "int", "static_cast", "string", "volatile",
    "do", "long", "struct", "wchar_t", "double", "mutable", "switch", "while",
    "dynamic_cast", "namespace", "template", "include", "iostream", "cout", "std",
})

OPERATORS = frozenset({
    "+", "-", "*", "/", "%",                     # arithmetic
    "==", "!=", ">", "<", ">=", "<=",            # relational
    "&&", "||", "!",                             # logical
    "&", "|", "^", "~", "<<", ">>",              # bitwise
    "=", "+=", "-=", "*=", "/=", "%=", "&=", "|=", "^=", "<<=", ">>=",
    "::", "++", "--",
})

# "%" is also an operator, and operators are checked first, so it never
# lands here. Kept so the table matches what the scanner was built with.
SYMBOLS = frozenset({
    "#", "{", "}", ";", ":", ".", ",", "'", '"', "(", ")", "%", "\\t", "\\n",
})

IDENTIFIER_RE = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*", re.ASCII)
CONSTANT_RE = re.compile(r"-?[0-9]*\.?[0-9]+([eE][-+]?[0-9]+)?", re.ASCII)
