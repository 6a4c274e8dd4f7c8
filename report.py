import sys

import colorama
from colorama import Fore, Style

from tables import Category


RUNNING_HEADER = "---- SIMULATION SUMMARY ----"
RUNNING_FOOTER = "-" * 29
FINAL_HEADER = "-" * 33 + " FINAL SUMMARY " + "-" * 33
FINAL_FOOTER = "-" * 81

LABEL_COLORS = {
    Category.KEYWORD: Fore.BLUE,
    Category.IDENTIFIER: Fore.GREEN,
    Category.OPERATOR: Fore.YELLOW,
    Category.SYMBOL: Fore.MAGENTA,
    Category.CONSTANT: Fore.CYAN,
}


def format_set(tokens):
    return "[" + ", ".join(tokens) + "]"


def format_running(state):
    lines = [RUNNING_HEADER]
    for category in Category:
        lines.append(f"{category.title}: {state.counts[category]}")
    lines.append(RUNNING_FOOTER)
    return "\n".join(lines)


def format_summary(state):
    lines = [FINAL_HEADER]
    for category in Category:
        lines.append(f"{category.title}: {state.counts[category]}")
        lines.append(format_set(state.unique_tokens(category)))
    lines.append(FINAL_FOOTER)
    return "\n".join(lines)


def print_summary(state, stream=None):
    print(format_summary(state), file=stream or sys.stdout)


class TraceWriter:
    """Per-token sink for Classifier.

    `trace` toggles the "<token> is <label>" line and `running` the counter
    block printed after it. Either can be off without affecting the final
    summary.
    """

    def __init__(self, stream=None, trace=True, running=True, color=False):
        self.stream = stream
        self.trace = trace
        self.running = running
        self.color = color
        if color:
            colorama.just_fix_windows_console()

    def label(self, category):
        if not self.color:
            return category.label
        return f"{LABEL_COLORS[category]}{category.label}{Style.RESET_ALL}"

    def __call__(self, lexeme, category, state):
        out = self.stream or sys.stdout
        if self.trace:
            print(f"{lexeme} is {self.label(category)}", file=out)
        if self.running:
            print(format_running(state), file=out)
