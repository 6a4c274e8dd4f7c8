import sys
import traceback

from classifier import Classifier, ClassificationState
from lexer import Lexer
from report import TraceWriter, print_summary
from source import DEFAULT_SOURCE, LexscanError, read_source


USAGE = """Usage:
  python cli.py [classify] [<file>]
  python cli.py tokens [<file>]
  python cli.py repl
  (optional) --quiet to hide per-token lines
  (optional) --no-running to hide the running counters
  (optional) --color to colour category labels
  (optional) --debug to show Python traceback"""

FLAGS = ("--quiet", "--no-running", "--color", "--debug")


def usage_exit():
    print(USAGE)
    sys.exit(1)


def fail(e, debug):
    if debug:
        traceback.print_exc()
    else:
        print(str(e), file=sys.stderr)
    sys.exit(1)


def cmd_classify(path, sink):
    code = read_source(path)
    classifier = Classifier(on_token=sink)
    state = classifier.run(Lexer(code))
    print_summary(state)
    return state


def cmd_tokens(path):
    code = read_source(path)
    for i, lexeme in enumerate(Lexer(code)):
        print(f"  {i:04d}  {lexeme!r}")


def cmd_repl(sink):
    # one state for the whole session; counters keep growing across lines
    classifier = Classifier(state=ClassificationState(), on_token=sink)

    print("lexscan REPL. Type :summary for totals, :q to quit.")

    while True:
        try:
            line = input("lexscan> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        stripped = line.strip()
        if stripped in (":q", ":quit", "quit", "exit"):
            break
        if stripped == ":summary":
            print_summary(classifier.state)
            continue

        classifier.run(Lexer(line + "\n"))

    print_summary(classifier.state)


def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)

    opts = {flag: False for flag in FLAGS}
    for flag in FLAGS:
        while flag in args:
            opts[flag] = True
            args.remove(flag)

    sink = TraceWriter(
        trace=not opts["--quiet"],
        running=not opts["--no-running"],
        color=opts["--color"],
    )
    debug = opts["--debug"]

    for a in args:
        if a.startswith("--"):
            print(f"Unknown option: {a}")
            usage_exit()

    cmd = "classify"
    if args and args[0] in ("classify", "tokens", "repl"):
        cmd = args.pop(0)

    if cmd == "repl":
        if args:
            usage_exit()
        cmd_repl(sink)
        return

    if len(args) > 1:
        usage_exit()
    path = args[0] if args else DEFAULT_SOURCE

    try:
        if cmd == "tokens":
            cmd_tokens(path)
        else:
            cmd_classify(path, sink)
    except LexscanError as e:
        fail(e, debug)


if __name__ == "__main__":
    main()
