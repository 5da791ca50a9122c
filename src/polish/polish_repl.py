"""
Interactive read-eval-print loop for polish expressions.

Each line is parsed as one complete expression and its value is printed.
Pipeline errors are reported as `[error] >>> <message>` and the loop carries on.

Commands:
    exit, quit      leave the REPL (Ctrl-D and Ctrl-C also work)
    verbose-mode    toggle printing the parsed tree before each value
    # ...           comment line, ignored
"""

import io
import traceback

from polish.polish_errors import PolishError
from polish.polish_eval import OverflowPolicy, evaluate
from polish.polish_lexer import Lexer
from polish.polish_parser import Parser


def print_traceback() -> None:
    buf = io.StringIO()
    traceback.print_exc(file=buf)
    print("[error] >>>")
    print(buf.getvalue())


def eval_line(src: str, overflow: OverflowPolicy = "error", verbose: bool = False) -> int:
    """Parses and evaluates one line, printing the tree first when `verbose` is set."""
    ast = Parser(Lexer(src)).parse()
    if verbose:
        print(f"[ast] >>> {ast!r}")
    return evaluate(ast, overflow)


def start_repl(overflow: OverflowPolicy = "error", verbose: bool = False) -> None:
    """Reads expressions from stdin until `exit`, `quit`, Ctrl-D or Ctrl-C."""
    print("polish REPL. Type 'exit' or 'quit' to leave.")
    while True:
        try:
            src = input(">>> ").strip()
            if src in ("exit", "quit"):
                print("Exiting polish REPL.")
                return
            if not src or src.startswith("#"):
                continue
            if src.lower() == "verbose-mode":
                verbose = not verbose
                print(f"[mode] >>> Verbose mode {'ON' if verbose else 'OFF'}")
                continue
            try:
                print(eval_line(src, overflow, verbose))
            except PolishError as e:
                print(f"[error] >>> {e}")
            except Exception:
                print_traceback()
        except (KeyboardInterrupt, EOFError):
            print("\nExiting polish REPL.")
            break


def main() -> None:
    start_repl()


if __name__ == "__main__":
    main()
