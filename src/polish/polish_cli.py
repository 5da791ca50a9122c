"""
polish CLI Entrypoint.

Command-line interface for evaluating polish prefix expressions.

Features:
    - Read source from `.pn` files or inline strings.
    - Lex, parse and evaluate the expression, printing the result.
    - Optionally dump the token stream or the expression tree as JSON.
    - Launch an interactive REPL.

Example usage:
    polish sum.pn
    polish -s "+ 1 + 2 3"
    polish -s "(+ 1 2)" --ast
    polish --repl --verbose

Functions:
    run_polish(source: str, is_string: bool = False, overflow: str = "error",
               show_tokens: bool = False, show_ast: bool = False) -> int:
        Executes the full pipeline (lex → parse → evaluate → output).

    main() -> None:
        Parses CLI arguments and invokes the appropriate action.
"""

import argparse
import json
import sys

from polish.polish_errors import PolishError
from polish.polish_eval import OVERFLOW_POLICIES, OverflowPolicy, evaluate
from polish.polish_lexer import Lexer
from polish.polish_parser import Parser


def run_polish(
    source: str,
    is_string: bool = False,
    overflow: OverflowPolicy = "error",
    show_tokens: bool = False,
    show_ast: bool = False,
) -> int:
    """
    Run the pipeline on one expression and print its value.

    Args:
        source (str): The expression, or a path to a `.pn` file.
        is_string (bool): If True, treats `source` as the expression itself. Defaults to False.
        overflow (str): Overflow policy for additions. Defaults to "error".
        show_tokens (bool): If True, prints the token stream before the result.
        show_ast (bool): If True, prints the expression tree as JSON before the result.

    Returns:
        int: The value of the expression.

    Raises:
        ValueError: If `is_string` is False and the source does not end with '.pn'.
        PolishError: If lexing, parsing or evaluation fails.
    """
    if not is_string and not source.endswith(".pn"):
        raise ValueError("Only .pn files are supported.")
    if not is_string:
        with open(source, encoding="utf-8") as f:
            source = f.read()

    if show_tokens:
        print(" ".join(str(tok) for tok in Lexer(source)))

    ast = Parser(Lexer(source)).parse()
    if show_ast:
        print(json.dumps(ast.to_dict(), indent=2))

    result = evaluate(ast, overflow)
    print(result)
    return result


def main() -> None:
    """
    Entry point for the polish CLI.

    Launches the REPL if no arguments are passed or `--repl` is given, otherwise
    evaluates the source. Pipeline errors are reported on stderr with exit status 1.
    """
    if len(sys.argv) == 1:
        from polish.polish_repl import start_repl

        start_repl()
        return
    parser = argparse.ArgumentParser(prog="polish")
    parser.add_argument("source", nargs="?", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "--overflow",
        choices=OVERFLOW_POLICIES,
        default="error",
        help="Behaviour when a sum leaves the 32-bit range (default: error)",
    )
    parser.add_argument(
        "--tokens", action="store_true", help="Print the token stream"
    )
    parser.add_argument(
        "--ast", action="store_true", help="Print the expression tree as JSON"
    )
    parser.add_argument(
        "--repl",
        action="store_true",
        help="Launch interactive REPL instead of evaluating",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Verbose REPL mode (if --repl)"
    )

    args = parser.parse_args()

    if args.repl or args.source is None:
        from polish.polish_repl import start_repl

        start_repl(overflow=args.overflow, verbose=args.verbose)
        return

    try:
        run_polish(
            source=args.source,
            is_string=args.string,
            overflow=args.overflow,
            show_tokens=args.tokens,
            show_ast=args.ast,
        )
    except (PolishError, ValueError, OSError) as e:
        print(f"[error] >>> {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__" and not any("pytest" in arg for arg in sys.argv):
    main()
