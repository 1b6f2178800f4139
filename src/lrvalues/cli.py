"""Command-line interface for the lrvalues examples.

Usage:
    lrvalues                          # Run the checked examples
    lrvalues run                      # Same as above
    lrvalues anomalies                # Run the literal assignment anomalies
    lrvalues check <file> [--dialect D] [--rich]
    lrvalues classify <expr> [--dialect D]
    lrvalues tree <file> [--pos]      # Show lark parse tree
"""

import argparse
import sys
from pathlib import Path

from lark import Token, Tree

import lrvalues


def prettylark(node, indent=0, show_positions=False):
    """Pretty-print a lark parse tree."""
    prefix = "  " * indent

    if isinstance(node, Token):
        pos = f" @{node.line}:{node.column}" if show_positions else ""
        print(f"{prefix}{node.type}: {node.value!r}{pos}")

    elif isinstance(node, Tree):
        pos = ""
        if show_positions and not node.meta.empty:
            pos = f" @{node.meta.line}:{node.meta.column}"

        if len(node.children) == 0:
            print(f"{prefix}{node.data}(){pos}")
        elif len(node.children) == 1 and isinstance(node.children[0], Token):
            # Compact single-token nodes
            print(f"{prefix}{node.data}: {node.children[0].value!r}{pos}")
        else:
            print(f"{prefix}{node.data}:{pos}")
            for child in node.children:
                prettylark(child, indent + 1, show_positions)

    elif node is None:
        print(f"{prefix}-")


def format_error(error, filepath=None):
    """Format an exception with its source position when it has one."""
    position = getattr(error, "position", None)
    where = ""
    if filepath is not None:
        where = f"{filepath}:"
    if position and position[0] is not None:
        where += f"{position[0]}:{position[1]}:"
    if where:
        return f"{where} {error}"
    return str(error)


def run_examples():
    """Run the checked examples, returning the exit status."""
    try:
        lrvalues.run_all()
    except lrvalues.AssertionFailure as e:
        print(f"Assertion failed: {e}", file=sys.stderr)
        return 1
    return 0


def run_anomalies():
    lrvalues.anomalies()
    print("Anomalies accepted")
    return 0


def _read_source(filepath):
    """Read a snippet file, or None after reporting why it could not be read."""
    if not filepath.exists():
        print(f"Error: File not found: {filepath}", file=sys.stderr)
        return None
    try:
        return filepath.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read {filepath}: {e}", file=sys.stderr)
        return None


def check_file(filepath, dialect, rich=False):
    """Check every statement of a snippet file.

    Returns 0 when all statements are legal, 1 otherwise.
    """
    source = _read_source(filepath)
    if source is None:
        return 1

    try:
        verdicts = lrvalues.check_source(source, dialect)
    except lrvalues.ParseError as e:
        print(f"Parse error: {format_error(e, filepath)}", file=sys.stderr)
        return 1

    if rich:
        _print_rich(verdicts, filepath, dialect)
    else:
        for verdict in verdicts:
            print(verdict.format())

    failed = sum(1 for verdict in verdicts if not verdict.ok)
    if failed:
        print(f"{failed} of {len(verdicts)} statements rejected by {dialect}",
              file=sys.stderr)
        return 1
    return 0


def _print_rich(verdicts, filepath, dialect):
    import rich.console, rich.markup, rich.table
    table = rich.table.Table(title=f"{filepath.name} ({dialect})")
    table.add_column("Line", justify="right")
    table.add_column("Statement")
    table.add_column("Result")
    for verdict in verdicts:
        if verdict.ok:
            result = "[green]ok[/green]"
        else:
            result = f"[red]{rich.markup.escape(str(verdict.error))}[/red]"
        table.add_row(
            str(verdict.statement.position[0]),
            rich.markup.escape(verdict.statement.unparse()),
            result,
        )
    rich.console.Console().print(table)


def classify(text, dialect):
    """Print the value category of a single expression."""
    try:
        expr = lrvalues.parse_expr(text)
        print(lrvalues.category(expr, dialect))
    except (lrvalues.ParseError, lrvalues.CategoryError) as e:
        print(f"Error: {format_error(e)}", file=sys.stderr)
        return 1
    return 0


def show_tree(filepath, show_positions=False):
    source = _read_source(filepath)
    if source is None:
        return 1
    try:
        tree = lrvalues.lark_tree(source)
    except lrvalues.ParseError as e:
        print(f"Parse error: {format_error(e, filepath)}", file=sys.stderr)
        return 1
    prettylark(tree, show_positions=show_positions)
    return 0


def main(argv=None):
    """Main entry point for the lrvalues CLI."""
    parser = argparse.ArgumentParser(
        prog="lrvalues",
        description="Assignable locations (l-values) against plain values (r-values)",
    )
    commands = parser.add_subparsers(dest="command")

    commands.add_parser("run", help="Run the checked examples (default)")
    commands.add_parser("anomalies",
        help="Assign into array and record literals that have no name")

    check = commands.add_parser("check", help="Check assignments in a snippet file")
    check.add_argument("file", help="Snippet file to check")
    check.add_argument("--dialect", choices=sorted(lrvalues.DIALECTS),
        default=lrvalues.DEFAULT_DIALECT, help="Language rules to apply")
    check.add_argument("--rich", action="store_true",
        help="Show results as a rich table")

    classify_cmd = commands.add_parser("classify",
        help="Print whether an expression is an l-value or r-value")
    classify_cmd.add_argument("expr", help="Expression source text")
    classify_cmd.add_argument("--dialect", choices=sorted(lrvalues.DIALECTS),
        default=lrvalues.DEFAULT_DIALECT, help="Language rules to apply")

    tree = commands.add_parser("tree", help="Show the lark parse tree of a file")
    tree.add_argument("file", help="Snippet file to parse")
    tree.add_argument("--pos", action="store_true",
        help="Show line:column positions for nodes")

    args = parser.parse_args(argv)

    match args.command:
        case None | "run":
            status = run_examples()
        case "anomalies":
            status = run_anomalies()
        case "check":
            status = check_file(Path(args.file), args.dialect, rich=args.rich)
        case "classify":
            status = classify(args.expr, args.dialect)
        case "tree":
            status = show_tree(Path(args.file), show_positions=args.pos)
    sys.exit(status)


if __name__ == "__main__":
    main()
