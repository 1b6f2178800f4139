"""Parse assignment snippets into nodes.

The grammar lives in `lark/lrvalue.lark`. The intermediate lark tree is
converted right away; callers only see the node classes. Every node keeps
the (line, column) where its source text started.
"""

__all__ = ["parse", "parse_expr", "lark_tree"]

import pathlib

import lark

import lrvalues


# Global parser instances (cached by start rule)
_parsers: dict[str, lark.Lark] = {}


def parse(text):
    """Parse a snippet of statements.

    Args:
        text: Snippet source code

    Returns:
        Script node containing all statements

    Raises:
        lrvalues.ParseError: If the text contains invalid syntax
    """
    tree = _parse_tree(text, "start")
    script = lrvalues.Script([_convert_tree(kid) for kid in tree.children])
    script.position = (1, 1)
    return script


def parse_expr(text):
    """Parse a single expression.

    Raises:
        lrvalues.ParseError: If the text contains invalid syntax
    """
    tree = _parse_tree(text, "expr_start")
    return _convert_tree(tree.children[0])


def lark_tree(text, start="start"):
    """Parse text and return the raw lark tree, for diagnostics."""
    return _parse_tree(text, start)


def _parse_tree(text, start):
    parser = _get_parser(start)
    try:
        return parser.parse(text)
    except lark.exceptions.UnexpectedInput as e:
        # Lark's own message continues with the full list of expected tokens
        message = str(e).strip().splitlines()[0]
        position = None
        if isinstance(e.line, int) and e.line > 0:
            position = (e.line, e.column)
        raise lrvalues.ParseError(message, position) from e
    except lark.exceptions.LarkError as e:
        raise lrvalues.ParseError(str(e)) from e


def _position(tree):
    """The (line, column) a tree or token starts at."""
    if isinstance(tree, lark.Token):
        return (tree.line, tree.column)
    meta = tree.meta
    if meta.empty:
        return (None, None)
    return (meta.line, meta.column)


def _convert_tree(tree):
    """Convert a single lark tree to a node, recursing into children.

    Args:
        tree: (lark.Tree) Tree to convert

    Returns:
        (lrvalues.Node) Converted node
    """
    if isinstance(tree, lark.Token):
        raise ValueError(f"Unhandled grammar token: {tree}")

    kids = tree.children
    match tree.data:
        # Statements
        case "declare":
            binder, name, value = kids
            node = lrvalues.Declare(
                name.value, binder.type == "CONST", _convert_tree(value)
            )
        case "assign":
            node = lrvalues.Assign(_convert_tree(kids[0]), _convert_tree(kids[1]))
        case "expr_stmt":
            node = lrvalues.ExprStmt(_convert_tree(kids[0]))

        # Literals
        case "number":
            node = lrvalues.Number(int(kids[0].value))
        case "true":
            node = lrvalues.Bool(True)
        case "false":
            node = lrvalues.Bool(False)
        case "array":
            node = lrvalues.ArrayLit(_convert_arguments(kids[0]))
        case "record":
            type_name, inits = kids
            names = []
            values = []
            if inits is not None:
                for init in inits.children:
                    names.append(init.children[0].value)
                    values.append(_convert_tree(init.children[1]))
            node = lrvalues.RecordLit(type_name.value, names, values)

        # Locations and operators
        case "name":
            node = lrvalues.Name(kids[0].value)
        case "binary":
            left, op, right = kids
            node = lrvalues.Binary(op.value, _convert_tree(left), _convert_tree(right))
        case "index":
            node = lrvalues.Index(_convert_tree(kids[0]), _convert_tree(kids[1]))
        case "field":
            node = lrvalues.Field(_convert_tree(kids[0]), kids[1].value)
        case "call":
            func = _convert_tree(kids[0])
            node = lrvalues.Call(func, _convert_arguments(kids[1]))
        case "deref":
            node = lrvalues.Deref(_convert_tree(kids[0]))
        case "address":
            node = lrvalues.Address(_convert_tree(kids[0]))
        case _:
            raise ValueError(f"Unhandled grammar rule: {tree.data}")

    node.position = _position(tree)
    return node


def _convert_arguments(tree):
    """Convert an optional `arguments` tree to a list of nodes."""
    if tree is None:
        return []
    return [_convert_tree(kid) for kid in tree.children]


def _get_parser(start):
    """Get a cached lark parser instance for the given start rule.

    Args:
        start (str): Grammar start rule, "start" or "expr_start"

    Returns:
        lark.Lark: Cached lark parser instance
    """
    if start not in _parsers:
        grammar_path = pathlib.Path(__file__).parent / "lark" / "lrvalue.lark"
        _parsers[start] = lark.Lark(
            grammar_path.read_text(encoding="utf-8"),
            parser="lalr",
            start=start,
            propagate_positions=True,
            maybe_placeholders=True,
        )
    return _parsers[start]
