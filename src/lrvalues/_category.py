"""Value categories and assignment legality.

An expression is an l-value when it designates storage that an assignment
can write, and an r-value when it only produces a value. The rules are
small and syntactic:

    x : name                ->  l-value
    *e                      ->  l-value
    &e                      ->  r-value   (e usually an l-value)
    literal, e + e, f(...)  ->  r-value
    e[i], e.f               ->  l-value when e is one

Languages disagree at the edges. A C compound literal is itself an
l-value. Go lets a fresh slice literal be indexed and assigned but not a
fresh struct literal. Java and Rust accept both. Go and Rust can take the
address of a fresh literal, and Rust of any value. Whether a `const`
binding also freezes the array or struct it holds differs too. Each
Dialect records these choices as flags.
"""

__all__ = [
    "LVALUE",
    "RVALUE",
    "Dialect",
    "DIALECTS",
    "DEFAULT_DIALECT",
    "get_dialect",
    "category",
    "check_assign",
    "check_script",
    "check_source",
    "Verdict",
]

from dataclasses import dataclass

import lrvalues


LVALUE = "l-value"
RVALUE = "r-value"


@dataclass(frozen=True)
class Dialect:
    """Value category rules for one language.

    Attributes:
        name: Dialect name
        literal_place: Array and record literals are l-values themselves
        temporary_index: Indexing an r-value gives an l-value
        temporary_field: Field access on an r-value gives an l-value
        const_reaches_content: A final binding also freezes elements and
            fields reached through it
        pointers: The dialect has `*` and `&`
        address_of_literal: `&` accepts a fresh array or record literal
        address_of_value: `&` accepts any r-value, promoting it to a
            temporary
    """
    name: str
    literal_place: bool
    temporary_index: bool
    temporary_field: bool
    const_reaches_content: bool
    pointers: bool
    address_of_literal: bool = False
    address_of_value: bool = False


DIALECTS = {
    dialect.name: dialect
    for dialect in [
        Dialect("c", literal_place=True, temporary_index=True,
                temporary_field=False, const_reaches_content=True, pointers=True),
        Dialect("go", literal_place=False, temporary_index=True,
                temporary_field=False, const_reaches_content=False, pointers=True,
                address_of_literal=True),
        Dialect("java", literal_place=False, temporary_index=True,
                temporary_field=True, const_reaches_content=False, pointers=False),
        Dialect("rust", literal_place=False, temporary_index=True,
                temporary_field=True, const_reaches_content=True, pointers=True,
                address_of_literal=True, address_of_value=True),
    ]
}

DEFAULT_DIALECT = "java"


def get_dialect(name=None):
    """Look up a dialect by name, the default one when name is None.

    Raises:
        ValueError: For an unknown dialect name
    """
    if isinstance(name, Dialect):
        return name
    try:
        return DIALECTS[name or DEFAULT_DIALECT]
    except KeyError:
        known = ", ".join(sorted(DIALECTS))
        raise ValueError(f"Unknown dialect {name!r}, expected one of {known}") from None


def category(expr, dialect=None):
    """Classify an expression as LVALUE or RVALUE.

    Nested expressions are classified too, so an unsupported form anywhere
    in the tree is reported.

    Args:
        expr: (lrvalues.Node) Expression to classify
        dialect: (Dialect | str | None) Rules to apply

    Returns:
        LVALUE or RVALUE

    Raises:
        lrvalues.CategoryError: For `*`/`&` in a dialect without pointers,
            or the address of an r-value the dialect cannot promote
    """
    dialect = get_dialect(dialect)
    match expr:
        case lrvalues.Name():
            return LVALUE
        case lrvalues.Deref():
            _require_pointers(expr, "dereference", dialect)
            category(expr.operand, dialect)
            return LVALUE
        case lrvalues.Address():
            _require_pointers(expr, "address-of", dialect)
            operand = expr.operand
            is_literal = isinstance(operand, (lrvalues.ArrayLit, lrvalues.RecordLit))
            if (
                category(operand, dialect) != LVALUE
                and not dialect.address_of_value
                and not (is_literal and dialect.address_of_literal)
            ):
                raise lrvalues.CategoryError(
                    f"cannot take the address of r-value '{expr.operand.unparse()}'",
                    expr.position,
                )
            return RVALUE
        case lrvalues.ArrayLit() | lrvalues.RecordLit():
            for kid in expr.kids:
                category(kid, dialect)
            return LVALUE if dialect.literal_place else RVALUE
        case lrvalues.Index():
            category(expr.index, dialect)
            if category(expr.base, dialect) == LVALUE or dialect.temporary_index:
                return LVALUE
            return RVALUE
        case lrvalues.Field():
            if category(expr.base, dialect) == LVALUE or dialect.temporary_field:
                return LVALUE
            return RVALUE
        case _:
            for kid in expr.kids:
                category(kid, dialect)
            return RVALUE


def _require_pointers(expr, what, dialect):
    if not dialect.pointers:
        raise lrvalues.CategoryError(
            f"{dialect.name} has no {what} operator", expr.position
        )


def _root_name(expr):
    """Find the name whose storage an access path writes into.

    Returns None when the path starts at a literal, a call, or goes
    through a dereference, since that storage belongs to no binding.
    """
    while isinstance(expr, (lrvalues.Index, lrvalues.Field)):
        expr = expr.base
    if isinstance(expr, lrvalues.Name):
        return expr
    return None


def check_assign(target, scope, dialect=None, value=None):
    """Check that an assignment to target is legal.

    A direct name is rebound in the scope. A longer access path writes
    into the content of its root binding, which only a dialect with
    `const_reaches_content` refuses for final bindings.

    Args:
        target: (lrvalues.Node) Assignment target expression
        scope: (lrvalues.Scope) Declared names
        dialect: (Dialect | str | None) Rules to apply
        value: (lrvalues.Node | None) Assigned expression, stored in the
            binding when a name is rebound

    Raises:
        lrvalues.AssignError: If the assignment is illegal
        lrvalues.CategoryError: If the target uses an unsupported form
    """
    dialect = get_dialect(dialect)
    if category(target, dialect) != LVALUE:
        raise lrvalues.AssignError(
            f"cannot assign to r-value '{target.unparse()}'", target.position
        )

    if isinstance(target, lrvalues.Name):
        scope.assign(target.name, value, target.position)
        return

    root = _root_name(target)
    if root is None:
        return
    binding = scope.lookup(root.name)
    if binding is None:
        raise lrvalues.AssignError(f"'{root.name}' is not declared", root.position)
    if binding.final and dialect.const_reaches_content:
        raise lrvalues.AssignError(
            f"cannot assign into immutable binding '{root.name}' in {dialect.name}",
            target.position,
        )


@dataclass
class Verdict:
    """Outcome of checking one statement.

    Attributes:
        statement: Checked statement node
        error: Exception raised by the check, None when legal
    """
    statement: "lrvalues.Node"
    error: Exception | None = None

    @property
    def ok(self):
        return self.error is None

    def format(self):
        line = self.statement.position[0]
        status = "ok" if self.ok else f"error: {self.error}"
        return f"{line}: {self.statement.unparse()}  {status}"


def check_script(script, dialect=None):
    """Check every statement of a parsed script.

    Declarations are recorded in a fresh scope as the walk goes, so later
    statements see earlier names. An illegal statement is recorded and the
    walk continues. An illegal declaration still declares its name.

    Returns:
        (list[Verdict]) One verdict per statement, in source order
    """
    dialect = get_dialect(dialect)
    scope = lrvalues.Scope()
    verdicts = []
    for statement in script.statements:
        try:
            _check_statement(statement, scope, dialect)
        except (lrvalues.AssignError, lrvalues.CategoryError) as e:
            verdicts.append(Verdict(statement, e))
        else:
            verdicts.append(Verdict(statement))
    return verdicts


def check_source(text, dialect=None):
    """Parse and check a snippet.

    Raises:
        lrvalues.ParseError: If the text contains invalid syntax
    """
    return check_script(lrvalues.parse(text), dialect)


def _check_statement(statement, scope, dialect):
    match statement:
        case lrvalues.Declare():
            scope.declare(statement.name, statement.value, statement.final)
            category(statement.value, dialect)
        case lrvalues.Assign():
            category(statement.value, dialect)
            check_assign(statement.target, scope, dialect, statement.value)
        case lrvalues.ExprStmt():
            category(statement.expr, dialect)
        case _:
            raise ValueError(f"Unexpected statement {statement!r}")
