"""Nodes for parsed assignment snippets"""

__all__ = [
    "Node",
    "Name",
    "Number",
    "Bool",
    "Binary",
    "ArrayLit",
    "RecordLit",
    "Index",
    "Field",
    "Call",
    "Deref",
    "Address",
    "Declare",
    "Assign",
    "ExprStmt",
    "Script",
]


class Node:
    """Base class for all nodes."""

    def __init__(self, kids: list["Node"] | None = None):
        """Initialize node with child nodes.

        Args:
            kids: List of child nodes
        """
        self.kids = list(kids) if kids else []
        self.position = (None, None)

    def __repr__(self):
        """Compact representation showing type and key attributes."""
        attrs = []
        if self.kids:
            attrs.append(f'*{len(self.kids)}')
        for key, value in self.__dict__.items():
            if key not in ('kids', 'position'):
                attrs.append(f'{key}={value!r}')
        return f"{self.__class__.__name__}({' '.join(attrs)})"

    def find_all(self, node_type):
        """Find all descendants of given type, including self."""
        results = [self] if isinstance(self, node_type) else []
        for kid in self.kids:
            results.extend(kid.find_all(node_type))
        return results

    def matches(self, other) -> bool:
        """Compare structure and attributes, ignoring positions."""
        if not isinstance(other, type(self)):
            return False
        for key, value in self.__dict__.items():
            if key in ('kids', 'position'):
                continue
            if getattr(other, key, None) != value:
                return False
        if len(self.kids) != len(other.kids):
            return False
        return all(a.matches(b) for a, b in zip(self.kids, other.kids))

    def unparse(self) -> str:
        """Convert back to snippet source text."""
        raise NotImplementedError(f"{self.__class__.__name__}.unparse")


def _operand(node):
    """Unparse a node used as a prefix or postfix operand."""
    text = node.unparse()
    if isinstance(node, (Binary, Deref, Address)):
        return f"({text})"
    return text


class Name(Node):
    """Reference to a declared name."""

    def __init__(self, name: str):
        super().__init__()
        self.name = name

    def unparse(self) -> str:
        return self.name


class Number(Node):
    """Integer literal."""

    def __init__(self, value: int):
        super().__init__()
        self.value = value

    def unparse(self) -> str:
        return str(self.value)


class Bool(Node):
    """Boolean literal."""

    def __init__(self, value: bool):
        super().__init__()
        self.value = value

    def unparse(self) -> str:
        return "true" if self.value else "false"


class Binary(Node):
    """Addition or subtraction of two operands."""

    def __init__(self, op: str, left: Node, right: Node):
        super().__init__([left, right])
        self.op = op

    @property
    def left(self):
        return self.kids[0]

    @property
    def right(self):
        return self.kids[1]

    def unparse(self) -> str:
        right = self.right.unparse()
        if isinstance(self.right, Binary):
            right = f"({right})"
        return f"{self.left.unparse()} {self.op} {right}"


class ArrayLit(Node):
    """Array literal, `[1, 1]`."""

    def unparse(self) -> str:
        items = ", ".join(kid.unparse() for kid in self.kids)
        return f"[{items}]"


class RecordLit(Node):
    """Record literal, `S{i: 1, b: true}`.

    Field names are kept in `fields`, in the same order as the kid
    nodes holding their values.
    """

    def __init__(self, type_name: str, fields: list[str], values: list[Node]):
        super().__init__(values)
        self.type_name = type_name
        self.fields = list(fields)

    def unparse(self) -> str:
        inits = ", ".join(
            f"{name}: {kid.unparse()}" for name, kid in zip(self.fields, self.kids)
        )
        return f"{self.type_name}{{{inits}}}"


class Index(Node):
    """Element access, `base[index]`."""

    def __init__(self, base: Node, index: Node):
        super().__init__([base, index])

    @property
    def base(self):
        return self.kids[0]

    @property
    def index(self):
        return self.kids[1]

    def unparse(self) -> str:
        return f"{_operand(self.base)}[{self.index.unparse()}]"


class Field(Node):
    """Field access, `base.name`."""

    def __init__(self, base: Node, name: str):
        super().__init__([base])
        self.name = name

    @property
    def base(self):
        return self.kids[0]

    def unparse(self) -> str:
        return f"{_operand(self.base)}.{self.name}"


class Call(Node):
    """Function call. The first kid is the callee, the rest are arguments."""

    def __init__(self, func: Node, args: list[Node]):
        super().__init__([func, *args])

    @property
    def func(self):
        return self.kids[0]

    @property
    def args(self):
        return self.kids[1:]

    def unparse(self) -> str:
        args = ", ".join(arg.unparse() for arg in self.args)
        return f"{_operand(self.func)}({args})"


class Deref(Node):
    """Pointer dereference, `*operand`."""

    def __init__(self, operand: Node):
        super().__init__([operand])

    @property
    def operand(self):
        return self.kids[0]

    def unparse(self) -> str:
        return f"*{_operand(self.operand)}"


class Address(Node):
    """Address of a location, `&operand`."""

    def __init__(self, operand: Node):
        super().__init__([operand])

    @property
    def operand(self):
        return self.kids[0]

    def unparse(self) -> str:
        return f"&{_operand(self.operand)}"


class Declare(Node):
    """Declaration binding a name, `var x = 1` or `const y = 2`."""

    def __init__(self, name: str, final: bool, value: Node):
        super().__init__([value])
        self.name = name
        self.final = final

    @property
    def value(self):
        return self.kids[0]

    def unparse(self) -> str:
        binder = "const" if self.final else "var"
        return f"{binder} {self.name} = {self.value.unparse()}"


class Assign(Node):
    """Assignment statement, `target = value`."""

    def __init__(self, target: Node, value: Node):
        super().__init__([target, value])

    @property
    def target(self):
        return self.kids[0]

    @property
    def value(self):
        return self.kids[1]

    def unparse(self) -> str:
        return f"{self.target.unparse()} = {self.value.unparse()}"


class ExprStmt(Node):
    """Expression evaluated for nothing but its category."""

    def __init__(self, expr: Node):
        super().__init__([expr])

    @property
    def expr(self):
        return self.kids[0]

    def unparse(self) -> str:
        return self.expr.unparse()


class Script(Node):
    """Sequence of statements from one source text."""

    @property
    def statements(self):
        return self.kids

    def unparse(self) -> str:
        return "\n".join(kid.unparse() for kid in self.kids)
