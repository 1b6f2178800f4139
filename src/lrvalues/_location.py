"""Storage locations and name bindings.

Lists and objects are already shared by reference, so a helper that
receives one can assign into it and the caller sees the change. Integers
are immutable values; a scalar that a helper must update lives in a Box.

Whether a name can be rebound and whether the content it holds can be
mutated are separate questions. A final Binding refuses a new value but
says nothing about the object it holds.
"""

__all__ = ["Box", "Record", "Binding", "Scope"]

from dataclasses import dataclass

import lrvalues


class Box:
    """Mutable cell holding a single value.

    The held value can be written directly through the `i` attribute or
    with `set`. Both reach the same storage.

    Args:
        i: Initial held value

    Attributes:
        i: The held value
    """
    __slots__ = ("i",)

    def __init__(self, i):
        self.i = i

    def get(self):
        return self.i

    def set(self, i):
        self.i = i

    def __repr__(self):
        return f"Box({self.i!r})"


@dataclass
class Record:
    """Two field aggregate, compared by value."""
    i: int
    b: bool


class Binding:
    """A name bound to a value.

    Args:
        name: (str) Bound name
        value: Bound value
        final: (bool) Name cannot be rebound once declared

    Attributes:
        name: (str) Bound name
        value: Currently bound value
        final: (bool) Name cannot be rebound once declared
    """
    __slots__ = ("name", "value", "final")

    def __init__(self, name, value=None, final=False):
        self.name = name
        self.value = value
        self.final = final

    def rebind(self, value, position=None):
        """Replace the bound value.

        Raises:
            lrvalues.AssignError: If the binding is final
        """
        if self.final:
            raise lrvalues.AssignError(
                f"cannot assign twice to immutable binding '{self.name}'", position
            )
        self.value = value

    def __repr__(self):
        kind = "const" if self.final else "var"
        return f"Binding({kind} {self.name}={self.value!r})"


class Scope:
    """Names declared in one block.

    Declaring a name that already exists replaces the earlier binding
    instead of failing; later lookups see the newest declaration.
    """

    def __init__(self):
        self.bindings = {}

    def declare(self, name, value=None, final=False):
        """Bind a name in this scope and return the new Binding."""
        binding = Binding(name, value, final)
        self.bindings[name] = binding
        return binding

    def lookup(self, name):
        """Find the binding for a name, or None when it was never declared."""
        return self.bindings.get(name)

    def assign(self, name, value, position=None):
        """Rebind an existing name.

        Raises:
            lrvalues.AssignError: If the name is undeclared or final
        """
        binding = self.lookup(name)
        if binding is None:
            raise lrvalues.AssignError(f"'{name}' is not declared", position)
        binding.rebind(value, position)

    def __getitem__(self, name):
        binding = self.lookup(name)
        if binding is None:
            raise KeyError(name)
        return binding.value

    def __contains__(self, name):
        return self.lookup(name) is not None
