"""Assignment examples.

Each example builds its own data, performs one assignment either in place
or through a helper, and checks the result. The helpers never return
anything; the caller observes their effect through the shared object.

The offset `y` is annotated Final in every example. Only the name is
fixed, nothing it could point at.
"""

__all__ = [
    "EXAMPLES",
    "do_assign_box",
    "do_assign_box_set",
    "do_assign_array",
    "do_assign_record",
    "local_var",
    "func_var",
    "local_array",
    "func_array",
    "local_struct",
    "func_struct",
    "anomalies",
    "run_all",
]

from typing import Final

from lrvalues import Box, Record, expect


def local_var():
    """Declare mutable `x` and final `y`, add them together and assign to `x`."""
    x = 1
    y: Final = 2

    x = x + y

    expect("x", x, 3)


def do_assign_box(r: Box, v: int):
    """Assign v into the box by writing its field."""
    r.i = v


def do_assign_box_set(r: Box, v: int):
    """Assign v into the box with its mutator."""
    r.set(v)


def func_var(assign=do_assign_box):
    """Assign `x + y` to a boxed `x` from inside a helper.

    Args:
        assign: Helper that stores a value into the box, either
            `do_assign_box` or `do_assign_box_set`
    """
    x = Box(1)
    y: Final = 2

    assign(x, x.get() + y)

    expect("x.get()", x.get(), 3)


def local_array():
    x = [1, 1]
    y: Final = 2

    x[0] = x[0] + y

    expect("x", x, [3, 1])


def do_assign_array(r: list, v: int):
    r[0] = v


def func_array():
    x = [1, 1]
    y: Final = 2

    do_assign_array(x, x[0] + y)

    expect("x", x, [3, 1])


def local_struct():
    x = Record(i=1, b=True)
    y: Final = 2

    x.i = x.i + y

    expect("x", x, Record(i=3, b=True))


def do_assign_record(r: Record, v: int):
    r.i = v


def func_struct():
    x = Record(i=1, b=True)
    y: Final = 2

    do_assign_record(x, x.i + y)

    expect("x", x, Record(i=3, b=True))


def anomalies():
    """Assign into literals that are never bound to a name.

    The array and record built here are dropped right after the
    assignment. Reading an element of a fresh literal works the same way.
    Nothing is checked; these statements only have to run.
    """
    [1, 1][0] = 3

    Record(i=1, b=True).i = 3

    x = [1, 1][0]


EXAMPLES = [
    local_var,
    func_var,
    local_array,
    func_array,
    local_struct,
    func_struct,
]


def run_all(file=None):
    """Run every checked example in order, then report success.

    The first failed check propagates and nothing is printed.

    Args:
        file: Stream for the success line, stdout when None

    Raises:
        lrvalues.AssertionFailure: From the first example that fails
    """
    for example in EXAMPLES:
        example()
    print("Passed all tests!", file=file)
