"""
Assignment semantics examples

Small demonstrations of assignable locations (l-values) against plain
values (r-values), plus a checker that classifies assignment targets the
way several languages do.
"""

__version__ = "0.1.0"


from ._error import *
from ._location import *
from ._examples import *
from ._node import *
from ._parse import *
from ._category import *
