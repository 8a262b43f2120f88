"""
Traversals: a composable algebra for reading and rewriting parts of data.

A traversal locates zero or more parts inside a root. It is built once from
combinators and replayed against any root, either to enumerate the parts or
to push modified values back into them.

Architecture:
- Expr nodes (ast.py) lower into continuation-passing form:
  consumer of parts -> consumer of roots
- Traversal (traversal.py) is the fluent builder over those nodes
- materialize.py runs traversals: traverse, parts_of and friends
- writer/ holds the Log and WriterResult used for logging as data
"""

# Core types
from ._types import Consumer, Expand, Getter, IndexPredicate, Lowered, Predicate, Putter

# Internal helpers
from . import _helpers

# AST
from .ast import Expr

# Builder
from .traversal import Traversal, identity_for

# Indexed parts
from .indexed import Counter, Indexed

# Materialization
from .materialize import (
    catching,
    collect,
    count,
    first,
    parts_of,
    single,
    traverse,
    traverse_w,
)

# Writer
from . import writer
from .writer import Log, WriterResult

# Errors
from ._errors import PartCountError

__all__ = (
    # Types
    "Consumer",
    "Expand",
    "Getter",
    "IndexPredicate",
    "Lowered",
    "Predicate",
    "Putter",
    # Internal helpers
    "_helpers",
    # AST
    "Expr",
    # Builder
    "Traversal",
    "identity_for",
    # Indexed parts
    "Counter",
    "Indexed",
    # Materialization
    "catching",
    "collect",
    "count",
    "first",
    "parts_of",
    "single",
    "traverse",
    "traverse_w",
    # Writer
    "writer",
    "Log",
    "WriterResult",
    # Errors
    "PartCountError",
)
