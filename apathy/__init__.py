"""Pure predicates for reasoning about how two filesystem paths relate."""

from .relations import classify, is_ancestor, is_descendant, is_equal, is_sibling, parent, resolve
from ._types import Relation, RelationReport

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "resolve",
    "parent",
    "is_descendant",
    "is_ancestor",
    "is_sibling",
    "is_equal",
    "classify",
    "Relation",
    "RelationReport",
]
