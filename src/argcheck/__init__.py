"""argcheck: composable argument checks with readable failure messages."""

from argcheck.check import Check, CheckResult, ObjectCheck
from argcheck.errors import CorruptCheckError
from argcheck.relation import (
    ComposableIntPredicate,
    ComposablePredicate,
    IntObjRelation,
    IntRelation,
    ObjIntRelation,
    Quantifier,
    Relation,
    invalid,
    invalid_int,
    valid,
    valid_int,
)

__version__ = "0.4.0"

__all__ = [
    "Check",
    "CheckResult",
    "ComposableIntPredicate",
    "ComposablePredicate",
    "CorruptCheckError",
    "IntObjRelation",
    "IntRelation",
    "ObjIntRelation",
    "ObjectCheck",
    "Quantifier",
    "Relation",
    "__version__",
    "invalid",
    "invalid_int",
    "valid",
    "valid_int",
]
