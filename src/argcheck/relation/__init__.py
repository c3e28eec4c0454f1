"""Test primitives and the composition algebra.

This layer depends only on the standard library. It must never import from
``argcheck.msg`` or ``argcheck.checks``.
"""

from argcheck.relation.composable import (
    ComposableIntPredicate,
    ComposablePredicate,
    int_predicate,
    predicate,
)
from argcheck.relation.compose import (
    invalid,
    invalid_int,
    invalid_int_when,
    invalid_when,
    valid,
    valid_if,
    valid_int,
    valid_int_if,
    valid_int_when,
    valid_when,
)
from argcheck.relation.quantifier import Quantifier, quantify
from argcheck.relation.types import (
    IntObjRelation,
    IntRelation,
    ObjIntRelation,
    Relation,
    int_obj_relation,
    int_relation,
    obj_int_relation,
    relation,
)

__all__ = [
    "ComposableIntPredicate",
    "ComposablePredicate",
    "IntObjRelation",
    "IntRelation",
    "ObjIntRelation",
    "Quantifier",
    "Relation",
    "int_obj_relation",
    "int_predicate",
    "int_relation",
    "invalid",
    "invalid_int",
    "invalid_int_when",
    "invalid_when",
    "obj_int_relation",
    "predicate",
    "quantify",
    "relation",
    "valid",
    "valid_if",
    "valid_int",
    "valid_int_if",
    "valid_int_when",
    "valid_when",
]
