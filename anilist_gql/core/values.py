"""GraphQL literal rendering for argument values.

Python values are converted to graphql-core value nodes and printed with
graphql-core's printer, which handles string escaping and list/object
formatting.

    render_value("Cowboy Bebop")           # '"Cowboy Bebop"'
    render_value([MediaSort.SCORE_DESC])   # '[SCORE_DESC]'
    render_value(date(2024, 1, 15))        # '20240115' (FuzzyDateInt)
"""

import math
from collections.abc import Mapping
from datetime import date
from enum import Enum
from typing import Any

from graphql import (
    BooleanValueNode,
    EnumValueNode,
    FloatValueNode,
    IntValueNode,
    ListValueNode,
    NameNode,
    NullValueNode,
    ObjectFieldNode,
    ObjectValueNode,
    StringValueNode,
    ValueNode,
    print_ast,
)
from pydantic import BaseModel


def fuzzy_date_int(value: date) -> int:
    """AniList FuzzyDateInt for a date: YYYYMMDD as an integer."""
    return value.year * 10000 + value.month * 100 + value.day


def value_to_node(value: Any) -> ValueNode:
    """Convert a Python value to a graphql-core value node.

    Raises:
        TypeError: If the value has no GraphQL literal form.
    """
    if value is None:
        return NullValueNode()
    # Enum before str: str-based enums render as bare names
    if isinstance(value, Enum):
        return EnumValueNode(value=str(value.value))
    if isinstance(value, bool):
        return BooleanValueNode(value=value)
    if isinstance(value, int):
        return IntValueNode(value=str(value))
    if isinstance(value, float):
        if not math.isfinite(value):
            raise TypeError(f"Cannot render non-finite float {value!r} as a GraphQL literal.")
        return FloatValueNode(value=repr(value))
    if isinstance(value, str):
        return StringValueNode(value=value, block=False)
    if isinstance(value, date):
        return IntValueNode(value=str(fuzzy_date_int(value)))
    if isinstance(value, BaseModel):
        value = value.model_dump(by_alias=True, exclude_none=True)
    if isinstance(value, Mapping):
        return ObjectValueNode(fields=tuple(
            ObjectFieldNode(name=NameNode(value=str(key)), value=value_to_node(item))
            for key, item in value.items()
        ))
    if isinstance(value, (list, tuple)):
        return ListValueNode(values=tuple(value_to_node(item) for item in value))
    raise TypeError(f"Cannot render {type(value).__name__} as a GraphQL literal.")


def render_value(value: Any) -> str:
    """Render a Python value as GraphQL literal text."""
    return print_ast(value_to_node(value))
