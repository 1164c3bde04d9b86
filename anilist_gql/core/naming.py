"""Name conversions shared by containers, the generator and the CLI."""

import re


def to_snake_case(name: str) -> str:
    """Convert camelCase or PascalCase to snake_case."""
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', name)
    return re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1).lower()


def to_pascal_case(name: str) -> str:
    """Convert snake_case or camelCase to PascalCase."""
    snake = to_snake_case(name)
    return "".join(word[:1].upper() + word[1:] for word in snake.split("_"))


def describe_class(name: str, suffix: str) -> str:
    """Human label for a container class name.

    'StudioEdgeQueryFields' with suffix 'QueryFields' becomes 'studio edge'.
    """
    if name.endswith(suffix):
        name = name[:-len(suffix)]
    return to_snake_case(name).replace("_", " ")
