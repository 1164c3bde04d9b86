"""Intermediate Representation (IR) of a GraphQL schema for field generation.

Only the parts needed to generate query fields containers are kept:
object types, their fields and field arguments, unions, enums, scalars
and the root Query fields.
"""

from dataclasses import dataclass, field


@dataclass
class IRArgument:
    """Represents an argument of a field."""
    name: str
    type_name: str
    is_list: bool = False
    is_optional: bool = True
    description: str | None = None


@dataclass
class IRField:
    """Represents a field of an object type."""
    name: str
    type_name: str
    is_list: bool = False
    is_optional: bool = True  # True if nullable (no ! in GraphQL)
    description: str | None = None
    arguments: list[IRArgument] = field(default_factory=list)


@dataclass
class IREnum:
    """Represents a GraphQL enum type."""
    name: str
    values: list[str]
    description: str | None = None


@dataclass
class IRType:
    """Represents a GraphQL object or interface type."""
    name: str
    fields: list[IRField]
    description: str | None = None


@dataclass
class IRSchema:
    """Complete intermediate representation of a GraphQL schema."""
    scalars: set[str] = field(default_factory=set)
    enums: dict[str, IREnum] = field(default_factory=dict)
    types: dict[str, IRType] = field(default_factory=dict)
    inputs: set[str] = field(default_factory=set)
    unions: dict[str, list[str]] = field(default_factory=dict)  # union -> member types
    query_fields: list[IRField] = field(default_factory=list)

    def get_type_by_name(self, name: str) -> IRType | None:
        """Look up an object or interface type by name."""
        return self.types.get(name)

    def is_object_type(self, name: str) -> bool:
        return name in self.types

    def is_union(self, name: str) -> bool:
        return name in self.unions

    def reachable_types(self, root_type: str) -> set[str]:
        """All object types reachable from root_type through fields, root included.

        Union-typed fields lead to every member type of the union.
        """
        seen: set[str] = set()
        pending = [root_type]
        while pending:
            name = pending.pop()
            if name in self.unions:
                pending.extend(self.unions[name])
                continue
            if name in seen or name not in self.types:
                continue
            seen.add(name)
            pending.extend(f.type_name for f in self.types[name].fields)
        return seen
