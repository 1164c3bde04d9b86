"""GraphQL schema parser using graphql-core.

Reads SDL (.graphql/.graphqls) and collects what the fields generator
needs into an IRSchema: object types with their fields and arguments,
union members, enums, scalars, input names and the root Query fields.
"""

import logging
from pathlib import Path

from graphql import (
    DocumentNode,
    EnumTypeDefinitionNode,
    FieldDefinitionNode,
    GraphQLSyntaxError,
    InputObjectTypeDefinitionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    ListTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    ScalarTypeDefinitionNode,
    TypeNode,
    UnionTypeDefinitionNode,
    UnionTypeExtensionNode,
    parse,
)

from .ir import IRArgument, IREnum, IRField, IRSchema, IRType

logger = logging.getLogger(__name__)

SCHEMA_SUFFIXES = {".graphql", ".graphqls"}

# Root types whose fields cannot appear in a query selection
SKIPPED_ROOTS = {"Mutation", "Subscription"}


def unwrap_type(type_node: TypeNode) -> tuple[str, bool, bool]:
    """Return (named type, is_list, is_optional) for a field or argument type.

    `[Int!]!` gives ("Int", True, False); nullability is taken from the
    outermost wrapper only.
    """
    is_optional = not isinstance(type_node, NonNullTypeNode)
    is_list = False
    while isinstance(type_node, (NonNullTypeNode, ListTypeNode)):
        is_list = is_list or isinstance(type_node, ListTypeNode)
        type_node = type_node.type
    return type_node.name.value, is_list, is_optional


def _description(node) -> str | None:
    description = getattr(node, "description", None)
    return description.value if description else None


class SchemaParser:
    """Parses GraphQL schema files into IR."""

    def __init__(self, schema_path: str):
        """Create a parser for a schema file or a directory of schema files."""
        self.schema_path = schema_path
        self.ir = IRSchema()
        self.current_file = ""

    def parse_all(self) -> IRSchema:
        """Parse every schema file under schema_path and return the IR.

        Raises:
            FileNotFoundError: If no schema file is found.
            GraphQLSyntaxError: If a file is not valid SDL.
        """
        paths = self._schema_files()
        if not paths:
            raise FileNotFoundError(f"No GraphQL schema files found at {self.schema_path}")

        for path in paths:
            self.current_file = path.name
            self.parse_text(path.read_text())

        logger.debug(
            "Parsed %d files: %d types, %d enums, %d root query fields",
            len(paths), len(self.ir.types), len(self.ir.enums), len(self.ir.query_fields),
        )
        return self.ir

    def parse_text(self, content: str) -> IRSchema:
        """Add the definitions of one SDL document to the IR."""
        try:
            document = parse(content)
        except GraphQLSyntaxError:
            logger.error("Error parsing %s", self.current_file or "schema text")
            raise
        self._collect(document)
        return self.ir

    def _schema_files(self) -> list[Path]:
        root = Path(self.schema_path)
        if root.is_file():
            return [root] if root.suffix in SCHEMA_SUFFIXES else []
        return sorted(p for p in root.rglob("*") if p.is_file() and p.suffix in SCHEMA_SUFFIXES)

    def _collect(self, document: DocumentNode):
        for node in document.definitions:
            if isinstance(node, ScalarTypeDefinitionNode):
                self.ir.scalars.add(node.name.value)
            elif isinstance(node, EnumTypeDefinitionNode):
                self.ir.enums[node.name.value] = IREnum(
                    name=node.name.value,
                    values=[value.name.value for value in node.values or ()],
                    description=_description(node),
                )
            elif isinstance(node, InputObjectTypeDefinitionNode):
                self.ir.inputs.add(node.name.value)
            elif isinstance(node, (UnionTypeDefinitionNode, UnionTypeExtensionNode)):
                members = self.ir.unions.setdefault(node.name.value, [])
                for member in node.types or ():
                    if member.name.value not in members:
                        members.append(member.name.value)
            elif isinstance(
                node,
                (ObjectTypeDefinitionNode, InterfaceTypeDefinitionNode, ObjectTypeExtensionNode),
            ):
                self._add_object_type(node)

    def _add_object_type(self, node):
        """Record an object, interface or 'extend type' definition.

        Query fields become root query fields. Extensions add their fields
        to the type they extend.
        """
        name = node.name.value
        if name in SKIPPED_ROOTS:
            return

        fields = [self._to_field(f) for f in node.fields or ()]
        if name == "Query":
            self.ir.query_fields.extend(fields)
            return

        ir_type = self.ir.types.setdefault(name, IRType(name=name, fields=[]))
        known = {f.name for f in ir_type.fields}
        ir_type.fields.extend(f for f in fields if f.name not in known)
        ir_type.description = _description(node) or ir_type.description

    @staticmethod
    def _to_argument(node: InputValueDefinitionNode) -> IRArgument:
        type_name, is_list, is_optional = unwrap_type(node.type)
        return IRArgument(
            name=node.name.value,
            type_name=type_name,
            is_list=is_list,
            is_optional=is_optional,
            description=_description(node),
        )

    def _to_field(self, node: FieldDefinitionNode) -> IRField:
        type_name, is_list, is_optional = unwrap_type(node.type)
        return IRField(
            name=node.name.value,
            type_name=type_name,
            is_list=is_list,
            is_optional=is_optional,
            description=_description(node),
            arguments=[self._to_argument(a) for a in node.arguments or ()],
        )
