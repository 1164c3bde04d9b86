"""Query fields generator for GraphQL schemas.

Renders a Jinja2 template to produce one Python module holding the enums,
query arguments containers and query fields containers of a schema:

    ir = SchemaParser("./anilist.graphql").parse_all()
    code = FieldsGenerator(ir).generate_code()

Which query types may use a type is derived from the schema: a type is
allowed in a query type when it is reachable from the root Query field of
that name (e.g. Query.Media for QueryType.MEDIA). Union-typed fields are
left out, but the member types of a union are generated.

Supports custom templates via the template_dir parameter; templates there
take precedence over the package template.
"""

import ast
import keyword
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .ir import IRArgument, IRField, IRSchema, IRType
from .naming import to_pascal_case, to_snake_case
from .types import ALL_QUERY_TYPES, QueryType

logger = logging.getLogger(__name__)

# GraphQL scalar -> (expected type expression, annotation)
SCALAR_TYPES = {
    "Int": ("int", "int"),
    "Float": ("float", "float"),
    "String": ("str", "str"),
    "Boolean": ("bool", "bool"),
    "ID": ("(int, str)", "int | str"),
    "FuzzyDateInt": ("(int, date)", "int | date"),
    "CountryCode": ("str", "str"),
}

# Attributes of the container base classes that accessors must not shadow
RESERVED_FIELD_NAMES = {"definitions", "field_names", "label", "query_type"}
RESERVED_ARGUMENT_NAMES = {"label"}


def safe_name(name: str, reserved: set[str] = frozenset()) -> str:
    """Make a name usable as a Python method or attribute name."""
    if keyword.iskeyword(name) or name in reserved:
        return f"{name}_"
    return name


def docstring(text: str | None) -> str:
    """Collapse a schema description to one line safe inside triple quotes."""
    if not text:
        return ""
    text = " ".join(text.split())
    if len(text) > 100:
        text = text[:97] + "..."
    text = text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
    if text.endswith('"'):
        text += " "
    return text


@dataclass(frozen=True)
class RuleSet:
    """A distinct FieldRules value rendered as a module constant."""
    requires_arguments: bool
    query_types: frozenset[QueryType]

    @property
    def name(self) -> str:
        if self.query_types == ALL_QUERY_TYPES:
            base = "ALL"
        else:
            base = "_".join(qt.name for qt in sorted(self.query_types, key=lambda q: q.name))
        suffix = "_WITH_ARGUMENTS" if self.requires_arguments else ""
        return f"{base}_QUERIES{suffix}"

    @property
    def query_type_refs(self) -> list[str]:
        return [f"QueryType.{qt.name}" for qt in sorted(self.query_types, key=lambda q: q.name)]


class FieldsGenerator:
    """Generates query fields and arguments containers from GraphQL IR."""

    TEMPLATE = "fields.py.j2"

    def __init__(self, ir: IRSchema, template_dir: str | None = None):
        self.ir = ir
        self.template_dir = template_dir

        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("anilist_gql", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["repr"] = repr
        self.env.filters["docstring"] = docstring

    def compute_query_types(self) -> dict[str, frozenset[QueryType]]:
        """Map each object type to the query types it is reachable from."""
        allowed: dict[str, set[QueryType]] = {}
        for root in self.ir.query_fields:
            query_type = QueryType.from_root_field(root.name)
            if query_type is None:
                logger.debug("Skipping root query field %s with no query type", root.name)
                continue
            for type_name in self.ir.reachable_types(root.type_name):
                allowed.setdefault(type_name, set()).add(query_type)
        return {name: frozenset(types) for name, types in allowed.items()}

    def generate_code(self) -> str:
        """Render the module and check that it is valid Python."""
        context = self._build_context()
        template = self.env.get_template(self.TEMPLATE)
        content = template.render(context)

        try:
            ast.parse(content)
        except SyntaxError as e:
            raise ValueError(
                f"Generated invalid Python: {e}\nTemplate: {self.TEMPLATE}"
            ) from e

        logger.debug(
            "Generated %d query fields classes and %d query arguments classes",
            len(context["field_classes"]), len(context["argument_classes"]),
        )
        return content

    def write(self, output_path: str) -> str:
        """Generate the module and write it to output_path."""
        code = self.generate_code()
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(code)
        return code

    def _build_context(self) -> dict[str, Any]:
        query_types = self.compute_query_types()
        rule_sets: dict[RuleSet, None] = {}
        field_classes = []
        argument_classes = []

        # Root arguments, named the way QueryBuilder looks them up
        for root in self.ir.query_fields:
            if root.arguments and QueryType.from_root_field(root.name):
                argument_classes.append(
                    self._argument_class_context(f"{root.name}QueryArguments", "Query", root)
                )

        for ir_type in self.ir.types.values():
            allowed = query_types.get(ir_type.name)
            if not allowed:
                logger.warning(
                    "Type %s is not reachable from any query type; skipping", ir_type.name
                )
                continue
            fields = []
            for ir_field in ir_type.fields:
                if self.ir.is_union(ir_field.type_name):
                    # Selecting a union needs inline fragments, which queries do not render
                    logger.warning(
                        "Field %s.%s has union type %s; skipping",
                        ir_type.name, ir_field.name, ir_field.type_name,
                    )
                    continue
                rules = RuleSet(
                    requires_arguments=any(not a.is_optional for a in ir_field.arguments),
                    query_types=allowed,
                )
                rule_sets[rules] = None
                arguments_class = None
                if ir_field.arguments:
                    arguments_class = self._arguments_class_name(ir_type, ir_field)
                    argument_classes.append(
                        self._argument_class_context(arguments_class, ir_type.name, ir_field)
                    )
                fields.append(self._field_context(ir_field, rules, arguments_class))

            field_classes.append({
                "class_name": f"{ir_type.name}QueryFields",
                "description": ir_type.description,
                "fields": fields,
            })

        return {
            "rules": list(rule_sets),
            "enums": list(self.ir.enums.values()),
            "argument_classes": argument_classes,
            "field_classes": field_classes,
        }

    def _field_context(
        self, ir_field: IRField, rules: RuleSet, arguments_class: str | None
    ) -> dict[str, Any]:
        children = None
        if self.ir.is_object_type(ir_field.type_name):
            children = f"{ir_field.type_name}QueryFields"
        return {
            "name": ir_field.name,
            "method": safe_name(to_snake_case(ir_field.name), RESERVED_FIELD_NAMES),
            "description": ir_field.description,
            "rules": rules.name,
            "children": children,
            "arguments": arguments_class,
        }

    @staticmethod
    def _arguments_class_name(ir_type: IRType, ir_field: IRField) -> str:
        return f"{ir_type.name}{to_pascal_case(ir_field.name)}QueryArguments"

    def _argument_class_context(
        self, class_name: str, owner: str, ir_field: IRField
    ) -> dict[str, Any]:
        return {
            "class_name": class_name,
            "owner": owner,
            "field": ir_field.name,
            "arguments": [self._argument_context(a) for a in ir_field.arguments],
        }

    def _argument_context(self, argument: IRArgument) -> dict[str, Any]:
        expected, annotation = self._python_type(argument.type_name)
        if argument.is_list:
            annotation = f"list[{annotation}]"
        return {
            "name": argument.name,
            "method": safe_name(to_snake_case(argument.name), RESERVED_ARGUMENT_NAMES),
            "description": argument.description,
            "expected": expected,
            "annotation": annotation,
            "is_list": argument.is_list,
        }

    def _python_type(self, type_name: str) -> tuple[str, str]:
        """Expected type expression and annotation for an argument type."""
        if type_name in SCALAR_TYPES:
            return SCALAR_TYPES[type_name]
        if type_name in self.ir.enums:
            return type_name, type_name
        if type_name in self.ir.inputs:
            return "(dict, BaseModel)", "dict | BaseModel"
        return "object", "object"
