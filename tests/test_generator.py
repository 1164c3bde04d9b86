"""Tests for the query fields generator."""

import ast
import logging

import pytest
from pydantic import BaseModel

from anilist_gql.core.exceptions import (
    ArgumentTypeError,
    ArgumentValidationError,
    ConfigurationError,
    FieldValidationError,
)
from anilist_gql.core.generator import FieldsGenerator, RuleSet, docstring, safe_name
from anilist_gql.core.parser import SchemaParser
from anilist_gql.core.query_builder import QueryBuilder, render_field
from anilist_gql.core.registry import fields_registry
from anilist_gql.core.types import ALL_QUERY_TYPES, QueryType
from anilist_gql.fields import CharacterEdgeQueryFields, CharacterQueryFields

CHARACTER_SDL = """
type Query {
  Character(id: Int, search: String): Character
}

type Character {
  id: Int
  name: String
}
"""


class GizmoFilter(BaseModel):
    id: int | None = None


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def ir(gizmo_sdl):
    return SchemaParser("").parse_text(gizmo_sdl)


@pytest.fixture
def generator(ir):
    return FieldsGenerator(ir)


@pytest.fixture
def generated(generator, isolated_registries):
    """Execute the generated module and return its namespace."""
    code = generator.generate_code()
    namespace = {"__name__": "generated_gizmo"}
    exec(compile(code, "<generated>", "exec"), namespace)
    return namespace


# =============================================================================
# Tests: helpers
# =============================================================================


class TestHelpers:
    """Tests for the naming and docstring helpers."""

    def test_safe_name(self):
        assert safe_name("id") == "id"
        assert safe_name("class") == "class_"
        assert safe_name("label", {"label"}) == "label_"

    def test_docstring(self):
        assert docstring(None) == ""
        assert docstring("  The   media\n title. ") == "The media title."
        assert docstring('Ends with "quote"') == 'Ends with "quote" '
        assert '"""' not in docstring('Has """ inside')

    def test_docstring_truncated(self):
        text = docstring("word " * 50)
        assert len(text) == 100
        assert text.endswith("...")

    def test_rule_set_names(self):
        assert RuleSet(False, ALL_QUERY_TYPES).name == "ALL_QUERIES"
        assert RuleSet(True, ALL_QUERY_TYPES).name == "ALL_QUERIES_WITH_ARGUMENTS"
        assert RuleSet(False, frozenset({QueryType.USER, QueryType.MEDIA})).name == (
            "MEDIA_USER_QUERIES"
        )

    def test_rule_set_refs(self):
        rules = RuleSet(False, frozenset({QueryType.STUDIO, QueryType.CHARACTER}))
        assert rules.query_type_refs == ["QueryType.CHARACTER", "QueryType.STUDIO"]


# =============================================================================
# Tests: code generation
# =============================================================================


class TestGenerateCode:
    """Tests for FieldsGenerator.generate_code."""

    def test_query_types_from_reachability(self, generator):
        assert generator.compute_query_types() == {
            "Gizmo": frozenset({QueryType.STUDIO}),
            "GizmoPart": frozenset({QueryType.STUDIO}),
            "GizmoSticker": frozenset({QueryType.STUDIO}),
        }

    def test_valid_python(self, generator):
        ast.parse(generator.generate_code())

    def test_rule_constants(self, generator):
        code = generator.generate_code()
        assert "STUDIO_QUERIES = FieldRules(" in code
        assert "STUDIO_QUERIES_WITH_ARGUMENTS = FieldRules(" in code

    def test_unreachable_type_skipped(self, generator, caplog):
        with caplog.at_level(logging.WARNING, logger="anilist_gql.core.generator"):
            code = generator.generate_code()
        assert "class OrphanQueryFields" not in code
        assert "Orphan is not reachable" in caplog.text

    def test_union_field_skipped(self, generator, caplog):
        with caplog.at_level(logging.WARNING, logger="anilist_gql.core.generator"):
            code = generator.generate_code()
        assert "'attachment'" not in code
        assert "def attachment" not in code
        assert "Gizmo.attachment has union type GizmoAttachment" in caplog.text

    def test_union_members_generated(self, generator):
        code = generator.generate_code()
        assert "class GizmoStickerQueryFields(QueryFields):" in code
        assert "class GizmoAttachmentQueryFields" not in code

    def test_mutation_types_not_generated(self, generator):
        assert "SaveGizmo" not in generator.generate_code()

    def test_custom_template(self, ir, tmp_path):
        (tmp_path / "fields.py.j2").write_text(
            "{% for cls in field_classes %}# {{ cls.class_name }}\n{% endfor %}"
        )
        code = FieldsGenerator(ir, template_dir=str(tmp_path)).generate_code()
        assert code == "# GizmoQueryFields\n# GizmoPartQueryFields\n# GizmoStickerQueryFields\n"

    def test_invalid_output(self, ir, tmp_path):
        (tmp_path / "fields.py.j2").write_text("def broken(:\n")
        with pytest.raises(ValueError, match="Generated invalid Python"):
            FieldsGenerator(ir, template_dir=str(tmp_path)).generate_code()

    def test_write(self, generator, tmp_path):
        output = tmp_path / "out" / "fields.py"
        code = generator.write(str(output))
        assert output.read_text() == code


class TestGeneratedModule:
    """Tests that exercise the generated containers."""

    def test_classes(self, generated):
        for name in (
            "GizmoSort",
            "GizmoQueryFields",
            "GizmoPartQueryFields",
            "GizmoPartsQueryArguments",
            "GizmoMetaQueryArguments",
            "StudioQueryArguments",
        ):
            assert name in generated

    def test_enum(self, generated):
        gizmo_sort = generated["GizmoSort"]
        assert [m.value for m in gizmo_sort] == ["ID", "ID_DESC"]

    def test_docstrings(self, generated):
        assert generated["GizmoQueryFields"].__doc__ == "A configurable gizmo."
        assert generated["GizmoQueryFields"].parts.__doc__ == "The parts of the gizmo."

    def test_reserved_and_keyword_names(self, generated):
        gizmo = generated["GizmoQueryFields"](QueryType.STUDIO)
        part = generated["GizmoPartQueryFields"](QueryType.STUDIO)
        assert render_field(gizmo.label_()) == "label"
        assert render_field(part.class_()) == "class"

    def test_required_arguments(self, generated):
        gizmo = generated["GizmoQueryFields"](QueryType.STUDIO)
        part = generated["GizmoPartQueryFields"](QueryType.STUDIO)
        args = generated["GizmoPartsQueryArguments"]()

        field = gizmo.parts([part.id()], [args.page(1)])
        assert render_field(field) == "parts(page: 1) { id }"

        with pytest.raises(ArgumentValidationError) as exc_info:
            gizmo.parts([part.id()])
        assert str(exc_info.value) == (
            "Query field (parts) requires at least one gizmo parts query argument."
        )

    def test_enum_list_argument(self, generated):
        gizmo = generated["GizmoQueryFields"](QueryType.STUDIO)
        part = generated["GizmoPartQueryFields"](QueryType.STUDIO)
        args = generated["GizmoPartsQueryArguments"]()
        gizmo_sort = generated["GizmoSort"]

        field = gizmo.parts([part.id()], [args.page(2), args.sort([gizmo_sort.ID_DESC])])
        assert render_field(field) == "parts(page: 2, sort: [ID_DESC]) { id }"

    def test_input_and_custom_scalar_arguments(self, generated):
        gizmo = generated["GizmoQueryFields"](QueryType.STUDIO)
        args = generated["GizmoMetaQueryArguments"]()
        field = gizmo.meta([args.data([1, "two"])])
        assert render_field(field) == 'meta(data: [1, "two"])'
        assert args.filter({"id": 1}).is_valid_argument_type()

    def test_input_argument_accepts_model(self, generated):
        gizmo = generated["GizmoQueryFields"](QueryType.STUDIO)
        args = generated["GizmoMetaQueryArguments"]()
        field = gizmo.meta([args.filter(GizmoFilter(id=7))])
        assert field.arguments[0].is_valid_argument_type()
        assert render_field(field).startswith("meta(filter: {")
        assert "id: 7" in render_field(field)

    def test_input_argument_rejects_other_types(self, generated):
        args = generated["GizmoMetaQueryArguments"]()
        with pytest.raises(ArgumentTypeError, match=r"dict \| BaseModel"):
            args.filter("id: 7").is_valid_argument_type()

    def test_union_member_container(self, generated):
        sticker = generated["GizmoStickerQueryFields"](QueryType.STUDIO)
        assert render_field(sticker.text()) == "text"
        assert not hasattr(generated["GizmoQueryFields"], "attachment")

    def test_optional_arguments(self, generated):
        gizmo = generated["GizmoQueryFields"](QueryType.STUDIO)
        assert render_field(gizmo.meta()) == "meta"

    def test_root_arguments(self, generated):
        args = generated["StudioQueryArguments"]()
        argument = args.search("gadget")
        assert argument.owner is generated["StudioQueryArguments"]
        assert argument.is_valid_argument_type()

    def test_query_type_restriction(self, generated):
        with pytest.raises(ConfigurationError):
            generated["GizmoQueryFields"](QueryType.MEDIA)


class TestGeneratedNamespaces:
    """Tests that generated containers do not replace the hand-written ones."""

    @pytest.fixture
    def characters(self, isolated_registries):
        ir = SchemaParser("").parse_text(CHARACTER_SDL)
        code = FieldsGenerator(ir).generate_code()
        namespace = {"__name__": "generated_characters"}
        exec(compile(code, "<generated>", "exec"), namespace)
        return namespace

    def test_hand_written_containers_still_work(self, characters):
        edge = CharacterEdgeQueryFields(QueryType.MEDIA)
        character = CharacterQueryFields(QueryType.MEDIA)
        assert render_field(edge.node([character.id()])) == "node { id }"

    def test_generated_class_registered_in_its_own_namespace(self, characters):
        generated_class = characters["CharacterQueryFields"]
        assert generated_class is not CharacterQueryFields
        assert fields_registry.resolve("CharacterQueryFields") is CharacterQueryFields
        assert (
            fields_registry.resolve("CharacterQueryFields", "generated_characters")
            is generated_class
        )

    def test_containers_do_not_mix(self, characters):
        edge = CharacterEdgeQueryFields(QueryType.MEDIA)
        generated = characters["CharacterQueryFields"](QueryType.CHARACTER)
        with pytest.raises(FieldValidationError, match="not valid character query fields id"):
            edge.node([generated.id()])

    def test_query_builder_with_generated_namespace(self, characters):
        builder = QueryBuilder(QueryType.CHARACTER, namespace="generated_characters")
        assert builder.root_fields_class is characters["CharacterQueryFields"]
        document = builder.build([builder.fields.name()], [builder.arguments.id(1)])
        assert document.text == "query { Character(id: 1) { name } }"

    def test_query_builder_unknown_namespace(self):
        with pytest.raises(ConfigurationError, match="Unknown query fields class"):
            QueryBuilder(QueryType.CHARACTER, namespace="missing")
