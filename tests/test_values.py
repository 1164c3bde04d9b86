"""Tests for GraphQL literal rendering."""

from datetime import date

import pytest
from pydantic import BaseModel, Field

from anilist_gql.core.values import fuzzy_date_int, render_value
from anilist_gql.enums import MediaSort, MediaType


class DateFilter(BaseModel):
    year: int
    month: int | None = None
    day_of_month: int | None = Field(default=None, alias="day")


class TestRenderValue:
    """Tests for render_value."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1, "1"),
            (-3, "-3"),
            (2.5, "2.5"),
            (True, "true"),
            (False, "false"),
            (None, "null"),
            ("Cowboy Bebop", '"Cowboy Bebop"'),
            (MediaType.ANIME, "ANIME"),
        ],
    )
    def test_scalars(self, value, expected):
        assert render_value(value) == expected

    def test_string_escaping(self):
        assert render_value('Say "hi"\n') == '"Say \\"hi\\"\\n"'

    def test_enum_list(self):
        assert render_value([MediaSort.POPULARITY_DESC, MediaSort.SCORE_DESC]) == (
            "[POPULARITY_DESC, SCORE_DESC]"
        )

    def test_tuple_renders_as_list(self):
        assert render_value((1, 2)) == "[1, 2]"

    def test_empty_list(self):
        assert render_value([]) == "[]"

    def test_date_renders_as_fuzzy_date_int(self):
        assert render_value(date(2024, 1, 15)) == "20240115"

    def test_mapping(self):
        assert render_value({"year": 1998, "month": None}).strip("{} ") == "year: 1998, month: null"

    def test_pydantic_model(self):
        assert render_value(DateFilter(year=1998, day=3)).strip("{} ") == "year: 1998, day: 3"

    def test_non_finite_float(self):
        with pytest.raises(TypeError, match="non-finite"):
            render_value(float("nan"))

    def test_unsupported_value(self):
        with pytest.raises(TypeError, match="Cannot render set"):
            render_value({1, 2})


class TestFuzzyDateInt:
    """Tests for fuzzy_date_int."""

    def test_padding(self):
        assert fuzzy_date_int(date(1998, 4, 3)) == 19980403

    def test_end_of_year(self):
        assert fuzzy_date_int(date(2023, 12, 31)) == 20231231
