"""Shared fixtures for the anilist-gql tests."""

import pytest

from anilist_gql.core.registry import arguments_registry, fields_registry


GIZMO_SDL = '''
"""Arbitrary JSON data."""
scalar Json

enum GizmoSort {
  ID
  ID_DESC
}

input GizmoFilter {
  id: Int
}

type Query {
  Studio(id: Int, search: String): Gizmo
  Page(page: Int): Orphan
}

type Mutation {
  SaveGizmo(id: Int): Gizmo
}

"""A configurable gizmo."""
type Gizmo {
  id: Int!
  label: String
  "The parts of the gizmo."
  parts(sort: [GizmoSort], page: Int!): [GizmoPart]
  meta(filter: GizmoFilter, data: Json): String
  attachment: GizmoAttachment
}

type GizmoPart {
  id: Int
  class: String
}

union GizmoAttachment = GizmoPart | GizmoSticker

type GizmoSticker {
  id: Int
  text: String
}

type Orphan {
  id: Int
}

extend type Gizmo {
  weight: Float
}
'''


@pytest.fixture
def gizmo_sdl():
    return GIZMO_SDL


@pytest.fixture
def isolated_registries(monkeypatch):
    """Keep classes defined by a test out of the shared registries."""
    monkeypatch.setattr(fields_registry, "_classes", dict(fields_registry._classes))
    monkeypatch.setattr(arguments_registry, "_classes", dict(arguments_registry._classes))
