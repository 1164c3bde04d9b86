"""Name-based registries for query fields and query arguments classes.

Schema types reference each other cyclically (a character has media, a
media has characters), so field definitions name their child and argument
classes and resolve them here when a field is configured.

Names are looked up within a namespace: the top-level package of the
module that defines the class. The hand-written containers share the
"anilist_gql" namespace, while a generated module (or one executed under
its own name) gets a namespace of its own, so its CharacterQueryFields
never stands in for the hand-written one.
"""

import logging

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "anilist_gql"


def namespace_of(cls: type) -> str:
    """The namespace a container class registers and resolves names in."""
    return cls.__module__.partition(".")[0]


class ClassRegistry:
    """Maps (namespace, class name) to container classes of one kind."""

    def __init__(self, kind: str):
        self.kind = kind
        self._classes: dict[tuple[str, str], type] = {}

    def register(self, cls: type):
        """Register a class under its own name in its namespace."""
        key = (namespace_of(cls), cls.__name__)
        previous = self._classes.get(key)
        if previous is not None and previous is not cls:
            logger.debug("Replacing %s class %s in %s", self.kind, key[1], key[0])
        self._classes[key] = cls

    def resolve(self, name: str, namespace: str = DEFAULT_NAMESPACE) -> type:
        """Return the class registered under name in namespace."""
        try:
            return self._classes[(namespace, name)]
        except KeyError:
            raise ConfigurationError(
                f"Unknown {self.kind} class {name} in {namespace}."
            ) from None

    def has(self, name: str, namespace: str = DEFAULT_NAMESPACE) -> bool:
        return (namespace, name) in self._classes

    def names(self, namespace: str = DEFAULT_NAMESPACE) -> list[str]:
        return sorted(name for ns, name in self._classes if ns == namespace)


fields_registry = ClassRegistry("query fields")
arguments_registry = ClassRegistry("query arguments")
