"""Typed query arguments and the base class for argument containers."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .exceptions import ArgumentTypeError
from .naming import describe_class
from .registry import arguments_registry


@dataclass(eq=False)
class GraphQueryArgument:
    """A named argument value attached to a query field.

    The value is not checked on construction. Call is_valid_argument_type()
    (field configuration does this for every argument it receives) so that
    a batch of arguments can be checked together.

    Two arguments are never equal unless they are the same object.
    """
    name: str
    owner: type
    expected_type: type | tuple[type, ...]
    value: Any
    is_list: bool = False

    @property
    def expected_types(self) -> tuple[type, ...]:
        if isinstance(self.expected_type, tuple):
            return self.expected_type
        return (self.expected_type,)

    def is_valid_argument_type(self) -> bool:
        """Check the value against the expected type.

        Raises:
            ArgumentTypeError: If the value (or any element, for list
                arguments) has the wrong type.
        """
        if self.is_list:
            valid = isinstance(self.value, (list, tuple)) and all(
                self._matches(item) for item in self.value
            )
        else:
            valid = self._matches(self.value)

        if not valid:
            raise ArgumentTypeError(
                f"Query argument ({self.name}) expects a value of type "
                f"{self.expected_type_name} but got {self._actual_type_name()}."
            )
        return True

    @property
    def expected_type_name(self) -> str:
        names = " | ".join(t.__name__ for t in self.expected_types)
        return f"list[{names}]" if self.is_list else names

    def _matches(self, value: Any) -> bool:
        # bool is an int subclass but never a valid Int/Float argument
        if isinstance(value, bool) and not any(t in (bool, object) for t in self.expected_types):
            return False
        # str-based enums render as bare names, so they only satisfy enum types
        if isinstance(value, Enum) and not any(
            t is object or issubclass(t, Enum) for t in self.expected_types
        ):
            return False
        return isinstance(value, self.expected_types)

    def _actual_type_name(self) -> str:
        if self.is_list and isinstance(self.value, (list, tuple)):
            names = sorted({type(item).__name__ for item in self.value})
            return f"list[{' | '.join(names)}]"
        return type(self.value).__name__


class QueryArguments:
    """Base class for query argument containers.

    Each subclass exposes one accessor per schema argument. Every argument
    an accessor returns is owned by that subclass, which is what field
    configuration checks against.
    """

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        arguments_registry.register(cls)

    @classmethod
    def label(cls) -> str:
        return describe_class(cls.__name__, "QueryArguments")

    def _argument(
        self,
        name: str,
        expected_type: type | tuple[type, ...],
        value: Any,
        is_list: bool = False,
    ) -> GraphQueryArgument:
        return GraphQueryArgument(
            name=name,
            owner=type(self),
            expected_type=expected_type,
            value=value,
            is_list=is_list,
        )
