"""
Tri-state field presence for partial-update payloads.

Every field of a PartialModel starts as UNSET. When the payload is built:

- UNSET fields are omitted entirely ("do not change")
- empty or zero values ("", [], {}, 0, False) are sent ("clear")
- any other value is sent ("set")

None is never used to mean "omit", so clearing a field to its zero value
stays distinguishable from leaving it alone.
"""

from typing import Any, TypeVar, Union

from pydantic import BaseModel, ConfigDict, GetCoreSchemaHandler
from pydantic_core import core_schema


T = TypeVar("T")


class _UnsetType:
    """Marker for a field that was never assigned."""

    _instance: "_UnsetType | None" = None

    def __new__(cls) -> "_UnsetType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"

    def __copy__(self) -> "_UnsetType":
        return self

    def __deepcopy__(
        self,
        memo: dict,
    ) -> "_UnsetType":
        return self

    def __reduce__(self) -> str:
        return "UNSET"

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        return core_schema.is_instance_schema(
            cls,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda _: None
            ),
        )


UNSET = _UnsetType()

Unsettable = Union[T, _UnsetType]


def is_set(
    value: Any,
) -> bool:
    """Return True unless the value is the UNSET marker."""
    return value is not UNSET


class PartialModel(BaseModel):
    """Base for update payloads where each field is absent, cleared or set."""

    model_config = ConfigDict(populate_by_name=True)

    def unset_fields(self) -> set[str]:
        """Names of fields still holding UNSET."""
        return {
            name
            for name in type(self).model_fields
            if getattr(self, name) is UNSET
        }

    def to_payload(self) -> dict[str, Any]:
        """Serialize only the fields that were assigned.

        Returns:
            JSON-ready dict keyed by wire names
        """
        return self.model_dump(
            mode="json",
            by_alias=True,
            exclude=self.unset_fields(),
        )
