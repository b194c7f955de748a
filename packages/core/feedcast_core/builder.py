"""
Fluent construction of feed models.

Builders collect field values and hand them to the pydantic model on
``build()``, so an instance missing a required field never escapes: the model
raises ``ValidationError`` instead.
"""

from typing import Any, ClassVar, Generic, Self, TypeVar

from pydantic import BaseModel

M = TypeVar("M", bound=BaseModel)


class ModelBuilder(Generic[M]):
    """Base class for the per-model builders."""

    model: ClassVar[type[BaseModel]]

    def __init__(self, **fields: Any) -> None:
        self._fields: dict[str, Any] = dict(fields)

    def set(self, **fields: Any) -> Self:
        """Set (or overwrite) scalar fields by name."""
        self._fields.update(fields)
        return self

    def _append(self, field: str, value: Any) -> Self:
        self._fields.setdefault(field, []).append(value)
        return self

    def build(self) -> M:
        """
        Validate the collected fields and build the model.

        Raises:
            pydantic.ValidationError: If a required field is missing or invalid.
        """
        return self.model(**self._fields)  # type: ignore[return-value]
