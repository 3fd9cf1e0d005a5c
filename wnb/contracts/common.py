"""Base classes and shared types for WNB contracts.

Unit conventions (all contracts and API responses):
- **Weights**: pounds (lb) — suffix ``_lb``
- **Arms / CG positions**: inches aft of datum — suffix ``_in``
- **Moments**: pound-inches — suffix ``_lb_in``
- **Fuel volumes**: US gallons — suffix ``_gal``
- **Fuel density**: pounds per gallon — ``density_lb_per_gal``

Documents exchanged with the UI and the profile store use camelCase keys
(``weightLb``, ``cgIn``); Python code uses the snake_case field names.
"""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DocumentModel(BaseModel):
    """Base model with store-friendly serialization.

    - Enums serialize as string values.
    - Field aliases are camelCase; both aliases and field names are accepted.
    - ``to_document()`` produces a JSON-safe dict.
    - ``from_document()`` hydrates from a stored document dict.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_document(self) -> dict[str, Any]:
        """Dump to a JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_document(cls, data: dict[str, Any]) -> Self:
        """Create model instance from a stored document dict."""
        return cls.model_validate(data)
