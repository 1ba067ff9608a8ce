"""
Base model classes for parsed resume data.

Provides the shared configuration used by every output model.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EmbeddedModel(BaseModel):
    """
    Base model for the pipeline's output records.

    Fields are declared in snake_case and serialized with camelCase aliases,
    which is the wire shape consumers of the parsed data expect. Instances are
    immutable once built.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_json_dict(self) -> dict[str, Any]:
        """Convert model to its JSON wire dictionary (aliases, unset optionals omitted)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
