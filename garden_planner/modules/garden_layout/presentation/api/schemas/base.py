"""
Shared base for garden layout API schemas.

Bodies are camelCase on the wire (`gardenX`, `cellInches`, `plantsNotFound`);
snake_case field names are also accepted on input.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class OkResponse(CamelModel):
    ok: bool = True
