"""Stop domain model."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Stop(BaseModel):
    """A stop returned by the stop finder."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    disassembled_name: str
