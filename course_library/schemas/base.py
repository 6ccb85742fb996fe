from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):  # type: ignore[misc]
    """
    Base class for every public request and response schema.

    Python attributes stay snake_case while the wire format uses camelCase
    aliases. Both spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
