from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, StrictInt, model_validator
from pydantic.alias_generators import to_camel


def _or_empty(empty: Any) -> BeforeValidator:
    return BeforeValidator(lambda v: empty if v is None else v)


def _digits_to_int(value: Any) -> Any:
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    return value


# null elements inside lists and maps decode to the zero value
NullableStr = Annotated[str, _or_empty("")]
# Records inside lists: null becomes an all-default record
OrEmptyRecord = _or_empty({})

# Unbounded ids: JSON integers or digit strings; booleans and floats are rejected
BigInt = Annotated[StrictInt, BeforeValidator(_digits_to_int)]


class MetadataModel(BaseModel):
    """
    Base for records decoded from the metadata server.
    Attributes are snake_case, JSON keys are camelCase (machine_type <-> machineType).
    Records are read-only snapshots.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        # null means "not set": fall back to the field default
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data
