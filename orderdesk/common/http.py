from typing import Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as SchemaError
from quart import request

from .errors import ValidationError

M = TypeVar("M", bound=BaseModel)


def describe_schema_error(error: SchemaError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "body"
    return f"Invalid {location}: {first['msg']}"


async def parse_body(model: Type[M]) -> M:
    """Validate the JSON body against ``model``.

    Malformed or non-object JSON is validated as an empty object, so it fails
    on the first required field.
    """
    data = await request.get_json(force=True, silent=True)
    try:
        return model.model_validate(data if isinstance(data, dict) else {})
    except SchemaError as e:
        raise ValidationError(describe_schema_error(e)) from e
