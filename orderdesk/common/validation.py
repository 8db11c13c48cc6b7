"""Field types shared by the request schemas."""
from typing import Annotated

from pydantic import AfterValidator, Field


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


def _trimmed(value: str) -> str:
    return _not_blank(value).strip()


# Kept exactly as submitted; only checked for content
NonBlankStr = Annotated[str, AfterValidator(_not_blank)]
TrimmedStr = Annotated[str, AfterValidator(_trimmed)]

# Strict so that numeric strings and booleans are rejected; ints still pass
Price = Annotated[float, Field(strict=True, ge=0, allow_inf_nan=False)]
