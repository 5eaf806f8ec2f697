from typing import Any, Mapping, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from gymfeedback.core.errors import ValidationError

M = TypeVar("M", bound=BaseModel)


def blank_to_none(v: Any) -> Any:
    """Optional text fields arrive as '' from the form; store them as null."""
    if isinstance(v, str):
        v = v.strip()
        return v or None
    return v


def parse(model: Type[M], payload: Union[M, Mapping[str, Any]]) -> M:
    """Build a request struct, raising our ValidationError before anything is sent."""
    if isinstance(payload, model):
        return payload
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc) from exc
