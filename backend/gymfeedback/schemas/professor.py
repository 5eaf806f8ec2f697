from datetime import datetime
from typing import Any, Optional, Union

from pydantic import BaseModel, ValidationInfo, field_validator


class Professor(BaseModel):
    id: Union[int, str]
    name: str
    specialty: str = ""
    avatar: str = ""
    rating: float = 0
    reviews_count: int = 0
    active: bool = True
    created_at: Optional[datetime] = None

    @field_validator("specialty", "avatar", "rating", "reviews_count", "active", mode="before")
    @classmethod
    def null_as_default(cls, v: Any, info: ValidationInfo) -> Any:
        # never-rated professors come back with NULL rating/reviews_count
        if v is None:
            return cls.model_fields[info.field_name].default
        return v
