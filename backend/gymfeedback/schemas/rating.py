from datetime import datetime
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gymfeedback.schemas.common import blank_to_none


class RatingIn(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    professor_id: str = Field(min_length=1)
    rating: int = Field(ge=1, le=5)
    comment: Optional[str] = None
    user_name: Optional[str] = None
    user_phone: Optional[str] = None

    blank_optional = field_validator("comment", "user_name", "user_phone", mode="before")(blank_to_none)

    @field_validator("professor_id", mode="before")
    @classmethod
    def id_as_text(cls, v: Any) -> Any:
        return str(v) if isinstance(v, int) and not isinstance(v, bool) else v

    def to_row(self) -> Dict[str, Any]:
        return self.model_dump()


class Rating(BaseModel):
    id: Union[int, str]
    professor_id: Union[int, str]
    rating: int
    comment: Optional[str] = None
    user_name: Optional[str] = None
    user_phone: Optional[str] = None
    created_at: Optional[datetime] = None
