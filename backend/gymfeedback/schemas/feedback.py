from datetime import datetime
from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gymfeedback.schemas.common import blank_to_none

FeedbackKind = Literal["suggestion", "complaint"]
# Only "pending" is ever written here; staff move it along outside this app.
FeedbackStatus = Literal["pending", "in_progress", "resolved"]


class FeedbackIn(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    type: FeedbackKind = "suggestion"
    category: str = Field(min_length=1)
    message: str = Field(min_length=1)
    user_name: Optional[str] = None
    user_phone: Optional[str] = None
    is_anonymous: bool = False

    blank_optional = field_validator("user_name", "user_phone", mode="before")(blank_to_none)

    def to_row(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "category": self.category,
            "message": self.message,
            "user_name": None if self.is_anonymous else self.user_name,
            "user_phone": None if self.is_anonymous else self.user_phone,
            "is_anonymous": self.is_anonymous,
            "status": "pending",
        }


class Feedback(BaseModel):
    id: Union[int, str]
    type: FeedbackKind
    category: str
    message: str
    user_name: Optional[str] = None
    user_phone: Optional[str] = None
    is_anonymous: bool = False
    status: FeedbackStatus = "pending"
    created_at: Optional[datetime] = None
