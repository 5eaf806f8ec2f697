from datetime import datetime
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gymfeedback.core.constants import NPS_QUESTION_ID
from gymfeedback.schemas.common import blank_to_none

# Question id -> score (rating/nps questions) or text (yes/no, open question).
AnswerValue = Union[int, float, str]


class SurveyIn(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    user_name: str = Field(min_length=1)
    user_phone: str = Field(min_length=1)
    user_email: Optional[str] = None
    answers: Dict[str, AnswerValue] = Field(default_factory=dict)
    accept_marketing: bool = False

    blank_optional = field_validator("user_email", mode="before")(blank_to_none)

    @field_validator("answers", mode="before")
    @classmethod
    def keys_as_text(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return {str(k): val for k, val in v.items()}
        return v

    @field_validator("answers")
    @classmethod
    def nps_in_range(cls, v: Dict[str, AnswerValue]) -> Dict[str, AnswerValue]:
        score = v.get(NPS_QUESTION_ID)
        if isinstance(score, (int, float)) and (not 0 <= score <= 10 or score != int(score)):
            raise ValueError(f"answer {NPS_QUESTION_ID} (NPS) must be a whole number from 0 to 10")
        return v

    @property
    def nps_score(self) -> Optional[int]:
        score = self.answers.get(NPS_QUESTION_ID)
        if isinstance(score, (int, float)):
            return int(score)
        return None

    def to_row(self) -> Dict[str, Any]:
        return {
            "user_name": self.user_name,
            "user_phone": self.user_phone,
            "user_email": self.user_email,
            "answers": self.answers,
            "nps_score": self.nps_score,
            "accept_marketing": self.accept_marketing,
        }


class SurveyResponse(BaseModel):
    id: Union[int, str]
    user_name: str
    user_phone: str
    user_email: Optional[str] = None
    answers: Dict[str, AnswerValue] = Field(default_factory=dict)
    nps_score: Optional[int] = None
    accept_marketing: bool = False
    created_at: Optional[datetime] = None
