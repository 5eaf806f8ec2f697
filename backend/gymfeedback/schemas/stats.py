from pydantic import BaseModel


class Stats(BaseModel):
    average_rating: float = 0
    total_feedbacks: int = 0
    satisfaction_rate: int = 0
