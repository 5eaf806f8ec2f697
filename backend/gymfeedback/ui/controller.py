"""Screen flow of the feedback page as an explicit state machine.

One frozen dataclass per screen holds that screen's form fields. The
controller only moves between screens through the methods below:

    home --open_rate--> rate --submit--> thanks --reset--> home
    home --open_survey--> survey --submit--> thanks
    home --open_feedback--> feedback --submit--> thanks

Submissions are fire-and-forget from the member's point of view: a storage
failure is logged and the page still moves on to the thanks screen. Invalid
input keeps the current screen and is handed back to the caller.
"""
from __future__ import annotations
import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

import structlog
from pydantic import ValidationError as PydanticValidationError

from gymfeedback.core.constants import DEFAULT_PROFESSORS, DEFAULT_STATS
from gymfeedback.core.errors import FeedbackAppError, PersistenceError, ValidationError
from gymfeedback.schemas.common import parse
from gymfeedback.schemas.feedback import FeedbackIn, FeedbackKind
from gymfeedback.schemas.professor import Professor
from gymfeedback.schemas.rating import RatingIn
from gymfeedback.schemas.stats import Stats
from gymfeedback.schemas.survey import SurveyIn
from gymfeedback.services.professors_repo import ProfessorsRepo
from gymfeedback.services.stats_service import StatsService
from gymfeedback.services.submission_service import SubmissionGateway

logger = structlog.get_logger("view-controller")


class InvalidTransition(FeedbackAppError):
    pass


@dataclass(frozen=True)
class HomeView:
    professors: Tuple[Professor, ...] = ()
    stats: Stats = field(default_factory=lambda: Stats(**DEFAULT_STATS))


@dataclass(frozen=True)
class RateView:
    professor: Professor
    rating: int = 0
    comment: str = ""
    user_name: str = ""


@dataclass(frozen=True)
class SurveyView:
    answers: Dict[str, Any] = field(default_factory=dict)
    user_name: str = ""
    user_phone: str = ""
    user_email: str = ""
    accept_marketing: bool = False


@dataclass(frozen=True)
class FeedbackView:
    kind: FeedbackKind = "suggestion"
    category: str = ""
    message: str = ""
    user_name: str = ""
    user_phone: str = ""
    is_anonymous: bool = False


@dataclass(frozen=True)
class ThanksView:
    pass


View = Union[HomeView, RateView, SurveyView, FeedbackView, ThanksView]
FormView = Union[RateView, SurveyView, FeedbackView]


class ViewController:
    def __init__(self, gateway: SubmissionGateway, stats: StatsService, professors: ProfessorsRepo):
        self.gateway = gateway
        self.stats_service = stats
        self.professors_repo = professors
        self.view: View = HomeView()
        self._home = self.view

    def _expect(self, *kinds: type) -> None:
        if not isinstance(self.view, kinds):
            names = "/".join(k.__name__ for k in kinds)
            raise InvalidTransition(f"expected {names}, current view is {type(self.view).__name__}")

    async def load(self) -> HomeView:
        """Fetch professors and stats for the home screen, falling back to defaults."""
        self._expect(HomeView)
        try:
            rows = await self.professors_repo.list_active()
            professors = tuple(Professor.model_validate(r) for r in rows)
        except (PersistenceError, PydanticValidationError) as exc:
            logger.error("Could not load professors, using defaults", error=str(exc))
            professors = tuple(Professor.model_validate(r) for r in DEFAULT_PROFESSORS)

        try:
            stats = await self.stats_service.compute_stats()
        except PersistenceError as exc:
            logger.error("Could not load stats, using defaults", error=str(exc))
            stats = Stats(**DEFAULT_STATS)

        self.view = self._home = HomeView(professors=professors, stats=stats)
        return self.view

    def open_rate(self, professor: Professor) -> RateView:
        self._expect(HomeView)
        self.view = RateView(professor=professor)
        return self.view

    def open_survey(self) -> SurveyView:
        self._expect(HomeView)
        self.view = SurveyView()
        return self.view

    def open_feedback(self, kind: FeedbackKind = "suggestion") -> FeedbackView:
        self._expect(HomeView)
        self.view = FeedbackView(kind=kind)
        return self.view

    def update(self, **fields: Any) -> FormView:
        """Change form fields on the current rate/survey/feedback screen."""
        self._expect(RateView, SurveyView, FeedbackView)
        known = {f.name for f in dataclasses.fields(self.view)}
        unknown = set(fields) - known
        if unknown:
            raise InvalidTransition(f"{type(self.view).__name__} has no field(s) {sorted(unknown)}")
        self.view = dataclasses.replace(self.view, **fields)
        return self.view

    def _request(self) -> Union[RatingIn, SurveyIn, FeedbackIn]:
        v = self.view
        if isinstance(v, RateView):
            return parse(RatingIn, {
                "professor_id": str(v.professor.id),
                "rating": v.rating,
                "comment": v.comment,
                "user_name": v.user_name,
            })
        if isinstance(v, SurveyView):
            return parse(SurveyIn, {
                "user_name": v.user_name,
                "user_phone": v.user_phone,
                "user_email": v.user_email,
                "answers": v.answers,
                "accept_marketing": v.accept_marketing,
            })
        return parse(FeedbackIn, {
            "type": v.kind,
            "category": v.category,
            "message": v.message,
            "user_name": v.user_name,
            "user_phone": v.user_phone,
            "is_anonymous": v.is_anonymous,
        })

    async def submit(self) -> Optional[ValidationError]:
        """Send the current form.

        Returns the ValidationError (and stays on the screen) when the form is
        incomplete; otherwise always ends on ThanksView, even if storage failed.
        """
        self._expect(RateView, SurveyView, FeedbackView)
        try:
            body = self._request()
        except ValidationError as exc:
            return exc

        try:
            if isinstance(body, RatingIn):
                await self.gateway.submit_rating(body)
            elif isinstance(body, SurveyIn):
                await self.gateway.submit_survey(body)
            else:
                await self.gateway.submit_feedback(body)
        except PersistenceError as exc:
            logger.error(
                "Submission not saved",
                kind=type(body).__name__,
                table=exc.table,
                operation=exc.operation,
                error=str(exc),
            )

        self.view = ThanksView()
        return None

    def reset(self) -> HomeView:
        """Back to home with empty forms; keeps what load() fetched."""
        self.view = self._home
        return self.view
