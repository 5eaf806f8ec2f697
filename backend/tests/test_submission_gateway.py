"""Tests for the three submission entry points."""

import json

import pytest

from gymfeedback.core.errors import PersistenceError, ValidationError
from gymfeedback.schemas.feedback import FeedbackIn
from gymfeedback.services.submission_service import SubmissionGateway


@pytest.fixture
def gateway(db):
    return SubmissionGateway(db)


def _sent_row(fake_db, table):
    (request,) = fake_db.calls("POST", table)
    (row,) = json.loads(request.content)
    return row


@pytest.mark.asyncio
async def test_submit_rating_triggers_professor_update(gateway, fake_db, professor):
    rating = await gateway.submit_rating(
        {"professor_id": professor["id"], "rating": 4, "comment": "  ", "user_name": "Bia"}
    )

    assert rating.professor_id == str(professor["id"])
    row = _sent_row(fake_db, "ratings")
    assert row["comment"] is None
    assert row["user_name"] == "Bia"
    assert professor["reviews_count"] == 1
    assert professor["rating"] == 4.0


@pytest.mark.asyncio
@pytest.mark.parametrize("value", [0, 6, 4.5])
async def test_submit_rating_rejects_out_of_range(gateway, fake_db, professor, value):
    with pytest.raises(ValidationError) as info:
        await gateway.submit_rating({"professor_id": professor["id"], "rating": value})

    assert info.value.errors[0]["loc"] == ("rating",)
    assert fake_db.requests == []


@pytest.mark.asyncio
async def test_submit_rating_requires_professor(gateway, fake_db):
    with pytest.raises(ValidationError):
        await gateway.submit_rating({"professor_id": "", "rating": 5})
    assert fake_db.requests == []


@pytest.mark.asyncio
async def test_submit_survey_extracts_nps(gateway, fake_db):
    survey = await gateway.submit_survey({
        "user_name": "Caio",
        "user_phone": "38999990000",
        "user_email": "",
        "answers": {1: 5, 4: "sim", 6: 9, 7: "Mais bicicletas"},
        "accept_marketing": True,
    })

    row = _sent_row(fake_db, "survey_responses")
    assert row["nps_score"] == 9
    assert row["answers"] == {"1": 5, "4": "sim", "6": 9, "7": "Mais bicicletas"}
    assert row["user_email"] is None
    assert row["accept_marketing"] is True
    assert survey.nps_score == 9


@pytest.mark.asyncio
async def test_submit_survey_without_numeric_nps(gateway, fake_db):
    await gateway.submit_survey({"user_name": "Caio", "user_phone": "1", "answers": {"6": "talvez"}})

    row = _sent_row(fake_db, "survey_responses")
    assert row["nps_score"] is None
    assert row["accept_marketing"] is False


@pytest.mark.asyncio
@pytest.mark.parametrize("name,phone", [("", "38999990000"), ("   ", "38999990000"), ("Caio", "")])
async def test_submit_survey_requires_name_and_phone(gateway, fake_db, name, phone):
    with pytest.raises(ValidationError):
        await gateway.submit_survey({"user_name": name, "user_phone": phone, "answers": {"1": 5}})

    assert fake_db.requests == []
    assert fake_db.tables["survey_responses"] == []


@pytest.mark.asyncio
@pytest.mark.parametrize("score", [11, -1, 6.5])
async def test_submit_survey_rejects_nps_out_of_range(gateway, fake_db, score):
    with pytest.raises(ValidationError):
        await gateway.submit_survey({"user_name": "Caio", "user_phone": "1", "answers": {"6": score}})
    assert fake_db.requests == []


@pytest.mark.asyncio
async def test_anonymous_feedback_drops_identity(gateway, fake_db):
    feedback = await gateway.submit_feedback(FeedbackIn(
        type="complaint",
        category="limpeza",
        message="Vestiário sujo",
        user_name="Bia",
        user_phone="38999990000",
        is_anonymous=True,
    ))

    row = _sent_row(fake_db, "feedbacks")
    assert row["user_name"] is None
    assert row["user_phone"] is None
    assert row["is_anonymous"] is True
    assert feedback.user_name is None


@pytest.mark.asyncio
async def test_feedback_is_created_pending(gateway, fake_db):
    feedback = await gateway.submit_feedback(
        {"category": "aulas", "message": "Aula de yoga aos sábados", "user_name": "Bia"}
    )

    row = _sent_row(fake_db, "feedbacks")
    assert row["status"] == "pending"
    assert row["type"] == "suggestion"
    assert row["user_name"] == "Bia"
    assert feedback.status == "pending"


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [
    {"category": "", "message": "x"},
    {"category": "aulas", "message": "  "},
    {"type": "praise", "category": "aulas", "message": "x"},
])
async def test_feedback_validation(gateway, fake_db, payload):
    with pytest.raises(ValidationError):
        await gateway.submit_feedback(payload)
    assert fake_db.requests == []


@pytest.mark.asyncio
async def test_storage_failure_raises_persistence_error(gateway, fake_db):
    fake_db.fail.add(("POST", "feedbacks"))

    with pytest.raises(PersistenceError) as info:
        await gateway.submit_feedback({"category": "outros", "message": "x"})

    assert info.value.operation == "POST"
    assert info.value.__cause__ is not None


@pytest.mark.asyncio
async def test_whole_float_nps_is_stored_as_int(gateway, fake_db):
    await gateway.submit_survey({"user_name": "Caio", "user_phone": "1", "answers": {"6": 7.0}})

    row = _sent_row(fake_db, "survey_responses")
    assert row["nps_score"] == 7
