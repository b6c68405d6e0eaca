import pytest

from umission.api.events import filters, service
from umission.api.events.models import EventCategories, EventStatus
from umission.api.users import service as user_service
from umission.api.users.models import UserRoles
from umission.core.validations.exceptions import NotFound
from umission.response import CustomHTTPException


@pytest.mark.asyncio
async def test_create_event_starts_fresh(db_session, make_event, organizer):
    event = await make_event(title="Food Bank Drive", max_volunteers=10)

    assert event.id is not None
    assert event.current_volunteers == 0
    assert event.status == EventStatus.upcoming
    assert event.organizer_id == organizer.id
    assert event.organizer_name == "Kelab Sukarelawan"
    assert event.image_url.startswith("https://picsum.photos/400/200")


@pytest.mark.asyncio
async def test_create_event_keeps_given_image(db_session, make_event):
    event = await make_event(image_url="https://cdn.example.com/cleanup.png")

    assert event.image_url == "https://cdn.example.com/cleanup.png"


@pytest.mark.asyncio
async def test_get_event_includes_rating_summary(db_session, make_event):
    event = await make_event()

    detail = await service.get_event(db_session, event.id)

    assert detail["id"] == event.id
    assert detail["rating"] == 0.0
    assert detail["total_rating"] == 0


@pytest.mark.asyncio
async def test_get_unknown_event(db_session):
    with pytest.raises(NotFound):
        await service.get_event(db_session, 404)


@pytest.mark.asyncio
async def test_conclude_event(db_session, make_event, organizer):
    event = await make_event()

    updated = await service.update_event_status(
        db_session, event.id, EventStatus.completed, organizer
    )

    assert updated.status == EventStatus.completed


@pytest.mark.asyncio
async def test_completed_event_cannot_be_reopened(db_session, make_event, organizer):
    event = await make_event()
    await service.update_event_status(db_session, event.id, EventStatus.completed, organizer)

    with pytest.raises(CustomHTTPException) as exc_info:
        await service.update_event_status(
            db_session, event.id, EventStatus.upcoming, organizer
        )
    assert exc_info.value.status_code == 400
    assert exc_info.value.error_code == "INVALID_STATUS_TRANSITION"


@pytest.mark.asyncio
async def test_only_owner_concludes_event(db_session, make_event, make_user):
    event = await make_event()
    stranger = await make_user(UserRoles.organizer)

    with pytest.raises(CustomHTTPException) as exc_info:
        await service.update_event_status(
            db_session, event.id, EventStatus.completed, stranger
        )
    assert exc_info.value.status_code == 403


@pytest.mark.asyncio
async def test_list_events_with_filters(db_session, make_event):
    await make_event(
        title="KK12 Gotong Royong", location="KK12", category=EventCategories.campus_life
    )
    await make_event(
        title="Python Workshop", location="FCSIT Block A", category=EventCategories.education
    )
    await make_event(title="Tree Planting", location="Rimba Ilmu")

    all_events = await service.list_events(db_session)
    assert len(all_events) == 3

    outdoors = await service.list_events(db_session, location="Outdoors")
    assert [e.title for e in outdoors] == ["Tree Planting"]

    faculty = await service.list_events(db_session, location="Faculty")
    assert [e.title for e in faculty] == ["Python Workshop"]

    education = await service.list_events(db_session, category="Education")
    assert [e.title for e in education] == ["Python Workshop"]

    searched = await service.list_events(db_session, search="gotong", category="All")
    assert [e.title for e in searched] == ["KK12 Gotong Royong"]


def test_location_buckets():
    assert filters.in_location_bucket("Kolej Kediaman KK5", "KK")
    assert filters.in_location_bucket("Residential College 10", "KK")
    assert filters.in_location_bucket("Tasik Varsiti", "Outdoors")
    assert not filters.in_location_bucket("DTC", "Outdoors")
    assert not filters.in_location_bucket("Tasik Varsiti", "Nowhere")


@pytest.mark.asyncio
async def test_list_organizer_events(db_session, make_event, make_user, organizer):
    other = await make_user(UserRoles.organizer)
    mine = await make_event(title="Mine")
    await make_event(title="Theirs", organizer=other)

    events = await service.list_organizer_events(db_session, organizer.id)

    assert [e.id for e in events] == [mine.id]


@pytest.mark.asyncio
async def test_toggle_bookmark(db_session, make_event, volunteer):
    event = await make_event()

    bookmarks = await user_service.toggle_bookmark(db_session, volunteer, event.id)
    assert bookmarks == [event.id]
    listed = await user_service.list_bookmarked_events(db_session, volunteer)
    assert [e.id for e in listed] == [event.id]

    bookmarks = await user_service.toggle_bookmark(db_session, volunteer, event.id)
    assert bookmarks == []
    assert await user_service.list_bookmarked_events(db_session, volunteer) == []


@pytest.mark.asyncio
async def test_bookmark_unknown_event(db_session, volunteer):
    with pytest.raises(NotFound):
        await user_service.toggle_bookmark(db_session, volunteer, 999)


@pytest.mark.asyncio
async def test_concurrent_duplicate_email_is_a_bad_request(db_session, make_user, monkeypatch):
    await make_user(email="hafiz@siswa.um.edu.my")

    async def skip_unique_check(session, **kwargs):
        return True

    # simulate a second request that passed the pre-check before the first committed
    monkeypatch.setattr(user_service, "validate_unique", skip_unique_check)

    with pytest.raises(CustomHTTPException) as exc_info:
        await user_service.create_user(
            db_session, full_name="Hafiz", email="HAFIZ@siswa.um.edu.my", password="secret123"
        )
    assert exc_info.value.status_code == 400
    assert "email" in exc_info.value.errors
