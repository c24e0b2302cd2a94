"""
Unit tests for trip service lifecycle operations
"""
import pytest
from datetime import date
from sqlalchemy.exc import OperationalError

from wanderlog.core.exceptions import ResourceNotFoundError, StoreOperationError
from wanderlog.models.memory import Memory
from wanderlog.models.trip import TripCategory
from wanderlog.schemas.trip import TripCreate, TripUpdate
from wanderlog.services.trip_service import TripService


def test_create_trip(db_session, test_user):
    """Test creating a new trip"""
    service = TripService(db_session)

    trip_data = TripCreate(location="Tokyo, Japan", date=date(2024, 4, 1), category="City")

    trip = service.create_trip(test_user.id, trip_data)

    assert trip.id is not None
    assert trip.user_id == test_user.id
    assert trip.location == "Tokyo, Japan"
    assert trip.category == TripCategory.CITY
    assert trip.created_at is not None


def test_list_user_trips_is_date_descending(db_session, test_user):
    """Test listing returns the newest trip date first"""
    service = TripService(db_session)

    for day, location in [(3, "Lisbon"), (20, "Porto"), (11, "Faro")]:
        service.create_trip(
            test_user.id,
            TripCreate(location=location, date=date(2024, 6, day), category="Beach"),
        )

    trips = service.list_user_trips(test_user.id)
    assert [t.location for t in trips] == ["Porto", "Faro", "Lisbon"]


def test_list_grouped_trips(db_session, test_user):
    """Test filtering and grouping on top of the store query"""
    service = TripService(db_session)
    service.create_trip(test_user.id, TripCreate(location="Kyoto", date=date(2024, 1, 5), category="Cultural"))
    service.create_trip(test_user.id, TripCreate(location="Kyoto", date=date(2024, 3, 5), category="Nature"))
    service.create_trip(test_user.id, TripCreate(location="Osaka", date=date(2024, 2, 5), category="City"))

    listing = service.list_grouped_trips(test_user.id)
    assert [g["location"] for g in listing["groups"]] == ["Kyoto", "Osaka"]
    assert len(listing["groups"][0]["trips"]) == 2

    cultural = service.list_grouped_trips(test_user.id, TripCategory.CULTURAL)
    assert cultural["total"] == 1
    assert cultural["groups"][0]["trips"][0].category == TripCategory.CULTURAL


def test_update_trip(db_session, test_user):
    """Test updating trip details"""
    service = TripService(db_session)

    trip = service.create_trip(
        test_user.id, TripCreate(location="Berlin, Germany", date=date(2024, 2, 2), category="City")
    )

    updated = service.update_trip(trip.id, test_user.id, TripUpdate(location="Munich, Germany"))

    assert updated.location == "Munich, Germany"
    assert updated.category == TripCategory.CITY
    assert updated.date == date(2024, 2, 2)


def test_update_missing_trip(db_session, test_user):
    service = TripService(db_session)
    with pytest.raises(ResourceNotFoundError):
        service.update_trip(999, test_user.id, TripUpdate(location="Nowhere"))


def test_get_trip_security_scoping(db_session, test_user, other_user):
    """Test that users can only access their own trips"""
    service = TripService(db_session)

    trip = service.create_trip(
        test_user.id, TripCreate(location="Private Trip", date=date(2024, 1, 1), category="Nature")
    )

    assert service.get_trip(trip.id, other_user.id) is None
    assert service.list_user_trips(other_user.id) == []
    with pytest.raises(ResourceNotFoundError):
        service.delete_trip(trip.id, other_user.id)


def test_delete_trip_keeps_memories(db_session, test_user):
    """Deleting a trip leaves the memories that reference it"""
    service = TripService(db_session)
    trip = service.create_trip(
        test_user.id, TripCreate(location="Rome, Italy", date=date(2024, 7, 1), category="Cultural")
    )
    db_session.add(Memory(
        trip_id=trip.id, user_id=test_user.id, title="Colosseum", tags=[], date=date(2024, 7, 1)
    ))
    db_session.commit()

    service.delete_trip(trip.id, test_user.id)

    assert service.get_trip(trip.id, test_user.id) is None
    remaining = db_session.query(Memory).filter(Memory.trip_id == trip.id).all()
    assert [m.title for m in remaining] == ["Colosseum"]


def test_store_failure_becomes_generic_error(db_session, test_user, monkeypatch):
    """A failing store call surfaces the generic failure message"""
    service = TripService(db_session)

    def failing_commit():
        raise OperationalError("INSERT INTO trips", {}, Exception("database is locked"))

    monkeypatch.setattr(db_session, "commit", failing_commit)

    with pytest.raises(StoreOperationError) as exc_info:
        service.create_trip(
            test_user.id, TripCreate(location="Oslo", date=date(2024, 1, 1), category="Nature")
        )

    assert exc_info.value.message == "Failed to create trip"
    assert exc_info.value.status_code == 500
