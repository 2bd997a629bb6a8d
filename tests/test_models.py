"""Tests for contacts, event identity, ordering and end-time display."""
import pytest

from conftest import make_event
from event_organizer.catalogs import Department, Location, TimeSlot
from event_organizer.dates import CalendarDate
from event_organizer.errors import MissingContactError
from event_organizer.models import Contact, EventKey, is_valid_duration


class TestContact:
    """Tests for contact email validation and display."""

    @pytest.mark.parametrize("email", ["cs@rutgers.edu", "j.doe+events@rutgers.edu"])
    def test_valid_email(self, email: str) -> None:
        assert Contact(Department.CS, email).is_valid()

    @pytest.mark.parametrize(
        "email",
        ["cs@gmail.com", "@rutgers.edu", "cs@rutgers.edu.com", "cs@rutgersXedu", "a@b@rutgers.edu"],
    )
    def test_invalid_email(self, email: str) -> None:
        assert not Contact(Department.CS, email).is_valid()

    def test_display(self) -> None:
        contact = Contact(Department.EE, "ee@rutgers.edu")
        assert str(contact) == "[Contact: Electrical Engineering, ee@rutgers.edu]"


class TestEquality:
    """Events are identified by date, time slot and location only."""

    def test_completely_different_events(self) -> None:
        first = make_event("09/06/2023", TimeSlot.AFTERNOON, Location.HLL114, Department.ITI)
        second = make_event("03/06/2021", TimeSlot.MORNING, Location.ARC103, Department.CS, "hi@rutgers.edu")
        assert first != second

    def test_same_date_different_timeslot(self) -> None:
        assert make_event(timeslot=TimeSlot.AFTERNOON) != make_event(timeslot=TimeSlot.MORNING)

    def test_same_date_and_timeslot_different_location(self) -> None:
        assert make_event(location=Location.HLL114) != make_event(location=Location.ARC103)

    def test_contact_and_duration_are_ignored(self) -> None:
        first = make_event(department=Department.ITI, email="cs@rutgers.edu", duration=60)
        second = make_event(department=Department.CS, email="hi@rutgers.edu", duration=120)
        assert first == second
        assert hash(first) == hash(second)

    def test_event_matches_its_key(self) -> None:
        event = make_event()
        key = EventKey(CalendarDate.parse("10/29/2026"), TimeSlot.MORNING, Location.ARC103)
        assert event == key
        assert key == event
        assert event.key == key


class TestOrdering:
    """Tests for the three event orderings."""

    def test_compare_by_date_first(self) -> None:
        early = make_event("10/28/2026", TimeSlot.EVENING)
        late = make_event("10/29/2026", TimeSlot.MORNING)
        assert early.compare(late) == -1
        assert late.compare(early) == 1

    def test_compare_by_timeslot_on_same_date(self) -> None:
        morning = make_event(timeslot=TimeSlot.MORNING)
        evening = make_event(timeslot=TimeSlot.EVENING)
        assert morning.compare(evening) == -1
        assert morning.compare(make_event(timeslot=TimeSlot.MORNING)) == 0

    def test_compare_by_location(self) -> None:
        busch = make_event(location=Location.HLL114)
        livingston = make_event(location=Location.BE_AUD)
        assert busch.compare_by_location(livingston) == -1

    def test_compare_by_department(self) -> None:
        bait = make_event(department=Department.BAIT)
        math = make_event(department=Department.MATH)
        assert math.compare_by_department(bait) == 1
        assert bait.compare_by_department(make_event(department=Department.BAIT)) == 0

    def test_compare_by_department_needs_contact(self) -> None:
        key = EventKey(CalendarDate.parse("10/29/2026"), TimeSlot.MORNING, Location.ARC103)
        with pytest.raises(MissingContactError):
            make_event().compare_by_department(key)


class TestEndTime:
    """Tests for the end-time label."""

    def test_morning_before_noon(self) -> None:
        assert make_event(timeslot=TimeSlot.MORNING, duration=60).end_time_label() == "[End: 11:30 AM]"

    def test_afternoon(self) -> None:
        assert make_event(timeslot=TimeSlot.AFTERNOON, duration=90).end_time_label() == "[End: 3:30 PM]"

    def test_minute_overflow_carries(self) -> None:
        assert make_event(timeslot=TimeSlot.EVENING, duration=45).end_time_label() == "[End: 7:15 PM]"
        assert make_event(timeslot=TimeSlot.MORNING, duration=30).end_time_label() == "[End: 11:00 AM]"

    def test_morning_reaching_noon_is_pm(self) -> None:
        assert make_event(timeslot=TimeSlot.MORNING, duration=90).end_time_label() == "[End: 12:00 PM]"
        assert make_event(timeslot=TimeSlot.MORNING, duration=120).end_time_label() == "[End: 12:30 PM]"

    def test_evening_hours_do_not_wrap(self) -> None:
        assert make_event(timeslot=TimeSlot.EVENING, duration=120).end_time() == (8, 30, "PM")


def test_event_display() -> None:
    event = make_event("10/29/2026", TimeSlot.AFTERNOON, Location.MU302, Department.MATH, "m@rutgers.edu", 30)
    assert str(event) == (
        "[Event Date: 10/29/2026] [Start: 2:00 PM] [End: 2:30 PM] "
        "@MU302 (Murray Hall, College Avenue) [Contact: Mathematics, m@rutgers.edu]"
    )


@pytest.mark.parametrize("minutes, expected", [(29, False), (30, True), (120, True), (121, False)])
def test_duration_bounds(minutes: int, expected: bool) -> None:
    assert is_valid_duration(minutes) is expected
