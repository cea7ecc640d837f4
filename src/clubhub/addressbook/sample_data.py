from __future__ import annotations

from datetime import date

from ..attendance.model import Attendance
from ..common.money import Money
from ..events.model import Event, EventId
from ..persons.model import Name, Person
from ..tasks.model import Task
from .address_book import AddressBook


def sample_persons() -> list[Person]:
    return [
        Person(Name("Alex Yeoh"), phone="87438807", email="alexyeoh@example.com", tags={"friends"}),
        Person(Name("Bernice Yu"), phone="99272758", email="berniceyu@example.com", tags={"colleagues", "friends"}),
        Person(Name("Charlotte Oliveiro"), phone="93210283", email="charlotte@example.com", tags={"neighbours"}),
        Person(Name("David Li"), phone="91031282", email="lidavid@example.com", tags={"family"}),
    ]


def sample_events() -> list[Event]:
    return [
        Event(EventId("Orientation2024"), "Freshmen orientation", date(2024, 8, 5), Money.parse("350.00")),
        Event(EventId("Hackathon2024"), "Annual hackathon", date(2024, 10, 12), Money.parse("1200.00")),
    ]


def sample_address_book() -> AddressBook:
    orientation = EventId("Orientation2024")
    return AddressBook(
        persons=sample_persons(),
        events=sample_events(),
        tasks=[Task("Book venue for hackathon"), Task("Collect orientation feedback")],
        attendance=[
            Attendance(orientation, Name("Alex Yeoh"), attended=True),
            Attendance(orientation, Name("Bernice Yu")),
        ],
    )
