from __future__ import annotations

from datetime import date

import pytest

from clubhub.addressbook.address_book import AddressBook
from clubhub.addressbook.manager import ModelManager
from clubhub.commands.runner import CommandRunner
from clubhub.common.money import Money
from clubhub.events.model import Event, EventId
from clubhub.persons.model import Name, Person


@pytest.fixture
def alice() -> Name:
    return Name("Alice Pauline")


@pytest.fixture
def bob() -> Name:
    return Name("Bob Choo")


@pytest.fixture
def carol() -> Name:
    return Name("Carol Tan")


@pytest.fixture
def event_id() -> EventId:
    return EventId("Orientation2024")


@pytest.fixture
def event(event_id) -> Event:
    return Event(event_id, "Freshmen orientation", date(2024, 8, 5), Money.parse("120.50"))


@pytest.fixture
def book(alice, bob, carol, event) -> AddressBook:
    return AddressBook(persons=[Person(alice), Person(bob), Person(carol)], events=[event])


@pytest.fixture
def model(book) -> ModelManager:
    return ModelManager(book)


@pytest.fixture
def runner(model) -> CommandRunner:
    return CommandRunner(model)
