from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .addressbook.address_book import AddressBook
from .addressbook.manager import ModelManager
from .addressbook.sample_data import sample_address_book
from .commands.runner import CommandRunner


@dataclass(frozen=True)
class Container:
    model: ModelManager
    runner: CommandRunner


def build_container(*, seed_demo_data: bool = False, address_book: Optional[AddressBook] = None) -> Container:
    if address_book is None:
        address_book = sample_address_book() if seed_demo_data else AddressBook()

    model = ModelManager(address_book)
    runner = CommandRunner(model)
    return Container(model=model, runner=runner)
