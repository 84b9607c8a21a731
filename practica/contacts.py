"""Contact book kept in memory and stored as fixed-size binary records."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

DEFAULT_PATH = "contact.txt"
ENCODING = "utf-8"

NAME_SIZE = 20
SEX_SIZE = 10
TELE_SIZE = 80
ADDR_SIZE = 30

# name, age, sex, tele, addr with the padding a 4-byte aligned record carries.
_RECORD = struct.Struct("<20si10s2x80s30s2x")
RECORD_SIZE = _RECORD.size

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_FIELD_SIZES = (
    ("name", NAME_SIZE),
    ("sex", SEX_SIZE),
    ("tele", TELE_SIZE),
    ("addr", ADDR_SIZE),
)


class ContactNotFoundError(LookupError):
    """Raised when no contact has the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"no contact named {name!r}")
        self.name = name


@dataclass
class Person:
    """One entry of the contact book."""

    name: str
    age: int
    sex: str
    tele: str
    addr: str

    def __post_init__(self) -> None:
        for field, size in _FIELD_SIZES:
            value = getattr(self, field)
            if "\0" in value:
                raise ValueError(f"{field} must not contain NUL characters")
            if len(value.encode(ENCODING)) >= size:
                raise ValueError(f"{field} is longer than {size - 1} bytes")
        if not _INT_MIN <= self.age <= _INT_MAX:
            raise ValueError(f"age {self.age} does not fit in a 32-bit integer")


def _text_field(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode(ENCODING)


def encode_person(person: Person) -> bytes:
    """Pack a person into one binary record."""
    return _RECORD.pack(
        person.name.encode(ENCODING),
        person.age,
        person.sex.encode(ENCODING),
        person.tele.encode(ENCODING),
        person.addr.encode(ENCODING),
    )


def decode_person(data: bytes) -> Person:
    """Unpack one binary record into a person."""
    if len(data) != RECORD_SIZE:
        raise ValueError(f"a record is {RECORD_SIZE} bytes, got {len(data)}")
    name, age, sex, tele, addr = _RECORD.unpack(data)
    return Person(
        _text_field(name),
        age,
        _text_field(sex),
        _text_field(tele),
        _text_field(addr),
    )


def format_person(person: Person, position: int) -> str:
    """Describe a person as shown in listings; position counts from 1."""
    return (
        f"第{position}个联系人\n"
        f"姓名:{person.name}\n"
        f"年龄:{person.age}\n"
        f"性别:{person.sex}\n"
        f"电话:{person.tele}\n"
        f"住址:{person.addr}\n"
    )


class ContactBook:
    """An ordered collection of people backed by a record file."""

    def __init__(self, path: str | Path = DEFAULT_PATH) -> None:
        self.path = Path(path)
        self._people: list[Person] = []
        self.load()

    def __len__(self) -> int:
        return len(self._people)

    def __iter__(self) -> Iterator[Person]:
        return iter(self._people)

    def add(self, person: Person) -> None:
        """Append a person at the end of the book."""
        self._people.append(person)

    def index_of(self, name: str) -> int:
        """Return the position of the first person with this name."""
        for position, person in enumerate(self._people):
            if person.name == name:
                return position
        raise ContactNotFoundError(name)

    def get(self, name: str) -> Person:
        """Return the first person with this name."""
        return self._people[self.index_of(name)]

    def remove(self, name: str) -> Person:
        """Remove the first person with this name and return them."""
        return self._people.pop(self.index_of(name))

    def modify(self, name: str, person: Person) -> None:
        """Replace the first person with this name."""
        self._people[self.index_of(name)] = person

    def sort(self) -> None:
        """Order the book by name, comparing the stored bytes."""
        self._people.sort(key=lambda person: person.name.encode(ENCODING))

    def load(self) -> int:
        """Replace the contents with the records in the file; return their number.

        A missing file leaves the book empty, and a trailing partial record
        is ignored.
        """
        self._people = []
        try:
            stream = self.path.open("rb")
        except FileNotFoundError:
            return 0
        with stream:
            while len(chunk := stream.read(RECORD_SIZE)) == RECORD_SIZE:
                self._people.append(decode_person(chunk))
        return len(self._people)

    def save(self) -> None:
        """Write every person to the file as binary records."""
        with self.path.open("wb") as stream:
            for person in self._people:
                stream.write(encode_person(person))