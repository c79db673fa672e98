"""Client domain model."""

from __future__ import annotations

from dataclasses import dataclass

from polibill_app.core.errors import RecordFormatError
from polibill_app.core.records import join_record, split_record
from polibill_app.core.validation import parse_non_negative_int

CLIENT_FIELD_COUNT = 5


@dataclass
class Client:
    """Insured person holding zero or more policies."""

    id: int = 0
    name: str = ""
    age: int = 0
    contact: str = ""
    address: str = ""

    @classmethod
    def from_record(cls, line: str, strict: bool = False) -> "Client":
        """Build a client from `id|name|age|contact|address`.

        A line of the wrong shape yields a zero-valued client unless `strict`
        is set, in which case RecordFormatError is raised.
        """
        fields = split_record(line)
        client_id = age = None
        if len(fields) == CLIENT_FIELD_COUNT:
            client_id = parse_non_negative_int(fields[0])
            age = parse_non_negative_int(fields[2])
        if client_id is None or age is None:
            if strict:
                raise RecordFormatError(f"Malformed client record: {line!r}")
            return cls()
        return cls(
            id=client_id,
            name=fields[1],
            age=age,
            contact=fields[3],
            address=fields[4],
        )

    def to_record(self) -> str:
        return join_record([str(self.id), self.name, str(self.age), self.contact, self.address])
