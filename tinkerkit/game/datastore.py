"""Loading of fixed-width binary data tables such as the spell store."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from dataclasses import field as dc_field
from enum import Enum, IntEnum
from pathlib import Path
from typing import Callable, Generic, Iterable, Sequence, TypeVar, Union

HEADER_MAGIC = 0x454D4147  # the bytes "GAME" read little-endian
MAX_SPELL_EFFECTS = 3
TOTAL_SPELL_EFFECTS = 3
SPELL_ENTRY_FORMAT = "niiifffiii"
SPELLS_FILE = "spells.dat"

_HEADER = struct.Struct("<4I")
_FIELD_SIZE = 4
_FLOAT = struct.Struct("<f")
_UINT = struct.Struct("<I")

Row = tuple
T = TypeVar("T")


class FieldType(str, Enum):
    """Format characters describing one 4-byte field of a record."""

    FLOAT = "f"
    INT = "i"
    INDEX = "n"


class SpellEffect(IntEnum):
    """What a spell effect slot does."""

    NONE = 0
    DAMAGE = 1
    HEAL = 2


class DataFileError(Exception):
    """Raised when a data file is malformed or does not match its format."""


def _to_int32(value: int) -> int:
    return value - (1 << 32) if value >= (1 << 31) else value


@dataclass(frozen=True)
class SpellEntry:
    """One spell definition with up to three effects."""

    id: int
    effects: tuple[int, ...] = (0,) * MAX_SPELL_EFFECTS
    points_per_level: tuple[float, ...] = (0.0,) * MAX_SPELL_EFFECTS
    base_points: tuple[int, ...] = (0,) * MAX_SPELL_EFFECTS

    @classmethod
    def from_fields(cls, fields: Iterable[Union[int, float]]) -> "SpellEntry":
        """Build an entry from a row laid out as ``SPELL_ENTRY_FORMAT``."""
        values = tuple(fields)
        if len(values) != len(SPELL_ENTRY_FORMAT):
            raise ValueError(
                f"a spell entry needs {len(SPELL_ENTRY_FORMAT)} fields, got {len(values)}"
            )
        n = MAX_SPELL_EFFECTS
        return cls(
            id=int(values[0]),
            effects=tuple(int(v) for v in values[1 : 1 + n]),
            points_per_level=tuple(float(v) for v in values[1 + n : 1 + 2 * n]),
            base_points=tuple(_to_int32(int(v)) for v in values[1 + 2 * n :]),
        )


def format_record_size(fmt: str) -> tuple[int, int | None]:
    """Return the byte size of a record and the position of its index field."""
    index_pos = None
    for pos, char in enumerate(fmt):
        try:
            kind = FieldType(char)
        except ValueError:
            raise ValueError(f"unknown field format character {char!r}") from None
        if kind is FieldType.INDEX:
            index_pos = pos
    return len(fmt) * _FIELD_SIZE, index_pos


class Record:
    """A view of one record inside a data file."""

    __slots__ = ("_data", "_offset", "_field_count")

    def __init__(self, data: bytes, offset: int, field_count: int) -> None:
        self._data = data
        self._offset = offset
        self._field_count = field_count

    def _field_offset(self, field: int) -> int:
        if not 0 <= field < self._field_count:
            raise IndexError(f"field {field} out of range (0..{self._field_count - 1})")
        return self._offset + field * _FIELD_SIZE

    def get_float(self, field: int) -> float:
        """Read a field as a 32-bit float."""
        return _FLOAT.unpack_from(self._data, self._field_offset(field))[0]

    def get_uint(self, field: int) -> int:
        """Read a field as an unsigned 32-bit integer."""
        return _UINT.unpack_from(self._data, self._field_offset(field))[0]


@dataclass(frozen=True)
class DataFile:
    """The parsed contents of a binary data file."""

    record_count: int
    field_count: int
    record_size: int
    data: bytes = dc_field(repr=False)

    @classmethod
    def from_bytes(cls, data: bytes) -> "DataFile":
        """Parse a header followed by ``record_count`` fixed-size records."""
        raw = bytes(data)
        if len(raw) < _HEADER.size:
            raise DataFileError("file is too short for a header")
        magic, count, fields, size = _HEADER.unpack_from(raw)
        if magic != HEADER_MAGIC:
            raise DataFileError(f"bad header 0x{magic:08X}")
        if fields == 0:
            raise DataFileError("records have no fields")
        if fields * _FIELD_SIZE > size:
            raise DataFileError(f"{fields} fields do not fit in a {size}-byte record")
        body_size = count * size
        if body_size == 0:
            raise DataFileError("file holds no record data")
        body = raw[_HEADER.size : _HEADER.size + body_size]
        if len(body) < body_size:
            raise DataFileError("record data is truncated")
        return cls(count, fields, size, body)

    @classmethod
    def read(cls, path: Union[str, os.PathLike]) -> "DataFile":
        """Read and parse a data file from disk."""
        return cls.from_bytes(Path(path).read_bytes())

    def record(self, index: int) -> Record:
        """Return the record at ``index``."""
        if not 0 <= index < self.record_count:
            raise IndexError(f"record {index} out of range (0..{self.record_count - 1})")
        return Record(self.data, index * self.record_size, self.field_count)

    def produce(self, fmt: str) -> list[Row | None]:
        """Decode every record with ``fmt``.

        Without an index field the rows come back in file order. With one,
        the list is indexed by that field, with ``None`` in unused slots.
        """
        if len(fmt) != self.field_count:
            raise DataFileError(
                f"format has {len(fmt)} fields but the file has {self.field_count}"
            )
        _, index_pos = format_record_size(fmt)
        types = [FieldType(char) for char in fmt]
        rows = [self._decode(self.record(i), types) for i in range(self.record_count)]
        if index_pos is None:
            return list(rows)
        table: list[Row | None] = [None] * (max(row[index_pos] for row in rows) + 1)
        for row in rows:
            table[row[index_pos]] = row
        return table

    @staticmethod
    def _decode(record: Record, types: Sequence[FieldType]) -> Row:
        return tuple(
            record.get_float(pos) if kind is FieldType.FLOAT else record.get_uint(pos)
            for pos, kind in enumerate(types)
        )


class DataStorage(Generic[T]):
    """A table of entries loaded from a data file and looked up by id."""

    def __init__(self, fmt: str, factory: Callable[[Row], T] | None = None) -> None:
        format_record_size(fmt)
        self.fmt = fmt
        self.field_count = 0
        self._factory: Callable[[Row], T] = factory if factory is not None else (lambda row: row)
        self._entries: list[T | None] = []

    def load(self, path: Union[str, os.PathLike]) -> None:
        """Load entries from ``path``; raises on a missing or invalid file."""
        data_file = DataFile.read(path)
        table = data_file.produce(self.fmt)
        self.field_count = data_file.field_count
        self._entries = [None if row is None else self._factory(row) for row in table]

    def lookup(self, entry_id: int) -> T | None:
        """Return the entry with ``entry_id``, or ``None`` if there is none."""
        if 0 <= entry_id < len(self._entries):
            return self._entries[entry_id]
        return None

    def clear(self) -> None:
        """Drop every loaded entry."""
        self._entries = []

    def __len__(self) -> int:
        return len(self._entries)


spell_store: DataStorage[SpellEntry] = DataStorage(SPELL_ENTRY_FORMAT, SpellEntry.from_fields)


def load_data_stores(
    data_path: Union[str, os.PathLike], store: DataStorage[SpellEntry] | None = None
) -> bool:
    """Load the spell store from ``data_path``; return whether it loaded."""
    target = spell_store if store is None else store
    stores = [(target, SPELLS_FILE)]
    all_loaded = True
    for storage, filename in stores:
        path = os.path.join(os.fspath(data_path), filename)
        try:
            storage.load(path)
        except DataFileError:
            print(f"{path} has invalid data.")
            all_loaded = False
        except OSError:
            print(f"Data store {path} doesn't exist.")
            all_loaded = False
    print(f"Loaded {len(stores)} data stores.")
    return all_loaded