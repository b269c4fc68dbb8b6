import struct

import pytest

from tinkerkit.game.datastore import (
    HEADER_MAGIC,
    SPELL_ENTRY_FORMAT,
    DataFile,
    DataFileError,
    DataStorage,
    SpellEffect,
    SpellEntry,
    format_record_size,
)
from tinkerkit.game.spellfile import (
    DEFAULT_SPELLS,
    encode_spells,
    main,
    write_spell_file,
)


def test_encoded_file_starts_with_game_magic():
    assert encode_spells(DEFAULT_SPELLS)[:4] == b"GAME"


def test_encoded_header_fields():
    data = encode_spells(DEFAULT_SPELLS)
    assert struct.unpack("<4I", data[:16]) == (HEADER_MAGIC, len(DEFAULT_SPELLS), 10, 40)


def test_encoded_length_matches_format():
    record_size, _ = format_record_size(SPELL_ENTRY_FORMAT)
    data = encode_spells(DEFAULT_SPELLS)
    assert len(data) == struct.calcsize("<4I") + record_size * len(DEFAULT_SPELLS)


def test_round_trip_through_data_file():
    table = DataFile.from_bytes(encode_spells(DEFAULT_SPELLS)).produce(SPELL_ENTRY_FORMAT)
    decoded = [SpellEntry.from_fields(row) for row in table if row is not None]
    assert decoded == list(DEFAULT_SPELLS)


def test_negative_base_points_round_trip():
    entry = SpellEntry(5, (SpellEffect.DAMAGE, 0, 0), (0.5, 0.0, 0.0), (-3, 0, 0))
    table = DataFile.from_bytes(encode_spells([entry])).produce(SPELL_ENTRY_FORMAT)
    assert SpellEntry.from_fields(table[entry.id]) == entry


def test_empty_spell_list_is_not_loadable():
    with pytest.raises(DataFileError):
        DataFile.from_bytes(encode_spells([]))


def test_default_spells_effects_after_decoding():
    table = DataFile.from_bytes(encode_spells(DEFAULT_SPELLS)).produce(SPELL_ENTRY_FORMAT)
    decoded = [SpellEntry.from_fields(row) for row in table if row is not None]
    assert [spell.effects[0] for spell in decoded] == [
        SpellEffect.DAMAGE,
        SpellEffect.DAMAGE,
        SpellEffect.HEAL,
    ]
    assert [spell.id for spell in decoded] == [1, 2, 3]


def test_written_file_loads_into_storage(tmp_path):
    path = tmp_path / "spells.dat"
    write_spell_file(path)
    storage = DataStorage(SPELL_ENTRY_FORMAT, SpellEntry.from_fields)
    storage.load(path)
    assert len(storage) == max(spell.id for spell in DEFAULT_SPELLS) + 1
    for spell in DEFAULT_SPELLS:
        assert storage.lookup(spell.id) == spell


def test_main_writes_file(tmp_path, capsys):
    path = tmp_path / "spells.dat"
    assert main([str(path)]) == 0
    assert path.read_bytes() == encode_spells(DEFAULT_SPELLS)
    assert "spells.dat generated." in capsys.readouterr().out


def test_main_reports_unopenable_path(tmp_path, capsys):
    path = tmp_path / "missing" / "spells.dat"
    assert main([str(path)]) == 1
    assert "The file could not be opened." in capsys.readouterr().out