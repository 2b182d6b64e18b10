import pytest

from pckonfig.models import MAX_BRAND, Component, ComponentType
from pckonfig.storage import (
    RECORD_SIZE,
    copy_file,
    delete_file,
    file_size,
    load_components,
    pack_component,
    rename_file,
    save_components,
    unpack_component,
)


@pytest.fixture
def components():
    return [
        Component(1, ComponentType.CPU, "Acme", "Fast", 250.5, 3),
        Component(2, ComponentType.GPU, "Vendor", "Render", 499.25, 4),
        Component(5, ComponentType.CASE, "Boxco", "Tower", 75.0, 0),
    ]


def test_record_size_matches_layout(components):
    data = pack_component(components[1])
    assert len(data) == 104
    assert RECORD_SIZE == len(data)


def test_packed_length(components):
    assert len(pack_component(components[0])) == RECORD_SIZE


def test_id_is_little_endian_first_field(components):
    data = pack_component(components[2])
    assert data[:4] == (5).to_bytes(4, "little")
    assert data[4:8] == int(ComponentType.CASE).to_bytes(4, "little")


def test_round_trip(components):
    for component in components:
        assert unpack_component(pack_component(component)) == component


def test_non_ascii_round_trip():
    component = Component(9, ComponentType.PSU, "Snaga", "Čvrst", 64.0, 1)
    assert unpack_component(pack_component(component)) == component


def test_wrong_length_rejected(components):
    with pytest.raises(ValueError):
        unpack_component(pack_component(components[0])[:-1])


def test_unknown_type_rejected(components):
    data = bytearray(pack_component(components[0]))
    data[4:8] = (99).to_bytes(4, "little")
    with pytest.raises(ValueError):
        unpack_component(bytes(data))


def test_out_of_range_id_rejected():
    with pytest.raises(ValueError):
        pack_component(Component(2**40, ComponentType.CPU, "a", "b", 1.0, 0))


def test_save_and_load(tmp_path, components):
    path = tmp_path / "komponente.bin"
    save_components(path, components)
    assert load_components(path) == components
    assert file_size(path) == len(components) * RECORD_SIZE


def test_partial_trailing_record_ignored(tmp_path, components):
    path = tmp_path / "komponente.bin"
    save_components(path, components)
    with open(path, "ab") as handle:
        handle.write(b"xyz")
    assert load_components(path) == components


def test_save_empty(tmp_path):
    path = tmp_path / "empty.bin"
    save_components(path, [])
    assert load_components(path) == []
    assert file_size(path) == 0


def test_load_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_components(tmp_path / "missing.bin")


def test_long_brand_truncated_on_disk(tmp_path):
    component = Component(1, ComponentType.RAM, "x", "y", 1.0, 0)
    component.brand = "z" * 80
    path = tmp_path / "k.bin"
    save_components(path, [component])
    assert load_components(path)[0].brand == "z" * (MAX_BRAND - 1)


def test_copy_rename_delete(tmp_path, components):
    source = tmp_path / "komponente.bin"
    backup = tmp_path / "backup_komponente.bin"
    renamed = tmp_path / "novo.bin"
    save_components(source, components)

    copy_file(source, backup)
    assert backup.read_bytes() == source.read_bytes()

    rename_file(source, renamed)
    assert not source.exists()
    assert load_components(renamed) == components

    delete_file(renamed)
    assert not renamed.exists()


def test_delete_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        delete_file(tmp_path / "nope.bin")


def test_copy_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        copy_file(tmp_path / "nope.bin", tmp_path / "out.bin")