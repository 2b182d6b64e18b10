"""Fixed-size binary records for components and small file helpers."""

from __future__ import annotations

import os
import shutil
import struct
from collections.abc import Iterable
from pathlib import Path

from .models import MAX_BRAND, MAX_MODEL, Component, ComponentType

# id, type, brand, model, price, compatibility code, trailing link slot
_RECORD = struct.Struct(f"<ii{MAX_BRAND}s{MAX_MODEL}sfi8x")
RECORD_SIZE = _RECORD.size


def _encode_text(text: str, size: int) -> bytes:
    return text.encode("utf-8")[: size - 1]


def _decode_text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="ignore")


def _from_fields(fields: tuple) -> Component:
    ident, kind, brand, model, price, code = fields
    try:
        component_type = ComponentType(kind)
    except ValueError:
        raise ValueError(f"unknown component type in record: {kind}") from None
    return Component(
        id=ident,
        type=component_type,
        brand=_decode_text(brand),
        model=_decode_text(model),
        price=price,
        compatibility_code=code,
    )


def pack_component(component: Component) -> bytes:
    """Encode a component as one fixed-size record."""
    try:
        return _RECORD.pack(
            component.id,
            int(component.type),
            _encode_text(component.brand, MAX_BRAND),
            _encode_text(component.model, MAX_MODEL),
            component.price,
            component.compatibility_code,
        )
    except struct.error as exc:
        raise ValueError(f"component cannot be stored: {exc}") from exc


def unpack_component(data: bytes) -> Component:
    """Decode one fixed-size record."""
    if len(data) != RECORD_SIZE:
        raise ValueError(f"record must be {RECORD_SIZE} bytes, got {len(data)}")
    return _from_fields(_RECORD.unpack(data))


def load_components(path) -> list[Component]:
    """Read every complete record from a file; a trailing partial record is ignored."""
    data = Path(path).read_bytes()
    usable = len(data) - len(data) % RECORD_SIZE
    return [_from_fields(fields) for fields in _RECORD.iter_unpack(memoryview(data)[:usable])]


def save_components(path, components: Iterable[Component]) -> None:
    """Write all components to a file, replacing its contents."""
    payload = b"".join(pack_component(component) for component in components)
    Path(path).write_bytes(payload)


def copy_file(source, destination) -> None:
    shutil.copyfile(source, destination)


def rename_file(old, new) -> None:
    os.rename(old, new)


def delete_file(path) -> None:
    os.remove(path)


def file_size(path) -> int:
    return os.path.getsize(path)