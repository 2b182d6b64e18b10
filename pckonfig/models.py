"""Core data types: component categories, components and configurations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

MAX_BRAND = 30
MAX_MODEL = 50
UNKNOWN_LABEL = "Nepoznat"


class ComponentType(IntEnum):
    """Category of a PC component; each configuration holds at most one of each."""

    CPU = 0
    GPU = 1
    RAM = 2
    STORAGE = 3
    MOTHERBOARD = 4
    PSU = 5
    CASE = 6

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    ComponentType.CPU: "CPU",
    ComponentType.GPU: "GPU",
    ComponentType.RAM: "RAM",
    ComponentType.STORAGE: "STORAGE",
    ComponentType.MOTHERBOARD: "MATICNA",
    ComponentType.PSU: "NAPAJANJE",
    ComponentType.CASE: "KUCISTE",
}


def type_label(value) -> str:
    """Return the display label of a component type, or the unknown label."""
    try:
        return ComponentType(value).label
    except ValueError:
        return UNKNOWN_LABEL


class DuplicateTypeError(ValueError):
    """Raised when a configuration already holds a component of the same type."""


@dataclass
class Component:
    """A single catalogue entry."""

    id: int
    type: ComponentType
    brand: str
    model: str
    price: float
    compatibility_code: int = 0

    def __post_init__(self) -> None:
        self.type = ComponentType(self.type)
        self.brand = self.brand[: MAX_BRAND - 1]
        self.model = self.model[: MAX_MODEL - 1]

    def describe(self) -> str:
        """One-line human readable summary."""
        return (
            f"ID: {self.id} | Tip: {self.type.label} | Brand: {self.brand} | "
            f"Model: {self.model} | Cijena: {self.price:.2f} | "
            f"Kod kompatibilnosti: {self.compatibility_code}"
        )


class Configuration:
    """A build made of at most one component per type."""

    def __init__(self) -> None:
        self._slots: dict[ComponentType, Component] = {}

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, component_type) -> bool:
        try:
            return ComponentType(component_type) in self._slots
        except ValueError:
            return False

    @property
    def count(self) -> int:
        return len(self._slots)

    @property
    def total_price(self) -> float:
        return sum(component.price for component in self._slots.values())

    def add(self, component: Component) -> None:
        """Put a component into its type's slot; raise if the slot is taken."""
        slot = ComponentType(component.type)
        if slot in self._slots:
            raise DuplicateTypeError(
                f"Tip komponente {slot.label} je već dodan u konfiguraciju."
            )
        self._slots[slot] = component

    def remove(self, component_type) -> Component:
        """Take the component of the given type out of the configuration."""
        slot = ComponentType(component_type)
        try:
            return self._slots.pop(slot)
        except KeyError:
            raise KeyError(f"Ta komponenta nije u konfiguraciji: {slot.label}") from None

    def components(self) -> list[Component]:
        """Components ordered by type."""
        return [self._slots[slot] for slot in sorted(self._slots)]

    def describe(self) -> str:
        lines = ["--- Konfiguracija ---"]
        lines.extend(component.describe() for component in self.components())
        lines.append(f"Ukupna cijena: {self.total_price:.2f}")
        return "\n".join(lines)