"""The component catalogue and operations over it."""

from __future__ import annotations

import random
from bisect import bisect_left
from collections.abc import Iterable, Iterator, Sequence
from operator import attrgetter

from .models import Component, ComponentType, Configuration


class Inventory:
    """An ordered collection of components."""

    def __init__(self, components: Iterable[Component] = ()) -> None:
        self._items: list[Component] = list(components)

    def __iter__(self) -> Iterator[Component]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add(self, component: Component) -> Component:
        self._items.append(component)
        return component

    def find(self, component_id: int) -> Component | None:
        return next((c for c in self._items if c.id == component_id), None)

    def remove(self, component_id: int) -> Component:
        """Remove and return the component with the given id."""
        for index, component in enumerate(self._items):
            if component.id == component_id:
                return self._items.pop(index)
        raise KeyError(f"Komponenta s ID-om {component_id} nije pronađena.")

    def next_id(self) -> int:
        return max([0, *(c.id for c in self._items)]) + 1

    def sort_by_price(self) -> None:
        self._items.sort(key=attrgetter("price"))

    def sort_by_id(self) -> None:
        self._items.sort(key=attrgetter("id"))

    def search(self, component_type, brand: str = "", max_price: float | None = None) -> list[Component]:
        """Components of a type, optionally matching a brand and a price ceiling.

        An empty brand and a missing or non-positive ceiling mean no filter.
        """
        wanted = ComponentType(component_type)
        wanted_brand = brand.casefold()
        return [
            c
            for c in self._items
            if c.type == wanted
            and (not wanted_brand or c.brand.casefold() == wanted_brand)
            and (max_price is None or max_price <= 0 or c.price <= max_price)
        ]

    def count(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()


def binary_search_by_id(components: Sequence[Component], component_id: int) -> Component | None:
    """Find a component by id in a sequence sorted by id."""
    index = bisect_left(components, component_id, key=attrgetter("id"))
    if index < len(components) and components[index].id == component_id:
        return components[index]
    return None


def random_configuration(components: Iterable[Component], budget: float, rng: random.Random | None = None) -> Configuration:
    """Pick one random component per type, spreading the budget over the types.

    For each type a component within the current per-type share is preferred;
    if none fits, any component of that type is taken. Types with no
    components are left empty.
    """
    pool = list(components)
    if not pool:
        raise ValueError("Nema dostupnih komponenti.")
    if budget <= 0:
        raise ValueError("Budzet mora biti veci od nule.")
    rng = rng or random.Random()
    types = list(ComponentType)
    configuration = Configuration()
    per_type = budget / len(types)
    for position, component_type in enumerate(types):
        of_type = [c for c in pool if c.type == component_type]
        candidates = [c for c in of_type if c.price <= per_type] or of_type
        if not candidates:
            continue
        chosen = rng.choice(candidates)
        configuration.add(chosen)
        budget = max(budget - chosen.price, 0.0)
        remaining = len(types) - position - 1
        if remaining > 0:
            per_type = budget / remaining
    return configuration