"""Interactive text menus for the component catalogue."""

from __future__ import annotations

import argparse
import random
import re
import sys
from pathlib import Path
from typing import TextIO

from .inventory import Inventory, binary_search_by_id, random_configuration
from .models import MAX_BRAND, MAX_MODEL, Component, ComponentType, Configuration, DuplicateTypeError
from .storage import copy_file, delete_file, file_size, load_components, rename_file, save_components

ADMIN_PASSWORD = "password"
DATA_FILE = "komponente.bin"
BACKUP_FILE = "backup_komponente.bin"
MAX_FILENAME = 63

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

_TYPE_MENU = "\n".join(f"{t.value} - {t.label}" for t in ComponentType)


def check_admin_password(password: str) -> bool:
    """Return True when the given text is the administrator password."""
    return password == ADMIN_PASSWORD


def _leading_int(text: str) -> int | None:
    match = _INT.match(text)
    return int(match.group(1)) if match else None


def _leading_float(text: str) -> float | None:
    match = _FLOAT.match(text)
    return float(match.group(1)) if match else None


class Console:
    """Menu-driven front end reading from one stream and writing to another."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        data_file=DATA_FILE,
        backup_file=BACKUP_FILE,
        rng: random.Random | None = None,
    ) -> None:
        self.inp = stdin if stdin is not None else sys.stdin
        self.out = stdout if stdout is not None else sys.stdout
        self.err = stderr if stderr is not None else sys.stderr
        self.data_file = Path(data_file)
        self.backup_file = Path(backup_file)
        self.rng = rng or random.Random()

    # -- low-level input -------------------------------------------------

    def _say(self, text: str = "") -> None:
        print(text, file=self.out)

    def _error(self, context: str, exc: Exception) -> None:
        print(f"{context}: {exc}", file=self.err)

    def _raw_line(self) -> str:
        line = self.inp.readline()
        if line == "":
            raise EOFError("input exhausted")
        return line.rstrip("\r\n")

    def read_line(self, prompt: str) -> str:
        """Show a prompt and return one line of input without its newline."""
        self.out.write(prompt)
        return self._raw_line()

    def _read_number(self, prompt: str, parse):
        self.out.write(prompt)
        while True:
            line = self._raw_line()
            if not line.strip():
                continue
            value = parse(line)
            if value is not None:
                return value
            self.out.write("Neispravan unos, pokusajte ponovno: ")

    def read_int(self, prompt: str) -> int:
        """Prompt until a line starting with an integer is entered."""
        return self._read_number(prompt, _leading_int)

    def read_float(self, prompt: str) -> float:
        """Prompt until a line starting with a number is entered."""
        return self._read_number(prompt, _leading_float)

    def read_component_type(self) -> ComponentType:
        while True:
            self._say("Odaberite tip komponente:")
            self._say(_TYPE_MENU)
            choice = self.read_int("Unesite broj: ")
            if 0 <= choice < len(ComponentType):
                return ComponentType(choice)

    # -- component editing ----------------------------------------------

    def create_component(self, inventory: Inventory) -> Component:
        """Ask for the fields of a new component; its id follows the largest in use."""
        new_id = inventory.next_id()
        component_type = self.read_component_type()
        brand = self.read_line("Unesite brand: ")
        model = self.read_line("Unesite model: ")
        price = self.read_float("Unesite cijenu: ")
        code = self.read_int("Unesite kod kompatibilnosti (broj): ")
        return Component(new_id, component_type, brand, model, price, code)

    def edit_component(self, component: Component | None) -> None:
        """Ask for new field values; an empty line keeps the current one."""
        if component is None:
            self._say("Komponenta nije pronađena.")
            return
        self._say(f"Trenutni brand: {component.brand}")
        text = self.read_line("Unesite novi brand (ENTER za preskakanje): ")
        if text:
            component.brand = text[: MAX_BRAND - 1]
        self._say(f"Trenutni model: {component.model}")
        text = self.read_line("Unesite novi model (ENTER za preskakanje): ")
        if text:
            component.model = text[: MAX_MODEL - 1]
        self._say(f"Trenutna cijena: {component.price:.2f}")
        text = self.read_line("Unesite novu cijenu (ENTER za preskakanje): ")
        if text:
            component.price = _leading_float(text) or 0.0
        self._say(f"Trenutni kod kompatibilnosti: {component.compatibility_code}")
        text = self.read_line("Unesite novi kod kompatibilnosti (ENTER za preskakanje): ")
        if text:
            component.compatibility_code = _leading_int(text) or 0
        self._say("Komponenta uspjesno izmijenjena.")

    # -- user features ---------------------------------------------------

    def _print_list(self, components) -> None:
        items = list(components)
        if not items:
            self._say("Lista komponenti je prazna.")
            return
        for component in items:
            self._say(component.describe())

    def search_menu(self, inventory: Inventory) -> list[Component]:
        """Filter by type, brand and price ceiling; print and return the matches."""
        if not len(inventory):
            self._say("Nema dostupnih komponenti.")
            return []
        component_type = self.read_component_type()
        brand = self.read_line("Unesite brend za pretragu (ENTER za preskakanje): ")
        price_text = self.read_line("Unesite maksimalnu cijenu (0 za preskakanje): ")
        max_price = _leading_float(price_text)
        if max_price is None:
            max_price = -1.0
        found = inventory.search(component_type, brand, max_price)
        for component in found:
            self._say(component.describe())
        if not found:
            self._say("Nema komponenti koje zadovoljavaju kriterije.")
        return found

    def build_menu(self, inventory: Inventory) -> Configuration | None:
        """Let the user assemble a configuration; return it when finished."""
        if not len(inventory):
            self._say("Nema dostupnih komponenti.")
            return None
        configuration = Configuration()
        while True:
            self._say()
            self._say("--- Korisnicko slaganje ---")
            self._say("1 - Dodaj komponentu u konfiguraciju")
            self._say("2 - Prikazi trenutnu konfiguraciju")
            self._say("3 - Izbrisi komponentu iz konfiguracije")
            self._say("4 - Završetak slaganja")
            choice = self.read_int("Unesite izbor: ")
            if choice == 1:
                self._print_list(inventory)
                component = inventory.find(self.read_int("Unesite ID komponente za dodavanje: "))
                if component is None:
                    self._say("Komponenta s tim ID-om nije pronađena.")
                    continue
                try:
                    configuration.add(component)
                except DuplicateTypeError as exc:
                    self._say(str(exc))
                else:
                    self._say("Komponenta dodana.")
            elif choice == 2:
                self._say()
                self._say(configuration.describe())
            elif choice == 3:
                slot = self.read_int(
                    "Unesite tip komponente koju želite izbrisati iz konfiguracije (0-6): "
                )
                if not 0 <= slot < len(ComponentType):
                    self._say("Neispravan tip.")
                    continue
                try:
                    configuration.remove(slot)
                except KeyError:
                    self._say("Ta komponenta nije u konfiguraciji.")
                else:
                    self._say("Komponenta izbrisana iz konfiguracije.")
            elif choice == 4:
                return configuration
            else:
                self._say("Neispravan unos.")

    def _random_build(self, inventory: Inventory) -> None:
        budget = self.read_float("Unesite maksimalni budzet za konfiguraciju: ")
        try:
            configuration = random_configuration(inventory, budget, self.rng)
        except ValueError as exc:
            self._say(str(exc))
            return
        present = {component.type for component in inventory}
        for component_type in ComponentType:
            if component_type not in present:
                self._say(f"Nema dostupnih komponenti za tip {component_type.label}")
        self._say()
        self._say(configuration.describe())

    def _lookup_by_id(self, inventory: Inventory) -> None:
        if not len(inventory):
            self._say("Nema komponenti.")
            return
        ordered = sorted(inventory, key=lambda component: component.id)
        found = binary_search_by_id(ordered, self.read_int("Unesite ID za pretragu (bsearch): "))
        self._say(found.describe() if found else "Nema te komponente.")

    def _print_file(self) -> None:
        try:
            stored = load_components(self.data_file)
        except (OSError, ValueError) as exc:
            self._error("Ne mogu otvoriti datoteku", exc)
            return
        self._say("Komponente iz datoteke:")
        for component in stored:
            self._say(component.describe())

    def user_menu(self, inventory: Inventory) -> None:
        while True:
            self._say()
            self._say("--- Korisnicki meni ---")
            self._say("1 - Pregled svih komponenti")
            self._say("2 - Pretraga komponenti")
            self._say("3 - Slaganje konfiguracije")
            self._say("4 - Nasumicna konfiguracija u budzetu")
            self._say("5 - Sortiraj po cijeni (qsort)")
            self._say("6 - Pretrazi po ID (bsearch)")
            self._say("7 - Prikazi broj komponenti rekurzivno")
            self._say("8 - Prikazi komponente direktno iz datoteke (fseek)")
            self._say("0 - Izlaz")
            choice = self.read_int("Unesite izbor: ")
            if choice == 1:
                self._print_list(inventory)
            elif choice == 2:
                self.search_menu(inventory)
            elif choice == 3:
                self.build_menu(inventory)
            elif choice == 4:
                self._random_build(inventory)
            elif choice == 5:
                inventory.sort_by_price()
                self._say("Sortirano po cijeni (uzlazno):")
                self._print_list(inventory)
            elif choice == 6:
                self._lookup_by_id(inventory)
            elif choice == 7:
                self._say(f"Broj komponenti (rekurzivno): {inventory.count()}")
            elif choice == 8:
                self._print_file()
            elif choice == 0:
                return
            else:
                self._say("Nepoznat izbor, pokusajte ponovno.")

    # -- administration --------------------------------------------------

    def _reload(self, inventory: Inventory) -> None:
        inventory.clear()
        try:
            loaded = load_components(self.data_file)
        except (OSError, ValueError) as exc:
            self._error("ucitaj_komponente", exc)
            loaded = []
        for component in loaded:
            inventory.add(component)
        if loaded:
            self._say("Komponente su uspješno učitane.")
        else:
            self._say("Greška pri učitavanju komponenti.")

    def _file_action(self, action, success: str, failure: str, context: str) -> None:
        try:
            action()
        except OSError as exc:
            self._error(context, exc)
            self._say(failure)
        else:
            self._say(success)

    def _read_filename(self) -> str:
        self.out.write("Unesite novo ime: ")
        while True:
            tokens = self._raw_line().split()
            if tokens:
                return tokens[0][:MAX_FILENAME]

    def admin_menu(self, inventory: Inventory) -> bool:
        """Run the administrator menu; return False if the password was wrong."""
        if not check_admin_password(self.read_line("Unesite lozinku: ")):
            self._say("Neispravna lozinka!")
            return False
        while True:
            self._say()
            self._say("--- Administratorski meni ---")
            self._say("1. Dodaj komponentu")
            self._say("2. Prikazi sve komponente")
            self._say("3. Izmijeni komponentu")
            self._say("4. Obrisi komponentu")
            self._say("5. Spremi komponente u datoteku")
            self._say("6. Ucitaj komponente iz datoteke")
            self._say("7. Prikazi velicinu datoteke")
            self._say("8. Kopiraj datoteku (backup)")
            self._say("9. Preimenuj datoteku")
            self._say("10. Obrisi datoteku")
            self._say("0. Izlaz")
            choice = self.read_int("Odaberite opciju: ")
            if choice == 1:
                inventory.add(self.create_component(inventory))
            elif choice == 2:
                self._print_list(inventory)
            elif choice == 3:
                component = inventory.find(self.read_int("Unesite ID komponente za izmjenu: "))
                self.edit_component(component)
            elif choice == 4:
                try:
                    inventory.remove(self.read_int("Unesite ID komponente za brisanje: "))
                except KeyError:
                    self._say("Komponenta s tim ID-om nije pronađena.")
                else:
                    self._say("Komponenta obrisana.")
            elif choice == 5:
                self._file_action(
                    lambda: save_components(self.data_file, inventory),
                    "Komponente su uspjesno spremljene.",
                    "Greška pri spremanju komponenti.",
                    "Greska pri otvaranju datoteke za zapis",
                )
            elif choice == 6:
                self._reload(inventory)
            elif choice == 7:
                try:
                    size = file_size(self.data_file)
                except OSError as exc:
                    self._error("prikazi_velicinu_datoteke", exc)
                else:
                    self._say(f"Datoteka {self.data_file} ima {size} bajta.")
            elif choice == 8:
                self._file_action(
                    lambda: copy_file(self.data_file, self.backup_file),
                    "Backup OK.",
                    "Backup nije uspio.",
                    "kopiraj_datoteku",
                )
            elif choice == 9:
                new_name = self._read_filename()
                self._file_action(
                    lambda: rename_file(self.data_file, new_name),
                    "Preimenovano.",
                    "Preimenovanje nije uspjelo.",
                    "rename",
                )
            elif choice == 10:
                self._file_action(
                    lambda: delete_file(self.data_file),
                    "Obrisano.",
                    "Brisanje nije uspjelo.",
                    "remove",
                )
            elif choice == 0:
                return True
            else:
                self._say("Nepoznata opcija.")

    def main_menu(self, inventory: Inventory) -> None:
        while True:
            self._say()
            self._say("--- Glavni izbornik ---")
            self._say("1. Administracija")
            self._say("2. Korisnicki izbornik ")
            self._say("3. Izlaz")
            choice = self.read_int("Odaberite opciju: ")
            if choice == 1:
                self.admin_menu(inventory)
            elif choice == 2:
                self.user_menu(inventory)
            elif choice == 3:
                return
            else:
                self._say("Nepoznata opcija.")


def main(argv=None) -> int:
    """Load the catalogue, run the main menu, then save the catalogue back."""
    parser = argparse.ArgumentParser(prog="pckonfig", description="PC component catalogue")
    parser.add_argument("--file", default=DATA_FILE, help="catalogue file")
    parser.add_argument("--backup", default=BACKUP_FILE, help="backup file")
    args = parser.parse_args(argv)

    console = Console(data_file=args.file, backup_file=args.backup)
    try:
        inventory = Inventory(load_components(args.file))
    except (OSError, ValueError):
        inventory = Inventory()

    try:
        console.main_menu(inventory)
    except (EOFError, KeyboardInterrupt):
        pass

    try:
        save_components(args.file, inventory)
    except OSError:
        print("Greška pri spremanju komponenti.", file=console.out)
    return 0


if __name__ == "__main__":
    sys.exit(main())