import io
import sys

import pytest

from pckonfig.console import Console, check_admin_password, main
from pckonfig.inventory import Inventory
from pckonfig.models import Component, ComponentType
from pckonfig.storage import load_components, save_components

PASSWORD = "password"


def make_console(text, tmp_path, seed=1):
    import random

    out = io.StringIO()
    err = io.StringIO()
    console = Console(
        stdin=io.StringIO(text),
        stdout=out,
        stderr=err,
        data_file=tmp_path / "komponente.bin",
        backup_file=tmp_path / "backup_komponente.bin",
        rng=random.Random(seed),
    )
    return console, out


def sample_inventory():
    return Inventory(
        [
            Component(1, ComponentType.CPU, "Intel", "i5", 200.0, 1),
            Component(2, ComponentType.GPU, "Nvidia", "RTX", 500.0, 2),
            Component(3, ComponentType.CPU, "AMD", "Ryzen", 180.0, 3),
        ]
    )


def test_check_admin_password():
    assert check_admin_password(PASSWORD) is True
    assert check_admin_password("wrong") is False


def test_read_int_retries(tmp_path):
    console, out = make_console("abc\n\n42xyz\n", tmp_path)
    assert console.read_int("Broj: ") == 42
    assert "Neispravan unos, pokusajte ponovno: " in out.getvalue()


def test_read_int_eof(tmp_path):
    console, _ = make_console("", tmp_path)
    with pytest.raises(EOFError):
        console.read_int("Broj: ")


def test_read_float(tmp_path):
    console, _ = make_console("x\n3.5\n", tmp_path)
    assert console.read_float("Cijena: ") == pytest.approx(3.5)


def test_read_line_strips_newline(tmp_path):
    console, out = make_console("hello world\n", tmp_path)
    assert console.read_line("> ") == "hello world"
    assert out.getvalue() == "> "


def test_read_component_type_rejects_out_of_range(tmp_path):
    console, _ = make_console("9\n-1\n2\n", tmp_path)
    assert console.read_component_type() is ComponentType.RAM


def test_create_component(tmp_path):
    inventory = Inventory([Component(5, ComponentType.CPU, "Intel", "i7", 300.0, 1)])
    console, _ = make_console("1\nNvidia\nRTX\n499.5\n7\n", tmp_path)
    component = console.create_component(inventory)
    assert component.id == 6
    assert component.type is ComponentType.GPU
    assert component.brand == "Nvidia"
    assert component.model == "RTX"
    assert component.price == pytest.approx(499.5)
    assert component.compatibility_code == 7


def test_edit_component_keeps_values_on_empty_lines(tmp_path):
    component = Component(1, ComponentType.CPU, "Intel", "i5", 200.0, 1)
    console, out = make_console("\n\n\n\n", tmp_path)
    console.edit_component(component)
    assert (component.brand, component.model, component.price, component.compatibility_code) == (
        "Intel",
        "i5",
        200.0,
        1,
    )
    assert "Komponenta uspjesno izmijenjena." in out.getvalue()


def test_edit_component_changes_values(tmp_path):
    component = Component(1, ComponentType.CPU, "Intel", "i5", 200.0, 1)
    console, _ = make_console("AMD\nRyzen\n150.25\n9\n", tmp_path)
    console.edit_component(component)
    assert component.brand == "AMD"
    assert component.model == "Ryzen"
    assert component.price == pytest.approx(150.25)
    assert component.compatibility_code == 9


def test_edit_missing_component(tmp_path):
    console, out = make_console("", tmp_path)
    console.edit_component(None)
    assert "Komponenta nije pronađena." in out.getvalue()


def test_search_menu_filters(tmp_path):
    inventory = sample_inventory()
    console, out = make_console("0\nintel\n0\n", tmp_path)
    found = console.search_menu(inventory)
    assert [c.id for c in found] == [1]
    assert inventory.find(1).describe() in out.getvalue()


def test_search_menu_no_match(tmp_path):
    console, out = make_console("0\n\n10\n", tmp_path)
    assert console.search_menu(sample_inventory()) == []
    assert "Nema komponenti koje zadovoljavaju kriterije." in out.getvalue()


def test_build_menu(tmp_path):
    inventory = sample_inventory()
    script = "1\n1\n1\n3\n1\n2\n3\n0\n3\n0\n1\n3\n4\n"
    console, out = make_console(script, tmp_path)
    configuration = console.build_menu(inventory)
    text = out.getvalue()
    assert "je već dodan u konfiguraciju" in text
    assert "Ta komponenta nije u konfiguraciji." in text
    assert [c.id for c in configuration.components()] == [3, 2]
    assert configuration.total_price == pytest.approx(680.0)


def test_admin_wrong_password(tmp_path):
    console, out = make_console("nope\n", tmp_path)
    assert console.admin_menu(Inventory()) is False
    assert "Neispravna lozinka!" in out.getvalue()


def test_admin_add_save_and_reload(tmp_path):
    inventory = Inventory()
    script = f"{PASSWORD}\n1\n2\nKingston\nFury\n80\n4\n5\n6\n0\n"
    console, out = make_console(script, tmp_path)
    assert console.admin_menu(inventory) is True
    stored = load_components(tmp_path / "komponente.bin")
    assert [(c.id, c.brand, c.type) for c in stored] == [(1, "Kingston", ComponentType.RAM)]
    assert [c.id for c in inventory] == [1]
    assert "Komponente su uspješno učitane." in out.getvalue()


def test_admin_delete_component(tmp_path):
    inventory = sample_inventory()
    console, out = make_console(f"{PASSWORD}\n4\n2\n4\n99\n0\n", tmp_path)
    console.admin_menu(inventory)
    assert [c.id for c in inventory] == [1, 3]
    assert "Komponenta s tim ID-om nije pronađena." in out.getvalue()


def test_user_menu_sort_and_count(tmp_path):
    inventory = sample_inventory()
    console, out = make_console("5\n7\n0\n", tmp_path)
    console.user_menu(inventory)
    assert [c.price for c in inventory] == sorted(c.price for c in inventory)
    assert "Broj komponenti (rekurzivno): 3" in out.getvalue()


def test_user_menu_lookup_by_id(tmp_path):
    inventory = sample_inventory()
    console, out = make_console("6\n3\n6\n42\n0\n", tmp_path)
    console.user_menu(inventory)
    text = out.getvalue()
    assert inventory.find(3).describe() in text
    assert "Nema te komponente." in text


def test_user_menu_random_configuration(tmp_path):
    inventory = sample_inventory()
    console, out = make_console("4\n1000\n0\n", tmp_path)
    console.user_menu(inventory)
    text = out.getvalue()
    assert "Nema dostupnih komponenti za tip RAM" in text
    assert "--- Konfiguracija ---" in text


def test_main_menu_exit(tmp_path):
    console, out = make_console("7\n3\n", tmp_path)
    console.main_menu(Inventory())
    assert "Nepoznata opcija." in out.getvalue()


def test_main_saves_catalogue(tmp_path, monkeypatch):
    data = tmp_path / "komponente.bin"
    save_components(data, sample_inventory())
    script = f"1\n{PASSWORD}\n4\n1\n0\n3\n"
    monkeypatch.setattr(sys, "stdin", io.StringIO(script))
    monkeypatch.setattr(sys, "stdout", io.StringIO())
    assert main(["--file", str(data), "--backup", str(tmp_path / "b.bin")]) == 0
    assert [c.id for c in load_components(data)] == [2, 3]