# pckonfig

pckonfig is a console program for keeping an inventory of PC components and for putting computer configurations together from it.

Each component has an ID, a type, a brand, a model, a price and a compatibility code. The type is one of CPU, GPU, RAM, STORAGE, MATICNA (motherboard), NAPAJANJE (power supply) or KUCISTE (case). A brand keeps at most 29 characters and a model at most 49. A configuration holds at most one component of each type and reports the total price.

The program's menus and messages are in Croatian.

## Installation

```
pip install .
```

The package needs only the Python standard library (Python 3.10 or later).

## Usage

```
pckonfig [--file FILE] [--backup BACKUP]
```

- `--file`: the inventory file. The default is `komponente.bin` in the current directory.
- `--backup`: the file that the backup action writes to. The default is `backup_komponente.bin`.

When it starts, the program loads the inventory from the inventory file. If the file is missing or cannot be read, it starts with an empty inventory. On exit it writes the inventory back to the file. Exit means choosing **Izlaz**, reaching the end of input, or pressing Ctrl-C.

The main menu has three entries:

1. **Administracija**: the administrator menu. It asks for the administrator password first. The password is the `ADMIN_PASSWORD` constant in `pckonfig.console`. From this menu you can:
   - add a component. Its ID is one more than the largest ID in use.
   - list all components.
   - edit a component. An empty line keeps the current value of a field.
   - delete a component.
   - save the inventory to the file, or clear it and load it again from the file.
   - show the size of the file in bytes.
   - copy the file to the backup file.
   - rename the file. The program uses the first word you enter.
   - delete the file.
2. **Korisnicki izbornik**: the user menu. From this menu you can:
   - list the components.
   - search by type, with an optional brand (compared without regard to case) and an optional maximum price. A price of 0 or less means no limit.
   - build a configuration by hand: add components by ID, show the configuration, and remove a component by type.
   - generate a random configuration within a budget.
   - sort the inventory by price, lowest first.
   - look up a component by ID with a binary search.
   - show how many components there are.
   - list the components stored in the file.
3. **Izlaz**: save and exit.

## File format

The inventory file is a sequence of fixed-size little-endian records, one for each component. Each record is `pckonfig.storage.RECORD_SIZE` bytes (104). The fields are stored in this order:

| Field | Encoding |
| --- | --- |
| id | 32-bit integer |
| type | 32-bit integer |
| brand | 30-byte NUL-padded UTF-8 |
| model | 50-byte NUL-padded UTF-8 |
| price | 32-bit float |
| compatibility code | 32-bit integer |
| padding | 8 bytes |

When the file is loaded, a partial record at the end is ignored.

## Library use

```python
from pckonfig.models import Component, ComponentType, Configuration
from pckonfig.inventory import Inventory, random_configuration
from pckonfig.storage import save_components, load_components

inventory = Inventory()
inventory.add(Component(inventory.next_id(), ComponentType.CPU, "AMD", "Ryzen 5", 150.0, 1))
inventory.add(Component(inventory.next_id(), ComponentType.GPU, "NVIDIA", "RTX 4060", 300.0, 1))

config = Configuration()
config.add(inventory.find(1))
print(config.describe())

print(inventory.search(ComponentType.GPU, brand="nvidia", max_price=400))
print(random_configuration(inventory, 1000.0).total_price)

save_components("komponente.bin", inventory)
assert load_components("komponente.bin")[0].brand == "AMD"
```

The modules are:

- `pckonfig.models`:
  - `ComponentType`
  - `Component` (its `describe()` method gives a one-line summary)
  - `Configuration`, with `add`, `remove`, `components`, `describe`, `count` and `total_price`
  - `type_label`
  - `DuplicateTypeError`, which `Configuration.add` raises when a component of that type is already in the configuration.
- `pckonfig.inventory`:
  - `Inventory`, with `add`, `find`, `remove`, `next_id`, `sort_by_price`, `sort_by_id`, `search`, `count` and `clear`. `Inventory.remove` raises `KeyError` when no component has the given ID.
  - `binary_search_by_id`, which needs a sequence sorted by ID.
  - `random_configuration`, which takes an optional `random.Random`.
- `pckonfig.storage`:
  - `pack_component` and `unpack_component`
  - `load_components` and `save_components`
  - `copy_file`, `rename_file`, `delete_file` and `file_size`
- `pckonfig.console`:
  - the `Console` class, which runs the menus over any pair of text streams.
  - `main`, the entry point of the `pckonfig` command.

## Running the tests

```
pip install .[test]
pytest
```