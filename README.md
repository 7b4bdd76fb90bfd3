# inventaris

A small command-line inventory for an office. It keeps track of item
categories and the items bought under them. It lists the items that have been
in use for more than 100 days and are due for replacement. It also reports
what the items are still worth after depreciation. Prompts and messages are
in Indonesian.

Data is stored in a local SQLite database. The tables are created when the
command first runs. The file is `inventory.db` in the current directory, or
the path given in the `DB_PATH` environment variable.

## Installing

```
pip install .
```

## Using the command

Each run performs one command, chosen with `-cmd` (or `--cmd`):

```
inventaris -cmd=list-category
```

Run `inventaris` with no command to see the list of commands. An unknown
command is reported, and the list of commands is shown after it.

Categories:

- `add-category` — add a category (asks for a name and a description)
- `list-category` — show all categories
- `edit-category` — change a category's name and description
- `delete-category` — remove a category
- `detail-category` — show one category by its ID

Items:

- `add-item` — add an item (name, category ID, price, purchase date as `yyyy-mm-dd`)
- `list-item` — show all items, with the number of days each has been in use
- `edit-item` — change an item's details
- `delete-item` — remove an item
- `detail-item` — show one item by its ID
- `search-item` — find items whose name contains a keyword (one word), ignoring case
- `check-replacement` — list the items in use for more than 100 days

Reports:

- `report-investment` — total value of all items after depreciation
- `report-by-id` — purchase value and depreciated value of one item

Commands that need input ask for it on the terminal. Category and item names
may not be empty. An ID that is not a whole number is rejected. So is a
purchase date that is not a valid `yyyy-mm-dd` date. Foreign keys are
enforced, so an item's category must exist. A category that still has items
cannot be deleted.

## Depreciation

Items lose 20% of their value per year. A year counts as 365 days, and the
rate also applies to part of a year. An item bought for 1,000 exactly 365 days
ago is now worth 800, and one bought 730 days ago is worth 640.
`inventaris.depreciation.calculate_depreciation(price, purchase_date, now=None)`
does the calculation and can be used on its own.
`inventaris.depreciation.days_since` gives the whole days since a purchase.

## Using it from Python

`inventaris.services.InventoryService` takes an open connection and offers the
same operations as the command. It raises `inventaris.models.NotFoundError`
when a record is missing and `inventaris.models.ValidationError` when input is
rejected. Both are subclasses of `InventoryError`.

`inventaris.database.init_db()` opens the database and creates the tables.
`inventaris.database.database_path()` tells where the database is.
`inventaris.repository.CategoryRepository` and `ItemRepository` give direct
access to the tables. `inventaris.handlers.Console` runs the interactive
commands on any input and output streams.

```python
from datetime import date
from inventaris.database import init_db
from inventaris.services import InventoryService

connection = init_db(":memory:")
service = InventoryService(connection)
category_id = service.add_category("Elektronik", "Peralatan kantor")
service.add_item("Laptop", category_id, 15000000, date(2024, 1, 1))
print(service.total_investment_value())
```

## Running the tests

```
pip install ".[test]"
pytest
```