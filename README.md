# clikshop

Building blocks for filling a clothing storefront: a common product model,
conversion of Zara Turkey category trees, listings and product pages into that
model, price recalculation, the current Turkish lira rate, and export to JSON
and XLSX.

## What is inside

- `clikshop.models` – the common product model: `Cat`, `Size`, `ColorItem`,
  `Description`, `Product` and `Variety`, with `to_dict` / `from_dict`.
- `clikshop.helpers` – slugs (`name_to_slug`, `slug_to_name`), gender labels
  (`gender_book`), de-duplication, transliteration, price recalculation
  (`edit_cost`, `round_to_tens`) and colour and size clean-up
  (`dedupe_colors`, `fill_no_size`, `collect_sizes`, `collect_images`).
- `clikshop.jsonio` – compact JSON encoding (`dumps_compact`) and writing a
  `Variety` to disk (`save_json`, `save_json_exact`).
- `clikshop.xlsx` – a small self-contained single-sheet `Workbook` writer.
- `clikshop.excel` – spreadsheet export of a `Variety` (`save_xlsx`,
  `save_xlsx_rows`).
- `clikshop.image` – `webp_to_jpg` converts a WebP picture to JPEG.
- `clikshop.config` – `parse_config` reads a JSON, YAML or TOML settings file
  into `Config`; a missing file gives defaults.
- `clikshop.cbbank` – `CentralBank.lira()` fetches the daily rate feed and
  returns roubles per lira; `parse_lira` does the same for a document you
  already have.
- `clikshop.zara.models` – the category tree (`CategoryTree`, `Subcategory`,
  `CategoryItem`) and category listings (`Line`, `CommercialComponent`).
- `clikshop.zara.category` – `build_category_items` turns the category tree
  into product categories with their path, listing id and gender;
  `walk_categories` collects every leaf category.
- `clikshop.zara.convertor` – `Touch.from_dict` reads a product page and
  `touch_to_product` turns it into a `Product`.

## Examples

Slugs, gender labels and prices:

```python
from clikshop.helpers import gender_book, name_to_slug, round_to_tens

name_to_slug("Light Blue")      # "light-blue"
gender_book("Woman", "")        # ("Женщины", "women", True)
round_to_tens(5225.77)          # 5230.0
```

Recalculating every variation price of a product (exchange rate × price ×
margin + delivery, rounded to tens):

```python
from clikshop.cbbank import CentralBank
from clikshop.helpers import edit_cost

rate = CentralBank().lira()
priced = edit_cost(product, rate, walrus, delivery)
```

Converting Zara data that has already been downloaded as JSON:

```python
from clikshop.models import Variety
from clikshop.zara.category import build_category_items
from clikshop.zara.convertor import Touch, touch_to_product
from clikshop.zara.models import CategoryTree

categories = build_category_items(CategoryTree.from_dict(tree_json))
product = touch_to_product(Touch.from_dict(page_json))
variety = Variety(product=[product])
```

Saving the result:

```python
from clikshop.excel import save_xlsx_rows
from clikshop.jsonio import save_json

save_json(variety, "zara")        # writes zara.json
save_xlsx_rows(variety, "zara")   # writes zara.xlsx
```

`save_json` raises `ValueError` for an empty `Variety`; network and decoding
errors are raised as exceptions rather than returned.

## What it does not do

The package does not download the Zara catalogue itself: category trees,
listings and product pages must be fetched by the caller and passed to the
`from_dict` constructors. It has no client for the shop's own API, no logging
setup of its own, and no command-line program.

## Tests

The test suite uses pytest and `responses`, so no request ever leaves the
machine; both come with the `test` extra.