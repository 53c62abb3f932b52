import xml.etree.ElementTree as ET
import zipfile

import pytest

from clikshop.excel import save_xlsx, save_xlsx_rows
from clikshop.models import Cat, ColorItem, Description, Product, Size, Variety

NS = "http://schemas.openxmlformats.org/spreadsheetml/2006/main"


def read_cells(path):
    with zipfile.ZipFile(path) as archive:
        root = ET.fromstring(archive.read("xl/worksheets/sheet1.xml"))
    cells = {}
    for cell in root.iter(f"{{{NS}}}c"):
        kind = cell.get("t")
        if kind == "inlineStr":
            value = "".join(t.text or "" for t in cell.iter(f"{{{NS}}}t"))
        elif kind == "b":
            value = cell.find(f"{{{NS}}}v").text == "1"
        else:
            text = cell.find(f"{{{NS}}}v").text
            try:
                value = int(text)
            except ValueError:
                value = float(text)
        cells[cell.get("r")] = value
    return cells


@pytest.fixture
def variety():
    product = Product(
        cat=[Cat("Zara", "zara"), Cat("WOMAN", "woman"), Cat("SHIRTS", "shirts")],
        name="Shirt",
        full_name="Satin shirt",
        link="https://shop.example.com/shirt",
        article="0001",
        manufacturer="ZARA",
        gender_label="women",
        size=["S", "M"],
        description=Description(eng="english", rus="русский"),
        item=[
            ColorItem(
                color_code="black",
                color_eng="Black",
                link="https://shop.example.com/shirt-black",
                price=1250.5,
                size=[Size("S", True)],
                image=["a.jpg"],
            ),
            ColorItem(
                color_code="white",
                color_eng="White",
                link="https://shop.example.com/shirt-white",
                price=990.0,
                size=[Size("L", True), Size("M", False)],
                image=["b.jpg", "c.jpg"],
            ),
        ],
    )
    return Variety(product=[product])


def test_save_xlsx_adds_extension_and_headers(tmp_path, variety):
    path = save_xlsx(variety, tmp_path / "Zara")
    assert path.name == "Zara.xlsx"
    cells = read_cells(path)
    assert cells["A1"] == "Каталог"
    assert cells["O1"] == "Размеры"


def test_save_xlsx_product_row(tmp_path, variety):
    product = variety.product[0]
    cells = read_cells(save_xlsx(variety, tmp_path / "Zara"))
    assert cells["A2"] == product.cat[0].name
    assert cells["C2"] == product.cat[2].name
    assert "D2" not in cells
    assert cells["E2"] == product.name
    assert cells["H2"] == product.article
    assert cells["K2"] == product.description.rus
    assert cells["L2"] == product.description.eng


def test_save_xlsx_last_variation_wins(tmp_path, variety):
    last = variety.product[0].item[-1]
    cells = read_cells(save_xlsx(variety, tmp_path / "Zara"))
    assert cells["G2"] == last.link
    assert cells["J2"] == last.price
    assert cells["M2"] == len(variety.product[0].item) - 1
    assert cells["O2"] == "[{L true } {M false }]"


def test_save_xlsx_rows_layout(tmp_path, variety):
    product = variety.product[0]
    cells = read_cells(save_xlsx_rows(variety, tmp_path / "rows"))
    assert cells["A1"] == "Номер"
    assert cells["A2"] == 1
    assert cells["B2"] == " > ".join(c.name for c in product.cat)
    assert cells["C2"] == product.cat[0].name
    assert cells["G2"] == product.gender_label
    assert cells["P2"] == ",".join(product.size)
    # variation rows follow the product row
    for offset, item in enumerate(product.item):
        row = 3 + offset
        assert cells[f"A{row}"] == 1
        assert cells[f"H{row}"] == product.name
        assert cells[f"N{row}"] == offset
        assert cells[f"J{row}"] == item.link
        assert cells[f"M{row}"] == item.price
        assert cells[f"O{row}"] == ",".join(item.image)


def test_save_xlsx_rows_numbers_products(tmp_path, variety):
    second = Product(name="Second")
    variety.product.append(second)
    cells = read_cells(save_xlsx_rows(variety, tmp_path / "rows"))
    next_row = 2 + 1 + len(variety.product[0].item)
    assert cells[f"A{next_row}"] == 2
    assert cells[f"H{next_row}"] == second.name


def test_empty_variety_has_only_headers(tmp_path):
    cells = read_cells(save_xlsx_rows(Variety(), tmp_path / "empty"))
    assert all(ref.endswith("1") and ref[-2].isalpha() for ref in cells)
    assert len(cells) == 18