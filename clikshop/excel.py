"""Spreadsheet export of catalogue data."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .models import Size, Variety
from .xlsx import Workbook

_SHEET = "main"

_COLUMNS_HEADERS = (
    "Каталог",
    "ПодКаталог",
    "Секция",
    "Подсекция",
    "Название товара",
    "Полное название товара",
    "Ссылка на товар",
    "Артикул",
    "Производитель",
    "Цена",
    "Описание товара Rus",
    "Описание товара Eng",
    "Цвета",
    "Картинки",
    "Размеры",
)

_ROWS_HEADERS = (
    "Номер",
    "Путь",
    "Магазин",
    "Каталог",
    "ПодКаталог",
    "Секция",
    "Tag",
    "Название товара",
    "Полное название товара",
    "Ссылка на товар",
    "Артикул",
    "Производитель",
    "Цена",
    "Цвет",
    "Ссылки на картинки",
    "Размеры",
    "Описание товара",
    "Описание товара eng",
)


def _sequence(values: Iterable[str]) -> str:
    return "[" + " ".join(values) + "]"


def _sizes(sizes: Iterable[Size]) -> str:
    return _sequence(f"{{{s.val} {str(s.is_exit).lower()} {s.data_code}}}" for s in sizes)


def _new_book(headers: tuple[str, ...]) -> Workbook:
    book = Workbook(_SHEET)
    for column, title in enumerate(headers, start=1):
        book.set_head(column, title)
    return book


def save_xlsx(variety: Variety, filename: str | Path) -> Path:
    """Write one row per product to filename + '.xlsx'."""
    book = _new_book(_COLUMNS_HEADERS)
    for row, product in enumerate(variety.product, start=2):
        for column, cat in enumerate(product.cat[:4], start=1):
            book.set_cell(row, column, cat.name)
        book.set_cell(row, 5, product.name)
        book.set_cell(row, 6, product.full_name)
        book.set_cell(row, 7, product.link)
        book.set_cell(row, 8, product.article)
        book.set_cell(row, 9, product.manufacturer)
        book.set_cell(row, 10, _sequence(product.size))
        book.set_cell(row, 11, product.description.rus)
        book.set_cell(row, 12, product.description.eng)
        # Each variation overwrites the same cells, so the last one wins.
        for index, item in enumerate(product.item):
            book.set_cell(row, 7, item.link)
            book.set_cell(row, 10, item.price)
            book.set_cell(row, 13, index)
            book.set_cell(row, 14, _sequence(item.image))
            book.set_cell(row, 15, _sizes(item.size))
    return book.save(f"{filename}.xlsx")


def save_xlsx_rows(variety: Variety, filename: str | Path) -> Path:
    """Write a product row followed by one row per variation to filename + '.xlsx'."""
    book = _new_book(_ROWS_HEADERS)
    row = 2
    for number, product in enumerate(variety.product, start=1):
        book.set_cell(row, 1, number)
        book.set_cell(row, 2, " > ".join(cat.name for cat in product.cat))
        for column, cat in enumerate(product.cat[:4], start=3):
            book.set_cell(row, column, cat.name)
        book.set_cell(row, 7, product.gender_label)
        book.set_cell(row, 8, product.name)
        book.set_cell(row, 9, product.full_name)
        book.set_cell(row, 10, product.link)
        book.set_cell(row, 11, product.article)
        book.set_cell(row, 12, product.manufacturer)
        book.set_cell(row, 16, ",".join(product.size))
        book.set_cell(row, 17, product.description.rus)
        book.set_cell(row, 18, product.description.eng)
        row += 1

        for index, item in enumerate(product.item):
            book.set_cell(row, 1, number)
            book.set_cell(row, 8, product.name)
            book.set_cell(row, 9, product.full_name)
            book.set_cell(row, 12, product.manufacturer)
            book.set_cell(row, 14, index)
            book.set_cell(row, 10, item.link)
            book.set_cell(row, 13, item.price)
            book.set_cell(row, 15, ",".join(item.image))
            book.set_cell(row, 16, _sizes(item.size))
            row += 1
    return book.save(f"{filename}.xlsx")