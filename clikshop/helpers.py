"""Small text and product helpers used across the parsers."""

from __future__ import annotations

import math
import re
import sys
from collections.abc import Iterable
from dataclasses import replace
from typing import IO

from unidecode import unidecode

from .models import ColorItem, Product, Size

_QUIT_PROMPT = "Press 'q' to quit"
_WORD = re.compile(r"\w[\w']*")


def remove_duplicates(items: Iterable[str]) -> list[str]:
    """Drop repeated strings, keeping the first occurrence of each."""
    return list(dict.fromkeys(items))


def forming_color_eng(text: str) -> str:
    """Turn a colour label or path fragment into a lower-case dashed key."""
    text = text.replace(" ", "-").replace("'", "").replace("/", "-").replace("--", "-")
    return text.lower()


def gender_book(name: str, slug: str = "") -> tuple[str, str, bool]:
    """Map a gender name to (Russian label, tag, known)."""
    match name.lower():
        case "woman" | "women":
            return "Женщины", "women", True
        case "man" | "men":
            return "Мужчины", "man", True
        case "boy":
            return "Мальчики", "boy", True
        case "girl":
            return "Девочки", "girl", True
        case _:
            return "Унисекс", "unisex", False


def data_file(filename: str) -> str:
    """Return at most the first 64 bytes of a file as text."""
    with open(filename, "rb") as fh:
        data = fh.read(64)
    return data.decode("utf-8", errors="replace")


def name_to_slug(text: str) -> str:
    """Turn a name into a URL slug."""
    text = text.lower()
    for old in ("&", " ", "/"):
        text = text.replace(old, "-")
    text = text.replace("--", "-").replace("--", "-")
    return text.strip()


def slug_to_name(text: str) -> str:
    """Turn a slug back into a title-cased name."""
    text = text.replace("-", " ")
    return _WORD.sub(lambda m: m[0][0].upper() + m[0][1:], text)


def _format_float(value: float) -> str:
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def _format_list(values: Iterable[str]) -> str:
    return "[" + " ".join(values) + "]"


def _format_sizes(sizes: Iterable[Size]) -> str:
    return _format_list(
        f"{{{s.val} {str(s.is_exit).lower()} {s.data_code}}}" for s in sizes
    )


def product_summary(product: Product) -> str:
    """Render a product as readable multi-line text."""
    lines = [
        f"Название товара: '{product.name}'\n",
        f"Полное Название товара: '{product.full_name}'\n",
        "- Картинки: \n-" + "\n-".join(product.img) + "\n",
        f"Ссылка на товар: '{product.link}'\n",
        f"Артикул: '{product.article}'\n",
        f"Производитель: '{product.manufacturer}'\n",
        f"Гендер: '{product.gender_label}'\n",
        f"Все Размеры: '{_format_list(product.size)}'\n",
        f"Описание Eng: '{product.description.eng}'\n",
        f"Описание Rus: '{product.description.rus}'\n",
    ]
    for number, item in enumerate(product.item, start=1):
        lines += [
            f"- {number} Вариация с цветом: '{item.color_eng}'\n",
            f"--- Код цвета: {item.color_code}\n",
            f"--- Цена: {_format_float(item.price)}\n",
            f"--- Ссылка: {item.link}\n",
            f"--- Размеры: {_format_sizes(item.size)}\n",
            "--- Картинки: \n----" + "\n----".join(item.image) + "\n",
        ]
    return "".join(lines)


def collect_sizes(product: Product) -> list[str]:
    """All distinct size values found in the product's variations."""
    return remove_duplicates(size.val for item in product.item for size in item.size)


def keep_letters_and_spaces(text: str) -> str:
    """Lower-case, keep letters only and turn whitespace into underscores."""
    return "".join(
        char if char.isalpha() else "_"
        for char in text.lower()
        if char.isalpha() or char.isspace()
    )


def wait_for_quit(input_stream: IO[str] | None = None, output_stream: IO[str] | None = None) -> None:
    """Block until a line consisting of 'q' is read."""
    input_stream = sys.stdin if input_stream is None else input_stream
    output_stream = sys.stdout if output_stream is None else output_stream
    print(_QUIT_PROMPT, file=output_stream, flush=True)
    for line in input_stream:
        if line.rstrip("\r\n") == "q":
            return
        print(_QUIT_PROMPT, file=output_stream, flush=True)


def round_to_tens(cost: float) -> float:
    """Round to the nearest ten, halves away from zero (5225.77 -> 5230)."""
    fraction, whole = math.modf(abs(cost) / 10.0)
    if fraction >= 0.5:
        whole += 1.0
    return math.copysign(whole * 10.0, cost)


def edit_cost(product: Product, rate: float, walrus: float, delivery: int) -> Product:
    """Convert every variation price: rate * price * markup + delivery, rounded to tens."""
    items = [
        replace(item, price=round_to_tens(rate * item.price * walrus + float(delivery)))
        for item in product.item
    ]
    return replace(product, item=items)


def collect_images(product: Product) -> list[str]:
    """Images of all variations, used when the product has no main images."""
    if product.img:
        return []
    return [image for item in product.item for image in item.image]


def dedupe_colors(product: Product) -> Product:
    """Suffix -1, -2, ... onto variations that share a colour code."""
    groups: dict[str, list[ColorItem]] = {}
    for item in product.item:
        groups.setdefault(item.color_code, []).append(item)
    if len(groups) == len(product.item):
        return product

    items: list[ColorItem] = []
    for group in groups.values():
        if len(group) == 1:
            items.append(group[0])
            continue
        items.extend(
            replace(item, color_code=f"{item.color_code}-{n}", color_eng=f"{item.color_eng}-{n}")
            for n, item in enumerate(group, start=1)
        )
    return replace(product, item=items)


def fill_no_size(product: Product) -> Product:
    """Mark a variation whose only size is blank as NOSIZE."""
    items = [
        replace(item, size=[replace(item.size[0], val="NOSIZE")])
        if len(item.size) == 1 and item.size[0].val == ""
        else item
        for item in product.item
    ]
    return replace(product, item=items)


def transliterate(text: str) -> str:
    """Transliterate text into ASCII."""
    return unidecode(text)