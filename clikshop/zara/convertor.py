"""Product page data and its conversion into the catalogue model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..helpers import gender_book, name_to_slug, remove_duplicates
from ..models import Cat, ColorItem, Product, Size
from .models import id_to_str

URL = "https://www.zara.com"
TOUCH_URL = "https://www.zara.com/tr/en/{}.html?ajax=true"
_IMAGE_URL = "https://static.zara.net/photos//{path}/w/916/{name}.jpg?ts={timestamp}"
_IN_STOCK = frozenset({"in_stock", "low_on_stock"})


def _map(data: Any) -> Mapping[str, Any]:
    return data if isinstance(data, Mapping) else {}


def _str(value: Any) -> str:
    return "" if value is None else str(value)


def _int(value: Any) -> int:
    return int(value or 0)


@dataclass
class TouchMedia:
    """A photo of a colour variation."""

    path: str = ""
    name: str = ""
    timestamp: str = ""
    width: int = 0
    height: int = 0

    @property
    def url(self) -> str:
        return _IMAGE_URL.format(path=self.path, name=self.name, timestamp=self.timestamp)


@dataclass
class TouchSize:
    """A size of a colour variation."""

    name: str = ""
    availability: str = ""
    price: int = 0
    reference: str = ""

    @property
    def in_stock(self) -> bool:
        return self.availability in _IN_STOCK


@dataclass
class TouchColor:
    """A colour variation of a product page."""

    id: str = ""
    name: str = ""
    hex_code: str = ""
    reference: str = ""
    price: int = 0
    sizes: list[TouchSize] = field(default_factory=list)
    xmedia: list[TouchMedia] = field(default_factory=list)
    description: str = ""


@dataclass
class BreadCrumb:
    """One step of the page's breadcrumb trail."""

    text: str = ""
    keyword: str = ""
    id: int = 0
    seo_category_id: int = 0
    layout: str = ""


def _media(data: Any) -> TouchMedia:
    data = _map(data)
    return TouchMedia(
        path=_str(data.get("path")),
        name=_str(data.get("name")),
        timestamp=_str(data.get("timestamp")),
        width=_int(data.get("width")),
        height=_int(data.get("height")),
    )


def _size(data: Any) -> TouchSize:
    data = _map(data)
    return TouchSize(
        name=_str(data.get("name")),
        availability=_str(data.get("availability")),
        price=_int(data.get("price")),
        reference=_str(data.get("reference")),
    )


def _color(data: Any) -> TouchColor:
    data = _map(data)
    return TouchColor(
        id=_str(data.get("id")),
        name=_str(data.get("name")),
        hex_code=_str(data.get("hexCode")),
        reference=_str(data.get("reference")),
        price=_int(data.get("price")),
        sizes=[_size(s) for s in data.get("sizes") or []],
        xmedia=[_media(m) for m in data.get("xmedia") or []],
        description=_str(data.get("description")),
    )


def _bread_crumb(data: Any) -> BreadCrumb:
    data = _map(data)
    return BreadCrumb(
        text=_str(data.get("text")),
        keyword=_str(data.get("keyword")),
        id=_int(data.get("id")),
        seo_category_id=_int(data.get("seoCategoryId")),
        layout=_str(data.get("layout")),
    )


@dataclass
class Touch:
    """The parts of a product page that the catalogue uses."""

    location: str = ""
    product_id: str = ""
    name: str = ""
    display_reference: str = ""
    brand_group_code: str = ""
    colors: list[TouchColor] = field(default_factory=list)
    original_url: str = ""
    description: str = ""
    bread_crumbs: list[BreadCrumb] = field(default_factory=list)
    cat: list[Cat] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Touch:
        data = _map(data)
        product = _map(data.get("product"))
        detail = _map(product.get("detail"))
        return cls(
            location=_str(data.get("location")),
            product_id=id_to_str(product.get("id")),
            name=_str(product.get("name")),
            display_reference=_str(detail.get("displayReference")),
            brand_group_code=_str(_map(product.get("brand")).get("brandGroupCode")),
            colors=[_color(c) for c in detail.get("colors") or []],
            original_url=_str(_map(data.get("clientAppConfig")).get("originalUrl")),
            description=_str(_map(data.get("docInfo")).get("description")),
            bread_crumbs=[_bread_crumb(b) for b in data.get("breadCrumbs") or []],
        )


def touch_to_product(touch: Touch) -> Product:
    """Build a catalogue product from a product page."""
    product = Product(
        article=touch.display_reference,
        name=touch.name,
        link=URL + touch.original_url,
        manufacturer=touch.brand_group_code,
        full_name=touch.description,
    )
    product.description.eng = touch.description
    product.gender_label = (
        gender_book(touch.bread_crumbs[0].keyword, "")[1] if touch.bread_crumbs else "unisex"
    )

    all_sizes: list[str] = []
    for color in touch.colors:
        all_sizes.extend(size.name for size in color.sizes)
        product.item.append(
            ColorItem(
                color_eng=color.name,
                color_code=name_to_slug(color.name),
                size=[Size(val=s.name, is_exit=s.in_stock) for s in color.sizes],
                image=[media.url for media in color.xmedia],
                price=float(color.price) / 100,
            )
        )
    product.size = remove_duplicates(all_sizes)
    return product