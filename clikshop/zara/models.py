"""Data model of the Zara category tree and category product listings."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..models import Cat

CATEGORIES_URL = "https://www.zara.com/tr/en/categories?ajax=true"
LINE_URL = "https://www.zara.com/tr/en/category/{}/products"

_DECIMAL = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


def id_to_str(value: Any) -> str:
    """Normalise an identifier that the API sends either as a string or as a number."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    raise ValueError(f"identifier must be a string or a number, got {value!r}")


def id_to_int(value: Any) -> int:
    """Parse an identifier as a signed decimal integer."""
    text = id_to_str(value)
    if not _DECIMAL.fullmatch(text):
        raise ValueError(f"invalid integer identifier {text!r}")
    number = int(text)
    if not _INT_MIN <= number <= _INT_MAX:
        raise ValueError(f"integer identifier {text!r} is out of range")
    return number


def _map(data: Any) -> Mapping[str, Any]:
    return data if isinstance(data, Mapping) else {}


def _int(value: Any) -> int:
    return int(value or 0)


def _str(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass
class SeoCategory:
    """SEO data of a category."""

    seo_category_id: int = 0
    keyword: str = ""
    irrelevant: bool = False
    is_hidden_in_menu: bool = False


def _seo_category(data: Any) -> SeoCategory:
    data = _map(data)
    return SeoCategory(
        seo_category_id=_int(data.get("seoCategoryId")),
        keyword=_str(data.get("keyword")),
        irrelevant=bool(data.get("irrelevant", False)),
        is_hidden_in_menu=bool(data.get("isHiddenInMenu", False)),
    )


@dataclass
class CategoryItem:
    """The content of one node of the category tree."""

    id: str = ""
    name: str = ""
    section_name: str = ""
    layout: str = ""
    content_type: str = ""
    grid_layout: str = ""
    seo: SeoCategory = field(default_factory=SeoCategory)
    attributes: dict[str, Any] = field(default_factory=dict)
    key: str = ""
    is_redirected: bool = False
    is_current: bool = False
    is_selected: bool = False
    has_subcategories: bool = False
    irrelevant: bool = False
    view_options: dict[str, Any] = field(default_factory=dict)
    menu_level: int = 0
    redirect_category_id: int = 0
    cat: list[Cat] = field(default_factory=list)
    gender: str = ""


def _category_item(data: Mapping[str, Any]) -> CategoryItem:
    return CategoryItem(
        id=id_to_str(data.get("id")),
        name=_str(data.get("name")),
        section_name=_str(data.get("sectionName")),
        layout=_str(data.get("layout")),
        content_type=_str(data.get("contentType")),
        grid_layout=_str(data.get("gridLayout")),
        seo=_seo_category(data.get("seo")),
        attributes=dict(_map(data.get("attributes"))),
        key=_str(data.get("key")),
        is_redirected=bool(data.get("isRedirected", False)),
        is_current=bool(data.get("isCurrent", False)),
        is_selected=bool(data.get("isSelected", False)),
        has_subcategories=bool(data.get("hasSubcategories", False)),
        irrelevant=bool(data.get("irrelevant", False)),
        view_options=dict(_map(data.get("viewOptions"))),
        menu_level=_int(data.get("menuLevel")),
        redirect_category_id=_int(data.get("redirectCategoryId")),
    )


@dataclass
class Subcategory:
    """A node of the category tree with its children."""

    item: CategoryItem = field(default_factory=CategoryItem)
    subcategories: list[Subcategory] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Subcategory:
        data = _map(data)
        return cls(
            item=_category_item(data),
            subcategories=[cls.from_dict(s) for s in data.get("subcategories") or []],
        )


@dataclass
class CategoryTree:
    """The whole category tree of the shop."""

    categories: list[Subcategory] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> CategoryTree:
        data = _map(data)
        return cls(
            categories=[Subcategory.from_dict(c) for c in data.get("categories") or []]
        )


@dataclass
class Xmedia:
    """A media file (usually a photo) of a product."""

    datatype: str = ""
    set: int = 0
    type: str = ""
    kind: str = ""
    path: str = ""
    name: str = ""
    width: int = 0
    height: int = 0
    timestamp: str = ""
    allowed_screens: list[str] = field(default_factory=list)
    original_name: str = ""


def _xmedia(data: Any) -> Xmedia:
    data = _map(data)
    return Xmedia(
        datatype=_str(data.get("datatype")),
        set=_int(data.get("set")),
        type=_str(data.get("type")),
        kind=_str(data.get("kind")),
        path=_str(data.get("path")),
        name=_str(data.get("name")),
        width=_int(data.get("width")),
        height=_int(data.get("height")),
        timestamp=_str(data.get("timestamp")),
        allowed_screens=[_str(s) for s in data.get("allowedScreens") or []],
        original_name=_str(_map(data.get("extraInfo")).get("originalName")),
    )


@dataclass
class Seo:
    """SEO data of a product; keyword and product id form its page name."""

    keyword: str = ""
    seo_product_id: str = ""
    discern_product_id: int = 0


def _seo(data: Any) -> Seo:
    data = _map(data)
    return Seo(
        keyword=_str(data.get("keyword")),
        seo_product_id=_str(data.get("seoProductId")),
        discern_product_id=_int(data.get("discernProductId")),
    )


@dataclass
class CommercialComponent:
    """A product as listed in a category."""

    id: str = ""
    reference: str = ""
    type: str = ""
    kind: str = ""
    brand: dict[str, Any] = field(default_factory=dict)
    xmedia: list[Xmedia] = field(default_factory=list)
    name: str = ""
    description: str = ""
    price: int = 0
    section: int = 0
    section_name: str = ""
    family_name: str = ""
    subfamily_name: str = ""
    detail: dict[str, Any] = field(default_factory=dict)
    seo: Seo = field(default_factory=Seo)
    availability: str = ""
    grid_position: int = 0
    color_list: str = ""
    is_divider: bool = False
    show_availability: bool = False
    price_unavailable: bool = False
    cat: list[Cat] = field(default_factory=list)
    gender: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> CommercialComponent:
        data = _map(data)
        return cls(
            id=id_to_str(data.get("id")),
            reference=_str(data.get("reference")),
            type=_str(data.get("type")),
            kind=_str(data.get("kind")),
            brand=dict(_map(data.get("brand"))),
            xmedia=[_xmedia(x) for x in data.get("xmedia") or []],
            name=_str(data.get("name")),
            description=_str(data.get("description")),
            price=_int(data.get("price")),
            section=_int(data.get("section")),
            section_name=_str(data.get("sectionName")),
            family_name=_str(data.get("familyName")),
            subfamily_name=_str(data.get("subfamilyName")),
            detail=dict(_map(data.get("detail"))),
            seo=_seo(data.get("seo")),
            availability=_str(data.get("availability")),
            grid_position=_int(data.get("gridPosition")),
            color_list=_str(data.get("colorList")),
            is_divider=bool(data.get("isDivider", False)),
            show_availability=bool(data.get("showAvailability", False)),
            price_unavailable=bool(data.get("priceUnavailable", False)),
        )


@dataclass
class Element:
    """A block of a category listing."""

    id: str = ""
    name: str = ""
    type: str = ""
    layout: str = ""
    commercial_components: list[CommercialComponent] = field(default_factory=list)
    has_sticky_banner: bool = False
    needs_separator: bool = False
    header: str = ""
    description: str = ""
    preserve_in_zoom2: bool = False
    cat: list[Cat] = field(default_factory=list)


def _element(data: Any) -> Element:
    data = _map(data)
    return Element(
        id=id_to_str(data.get("id")),
        name=_str(data.get("name")),
        type=_str(data.get("type")),
        layout=_str(data.get("layout")),
        commercial_components=[
            CommercialComponent.from_dict(c) for c in data.get("commercialComponents") or []
        ],
        has_sticky_banner=bool(data.get("hasStickyBanner", False)),
        needs_separator=bool(data.get("needsSeparator", False)),
        header=_str(data.get("header")),
        description=_str(data.get("description")),
        preserve_in_zoom2=bool(data.get("preserveInZoom2", False)),
    )


@dataclass
class ProductGroup:
    """A group of listing blocks."""

    type: str = ""
    elements: list[Element] = field(default_factory=list)
    has_sticky_banner: bool = False


def _product_group(data: Any) -> ProductGroup:
    data = _map(data)
    return ProductGroup(
        type=_str(data.get("type")),
        elements=[_element(e) for e in data.get("elements") or []],
        has_sticky_banner=bool(data.get("hasStickyBanner", False)),
    )


@dataclass
class Line:
    """All products listed in a category."""

    product_groups: list[ProductGroup] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Line:
        data = _map(data)
        return cls(
            product_groups=[_product_group(g) for g in data.get("productGroups") or []]
        )