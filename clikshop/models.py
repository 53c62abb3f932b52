"""Catalogue data model shared by the shop parsers and exporters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

TAG_MD = "massimodutti"
TAG_HM = "hm.com"
TAG_ZARA = "zara"
TAG_SS = "sneaksup.com"
TAG_TY = "trendyol"


def _list(data: dict, key: str) -> list:
    return list(data.get(key) or [])


@dataclass
class Cat:
    """One level of a category path."""

    name: str = ""
    slug: str = ""
    id: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"Name": self.name, "Slug": self.slug, "ID": self.id}

    @classmethod
    def from_dict(cls, data: dict | None) -> Cat:
        data = data or {}
        return cls(
            name=data.get("Name", ""),
            slug=data.get("Slug", ""),
            id=int(data.get("ID", 0) or 0),
        )


@dataclass
class Size:
    """A clothing size and whether it is in stock."""

    val: str = ""
    is_exit: bool = False
    data_code: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"Val": self.val, "IsExit": self.is_exit, "DataCode": self.data_code}

    @classmethod
    def from_dict(cls, data: dict | None) -> Size:
        data = data or {}
        return cls(
            val=data.get("Val", ""),
            is_exit=bool(data.get("IsExit", False)),
            data_code=data.get("DataCode", ""),
        )


@dataclass
class ColorItem:
    """A colour variation of a product."""

    color_code: str = ""
    color_eng: str = ""
    color_rus: str = ""
    link: str = ""
    price: float = 0.0
    size: list[Size] = field(default_factory=list)
    image: list[str] = field(default_factory=list)
    similarity: float = 0.0  # never serialised

    def to_dict(self) -> dict[str, Any]:
        return {
            "ColorCode": self.color_code,
            "ColorEng": self.color_eng,
            "ColorRus": self.color_rus,
            "Link": self.link,
            "Price": self.price,
            "Size": [s.to_dict() for s in self.size],
            "Image": list(self.image),
        }

    @classmethod
    def from_dict(cls, data: dict | None) -> ColorItem:
        data = data or {}
        return cls(
            color_code=data.get("ColorCode", ""),
            color_eng=data.get("ColorEng", ""),
            color_rus=data.get("ColorRus", ""),
            link=data.get("Link", ""),
            price=float(data.get("Price", 0.0) or 0.0),
            size=[Size.from_dict(s) for s in _list(data, "Size")],
            image=_list(data, "Image"),
        )


@dataclass
class Description:
    """Product description in English and Russian."""

    eng: str = ""
    rus: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"Eng": self.eng, "Rus": self.rus}

    @classmethod
    def from_dict(cls, data: dict | None) -> Description:
        data = data or {}
        return cls(eng=data.get("Eng", ""), rus=data.get("Rus", ""))


@dataclass
class Product:
    """A product with its category path and colour variations."""

    cat: list[Cat] = field(default_factory=list)
    name: str = ""
    full_name: str = ""
    link: str = ""
    article: str = ""
    manufacturer: str = ""
    gender_label: str = ""
    size: list[str] = field(default_factory=list)
    description: Description = field(default_factory=Description)
    image_main: str = ""
    img: list[str] = field(default_factory=list)
    item: list[ColorItem] = field(default_factory=list)
    specifications: dict[str, str] = field(default_factory=dict)
    upload: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "Cat": [c.to_dict() for c in self.cat],
            "Name": self.name,
            "FullName": self.full_name,
            "Link": self.link,
            "Article": self.article,
            "Manufacturer": self.manufacturer,
            "GenderLabel": self.gender_label,
            "Size": list(self.size),
            "Description": self.description.to_dict(),
            "ImageMain": self.image_main,
            "Img": list(self.img),
            "Item": [i.to_dict() for i in self.item],
            "Specifications": dict(sorted(self.specifications.items())),
            "Upload": self.upload,
        }

    @classmethod
    def from_dict(cls, data: dict | None) -> Product:
        data = data or {}
        return cls(
            cat=[Cat.from_dict(c) for c in _list(data, "Cat")],
            name=data.get("Name", ""),
            full_name=data.get("FullName", ""),
            link=data.get("Link", ""),
            article=data.get("Article", ""),
            manufacturer=data.get("Manufacturer", ""),
            gender_label=data.get("GenderLabel", ""),
            size=_list(data, "Size"),
            description=Description.from_dict(data.get("Description")),
            image_main=data.get("ImageMain", ""),
            img=_list(data, "Img"),
            item=[ColorItem.from_dict(i) for i in _list(data, "Item")],
            specifications=dict(data.get("Specifications") or {}),
            upload=bool(data.get("Upload", False)),
        )


@dataclass
class Variety:
    """A collection of products."""

    product: list[Product] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"Product": [p.to_dict() for p in self.product]}

    @classmethod
    def from_dict(cls, data: dict | None) -> Variety:
        data = data or {}
        return cls(product=[Product.from_dict(p) for p in _list(data, "Product")])