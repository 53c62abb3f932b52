"""Flattening of the Zara category tree into the categories that hold products."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import replace

from ..helpers import name_to_slug
from ..models import Cat
from .models import CategoryItem, CategoryTree, Subcategory, id_to_int

_ROOT = Cat(name="Zara", slug="zara")
_TOP_LEVEL = frozenset({"WOMAN", "MAN", "KIDS"})

_SECTION_SKIP = frozenset({
    "PERFUMES", "BEAUTY", "HOME", "HOME KIDS", "GIFT CARD", "JOIN LIFE",
    "ACCESSORIES | JEWELRY", "BAGS", "+ Info", "-", "__",
})
_GROUP_SKIP = frozenset({
    "HOME", "HOME KIDS", "PERFUMES", "GIFT CARD", "JOIN LIFE", "BEAUTY",
    "ACCESSORIES | JEWELRY", "BAGS", "-",
})
_KIDS_SKIP = frozenset({
    "GIFT CARD", "PERFUMES | COSMETICS", "HOME", "HOME KIDS", "PERFUMES",
    "JOIN LIFE", "BEAUTY", "ACCESSORIES | JEWELRY", "BAGS",
})
_LOWER_EXACT = frozenset({"see all", "view all"})
_LOWER_PARTS = ("accessories", "beauty", "metallic touch", "special edition", "zara athleticz")

_FILTERED = frozenset({
    "ALL PRODUCTS", "VIEW ALL", "ZARA SRPLS", "BAGS", "ACCESSORIES",
    "BIKINIS | SWIMSUITS", "PERFUMES", "LINGERIE", "BEAUTY", "SPECIAL EDITION",
    "GIFT CARD", "E-GIFT CARD", "BAGS | BACKPACKS", "+ INFO", "COMPANY",
    "HOME KIDS", "HOME",
})


def is_filtered(name: str) -> bool:
    """Whether a category name is left out of the catalogue walk."""
    return name.upper() in _FILTERED


def _skipped(name: str, exact: frozenset[str]) -> bool:
    lower = name.lower()
    return (
        name in exact
        or lower in _LOWER_EXACT
        or any(part in lower for part in _LOWER_PARTS)
    )


def _node_cat(node: Subcategory) -> Cat:
    return Cat(name=node.item.name, slug=node.item.seo.keyword)


def _redirect_id(node: Subcategory) -> int:
    if node.item.redirect_category_id:
        return node.item.redirect_category_id
    try:
        return id_to_int(node.item.id)
    except ValueError:
        return 0


def build_category_items(tree: CategoryTree) -> list[CategoryItem]:
    """Product categories with their path, listing id and gender.

    Adult sections yield their third level; kids' sections go one level deeper.
    """
    items: list[CategoryItem] = []
    for top in tree.categories:
        if top.item.name not in _TOP_LEVEL:
            continue
        top_path = [_ROOT, _node_cat(top)]
        gender = name_to_slug(top.item.name)

        for section in top.subcategories:
            name = section.item.name
            if _skipped(name, _SECTION_SKIP) or "DIVIDER_MENU" in name:
                continue
            section_path = [*top_path, _node_cat(section)]

            for group in section.subcategories:
                if _skipped(group.item.name, _GROUP_SKIP):
                    continue
                group_path = [*section_path, _node_cat(group)]

                if gender in ("man", "woman"):
                    items.append(
                        CategoryItem(
                            redirect_category_id=_redirect_id(group),
                            cat=group_path,
                            gender=gender,
                        )
                    )
                elif gender == "kids":
                    kid_gender = "unisex"
                    if "BOY" in group.item.name:
                        kid_gender = "boy"
                    if "GIRL" in group.item.name:
                        kid_gender = "girl"
                    for leaf in group.subcategories:
                        if _skipped(leaf.item.name, _KIDS_SKIP):
                            continue
                        items.append(
                            CategoryItem(
                                redirect_category_id=_redirect_id(leaf),
                                cat=[*group_path, _node_cat(leaf)],
                                gender=kid_gender,
                            )
                        )
    return items


def _walk(node: Subcategory, path: list[Cat]) -> Iterator[CategoryItem]:
    for child in node.subcategories:
        name = child.item.name
        if is_filtered(name):
            continue
        child_path = [*path, Cat(name=name, slug=name.lower())]
        if child.subcategories:
            yield from _walk(child, child_path)
        else:
            yield replace(child.item, cat=[*child.item.cat, *child_path])


def walk_categories(tree: CategoryTree) -> list[CategoryItem]:
    """Every leaf category under WOMAN, MAN and KIDS, with its name path."""
    items: list[CategoryItem] = []
    for top in tree.categories:
        name = top.item.name
        if name in _TOP_LEVEL:
            items.extend(_walk(top, [Cat(name=name, slug=name.lower())]))
    return items