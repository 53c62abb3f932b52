import pytest

from clikshop.models import Cat
from clikshop.zara.category import build_category_items, is_filtered, walk_categories
from clikshop.zara.models import CategoryTree


def node(name, keyword="", id=0, redirect=0, subs=()):
    data = {"id": id, "name": name, "seo": {"keyword": keyword}, "subcategories": list(subs)}
    if redirect:
        data["redirectCategoryId"] = redirect
    return data


@pytest.fixture
def tree():
    return CategoryTree.from_dict(
        {
            "categories": [
                node("WOMAN", "woman", subs=[
                    node("JACKETS", "woman-jackets", subs=[
                        node("Leather", "woman-jackets-leather", id=123),
                        node("View All", "woman-jackets-all", id=124),
                        node("Puffer", "woman-jackets-puffer", id=125, redirect=999),
                        node("Odd", "woman-odd", id="abc"),
                    ]),
                    node("BEAUTY", "woman-beauty", subs=[node("Lipstick", "lip", id=5)]),
                    node("X DIVIDER_MENU", "div", subs=[node("Thing", "thing", id=6)]),
                ]),
                node("HOME", "home", subs=[
                    node("BED", "bed", subs=[node("Sheets", "sheets", id=7)]),
                ]),
                node("KIDS", "kids", subs=[
                    node("BABY", "kids-baby", subs=[
                        node("BABY GIRL", "kids-babygirl", subs=[
                            node("DRESSES", "kids-babygirl-dresses", id=300),
                            node("PERFUMES | COSMETICS", "kids-perf", id=301),
                        ]),
                        node("BABY BOY", "kids-babyboy", subs=[
                            node("T-SHIRTS", "kids-babyboy-tshirts", id="310"),
                        ]),
                        node("NEW", "kids-new", subs=[
                            node("SHOES", "kids-new-shoes", id=320, redirect=321),
                        ]),
                    ]),
                ]),
            ]
        }
    )


def test_load_category_first_is_woman(tree):
    assert tree.categories[0].item.name == "WOMAN"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("view all", True),
        ("Bags", True),
        ("+ info", True),
        ("E-Gift Card", True),
        ("SHIRTS", False),
        ("Jeans", False),
    ],
)
def test_is_filtered(name, expected):
    assert is_filtered(name) is expected


def test_build_adult_items(tree):
    items = build_category_items(tree)
    women = [i for i in items if i.gender == "woman"]
    assert [i.redirect_category_id for i in women] == [123, 999, 0]
    assert women[0].cat == [
        Cat("Zara", "zara"),
        Cat("WOMAN", "woman"),
        Cat("JACKETS", "woman-jackets"),
        Cat("Leather", "woman-jackets-leather"),
    ]


def test_build_skips_filtered_sections_and_home(tree):
    names = {c.name for i in build_category_items(tree) for c in i.cat}
    assert "BEAUTY" not in names
    assert "X DIVIDER_MENU" not in names
    assert "HOME" not in names
    assert "View All" not in names


def test_build_kids_items(tree):
    kids = [i for i in build_category_items(tree) if i.gender in ("girl", "boy", "unisex")]
    assert [(i.gender, i.redirect_category_id) for i in kids] == [
        ("girl", 300),
        ("boy", 310),
        ("unisex", 321),
    ]
    assert [c.name for c in kids[0].cat] == ["Zara", "KIDS", "BABY", "BABY GIRL", "DRESSES"]


def test_walk_categories_paths():
    tree = CategoryTree.from_dict(
        {
            "categories": [
                node("WOMAN", subs=[
                    node("SHIRTS", subs=[node("Satin", id="2184366")]),
                    node("BAGS", subs=[node("Totes", id=1)]),
                    node("JEANS", id=2),
                ]),
                node("MAN", subs=[node("Suits", id=3)]),
                node("HOME", subs=[node("Bed", id=4)]),
            ]
        }
    )
    items = walk_categories(tree)
    assert [i.id for i in items] == ["2184366", "2", "3"]
    satin = items[0]
    assert satin.name == "Satin"
    assert satin.cat == [Cat("WOMAN", "woman"), Cat("SHIRTS", "shirts"), Cat("Satin", "satin")]
    assert items[1].cat == [Cat("WOMAN", "woman"), Cat("JEANS", "jeans")]
    assert items[2].cat == [Cat("MAN", "man"), Cat("Suits", "suits")]


def test_walk_categories_empty_tree():
    assert walk_categories(CategoryTree()) == []