from clikshop.models import (
    TAG_ZARA,
    Cat,
    ColorItem,
    Description,
    Product,
    Size,
    Variety,
)


def _product():
    return Product(
        cat=[Cat(name="Zara", slug=TAG_ZARA), Cat(name="MAN", slug="man", id=7)],
        name="test",
        article="1234567890",
        gender_label="man",
        manufacturer="crocs",
        size=["L"],
        description=Description(eng="desc", rus="описание"),
        img=["https://img.example.com/1.jpg"],
        item=[
            ColorItem(
                color_code="beliy",
                color_eng="Beliy",
                color_rus="Белый",
                price=228.0,
                size=[Size(val="L", is_exit=True)],
                image=["https://img.example.com/1.jpg"],
                similarity=0.5,
            )
        ],
        specifications={"b": "2", "a": "1"},
    )


def test_product_round_trip():
    product = _product()
    restored = Product.from_dict(product.to_dict())
    assert restored.item[0].similarity == 0.0
    restored.item[0].similarity = 0.5
    assert restored == product


def test_color_item_excludes_similarity():
    data = ColorItem(color_code="x", similarity=0.9).to_dict()
    assert "Similarity" not in data
    assert data["ColorCode"] == "x"


def test_product_keys_follow_field_names():
    data = _product().to_dict()
    assert list(data) == [
        "Cat", "Name", "FullName", "Link", "Article", "Manufacturer",
        "GenderLabel", "Size", "Description", "ImageMain", "Img", "Item",
        "Specifications", "Upload",
    ]
    assert list(data["Specifications"]) == ["a", "b"]
    assert data["Description"] == {"Eng": "desc", "Rus": "описание"}


def test_variety_round_trip():
    variety = Variety(product=[_product(), Product(name="other")])
    restored = Variety.from_dict(variety.to_dict())
    assert [p.name for p in restored.product] == ["test", "other"]
    assert restored.product[0].cat == variety.product[0].cat


def test_from_dict_accepts_nulls():
    assert Variety.from_dict({"Product": None}).product == []
    product = Product.from_dict({"Name": "n", "Item": None, "Cat": None})
    assert product.item == [] and product.cat == [] and product.name == "n"
    assert Cat.from_dict(None) == Cat()