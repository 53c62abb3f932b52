import json

import pytest

from clikshop.jsonio import dumps_compact, save_json, save_json_exact
from clikshop.models import ColorItem, Product, Variety


def test_dumps_compact_no_html_escaping():
    assert dumps_compact({"a": "<b>&"}) == b'{"a":"<b>&"}'


def test_dumps_compact_integral_float():
    assert dumps_compact({"p": 228.0}) == b'{"p":228}'
    assert not dumps_compact([1, 2]).endswith(b"\n")


def test_dumps_compact_keeps_unicode():
    out = dumps_compact(["Женщины"])
    assert "Женщины".encode("utf-8") in out


def test_dumps_compact_rejects_nan():
    with pytest.raises(ValueError):
        dumps_compact([float("nan")])


def test_save_json_appends_extension(tmp_path):
    variety = Variety(product=[Product(name="n", item=[ColorItem(price=12.5)])])
    path = save_json(variety, tmp_path / "out")
    assert path == tmp_path / "out.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    assert Variety.from_dict(data) == variety


def test_save_json_exact(tmp_path):
    variety = Variety(product=[Product(name="n")])
    path = save_json_exact(variety, tmp_path / "exact.txt")
    assert path.read_bytes() == dumps_compact(variety)


def test_save_json_empty_raises(tmp_path):
    with pytest.raises(ValueError, match="len"):
        save_json(Variety(), tmp_path / "out")
    assert not (tmp_path / "out.json").exists()