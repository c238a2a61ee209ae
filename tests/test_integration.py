"""End-to-end tests over a complete zc template."""

from decimal import Decimal

from zoconfig import ScalarKind, convert, load, parse


TEMPLATE = """\
# Creature templates

[orc]
{
    [name]: [Grak]
    [strength]: (int)[18]
    [speed]: (float)[5.5]
    [intelligence]: (short)[7]
}

[elf]
{
    [name]: [Liriel]
    [strength]: (int)[9]
    [speed]: (float)[8.25]
    [intelligence]: (short)[16]
}

[gnome]
{
    [name]: [Pip Fizzwick]
    [strength]: (int)[6]
    [speed]: (float)[4]
    [intelligence]: (ushort)[300]
    [gold]: (decimal)[1024.50]
    [rune]: (char)[K]
}
"""


def test_orc_scenario():
    doc = parse("[orc]\n{\n[name]: [Grak]\n[strength]: (int)[18]\n}\n")
    assert doc.to_dict() == {"orc": {"name": "Grak", "strength": "18"}}
    assert convert(doc["orc"]["strength"], ScalarKind.Int) == 18


def test_template_typed_access():
    doc = parse(TEMPLATE)
    assert doc.names == ["orc", "elf", "gnome"]

    orc = doc["orc"]
    assert orc["name"] == "Grak"
    assert orc.get_as("strength", ScalarKind.Int) == 18
    assert orc.get_as("speed", ScalarKind.Float) == 5.5
    assert orc.get_as("intelligence", ScalarKind.Short) == 7

    elf = doc["elf"]
    assert elf.get_as("speed", "float") == 8.25

    gnome = doc["gnome"]
    assert gnome["name"] == "Pip Fizzwick"
    assert gnome.get_as("speed", "float") == 4.0
    assert gnome.get_as("intelligence", ScalarKind.UShort) == 300
    assert gnome.get_as("gold", ScalarKind.Decimal) == Decimal("1024.50")
    assert gnome.get_as("rune", ScalarKind.Char) == "K"


def test_template_from_file(tmp_path):
    path = tmp_path / "template.zc"
    path.write_text(TEMPLATE, encoding="utf-8")
    assert load(path).to_dict() == parse(TEMPLATE).to_dict()
