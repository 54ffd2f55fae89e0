import pytest

from chartcraft.font import (
    FontDesc,
    FontError,
    FontFamily,
    FontStyle,
    FontTransform,
    font_family,
    font_style,
    into_font,
)
from chartcraft.style import BLUE, RED


def test_generic_family_names():
    assert FontFamily.SERIF.as_str() == "serif"
    assert FontFamily.SANS_SERIF.as_str() == "sans-serif"
    assert FontFamily.MONOSPACE.as_str() == "monospace"


def test_font_family_is_case_insensitive_for_generics():
    assert font_family("SERIF") is FontFamily.SERIF
    assert font_family("Sans-Serif") is FontFamily.SANS_SERIF
    assert font_family("monospace") is FontFamily.MONOSPACE


def test_font_family_named_keeps_case():
    family = font_family("Arial")
    assert family.as_str() == "Arial"
    assert not family.generic


def test_font_style_parsing():
    assert font_style("ITALIC") is FontStyle.ITALIC
    assert font_style("bold") is FontStyle.BOLD
    assert font_style("Oblique") is FontStyle.OBLIQUE
    assert font_style("something-else") is FontStyle.NORMAL
    assert FontStyle.ITALIC.as_str() == "italic"


def test_font_family_rejects_other_types():
    with pytest.raises(TypeError):
        font_family(12)


def test_transform_rotations():
    assert FontTransform.NONE.transform(3, 5) == (3, 5)
    assert FontTransform.ROTATE90.transform(3, 5) == (-5, 3)
    assert FontTransform.ROTATE180.transform(3, 5) == (-3, -5)
    assert FontTransform.ROTATE270.transform(3, 5) == (5, -3)


def test_transform_four_quarter_turns_is_identity():
    x, y = 7, -2
    for _ in range(4):
        x, y = FontTransform.ROTATE90.transform(x, y)
    assert (x, y) == (7, -2)


def test_transform_offsets():
    layout = ((1, 2), (11, 22))
    width, height = 11 - 1, 22 - 2
    assert FontTransform.NONE.offset(layout) == (0, 0)
    assert FontTransform.ROTATE90.offset(layout) == (height, 0)
    assert FontTransform.ROTATE180.offset(layout) == (width, height)
    assert FontTransform.ROTATE270.offset(layout) == (0, width)


def test_into_font_from_name_has_unit_size():
    font = into_font("sans-serif")
    assert font.family is FontFamily.SANS_SERIF
    assert font.size == 1.0
    assert font.style is FontStyle.NORMAL
    assert font.transform is FontTransform.NONE


def test_into_font_from_tuples():
    font = into_font(("serif", 20))
    assert font.family is FontFamily.SERIF
    assert font.size == 20.0
    styled = into_font(("Arial", 12, "bold"))
    assert styled.name == "Arial"
    assert styled.style is FontStyle.BOLD


def test_into_font_rejects_bad_tuple():
    with pytest.raises(ValueError):
        into_font(("serif",))


def test_resize_style_transform_keep_other_fields():
    font = into_font(("serif", 10))
    bigger = font.resize(30)
    assert bigger.size == 30.0
    assert bigger.family is font.family
    italic = font.with_style(FontStyle.ITALIC)
    assert italic.style is FontStyle.ITALIC
    assert italic.size == font.size
    rotated = font.with_transform(FontTransform.ROTATE90)
    assert rotated.transform is FontTransform.ROTATE90
    assert rotated.size == font.size
    assert font.transform is FontTransform.NONE


def test_color_makes_text_style():
    style = into_font(("serif", 10)).color(RED)
    assert style.color == RED.to_rgba()
    assert style.font.size == 10.0


def test_empty_text_has_empty_layout():
    assert into_font(("serif", 10)).layout_box("") == ((0, 0), (0, 0))


def test_layout_grows_with_text_and_size():
    font = into_font(("serif", 10))
    short_w, short_h = font.box_size("ab")
    long_w, long_h = font.box_size("abcdef")
    assert long_w > short_w
    assert long_h == short_h
    big_w, big_h = font.resize(40).box_size("ab")
    assert big_w > short_w
    assert big_h > short_h


def test_box_size_swaps_under_quarter_turn():
    font = into_font(("monospace", 16))
    w, h = font.box_size("hello")
    assert font.with_transform(FontTransform.ROTATE90).box_size("hello") == (h, w)
    assert font.with_transform(FontTransform.ROTATE180).box_size("hello") == (w, h)


def test_missing_font_raises_on_use():
    font = FontDesc(FontFamily(""), 10.0)
    with pytest.raises(FontError):
        font.layout_box("x")
    with pytest.raises(FontError):
        font.box_size("x")


def test_fonts_compare_by_description():
    assert into_font(("serif", 10)) == into_font((FontFamily.SERIF, 10.0))
    assert into_font(("serif", 10)).color(BLUE) != into_font(("serif", 10)).color(RED)