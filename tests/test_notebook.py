from chartcraft.notebook import SVGWrapper


def test_repr_wraps_svg_in_content_markers():
    wrapper = SVGWrapper(b"<svg></svg>")
    text = repr(wrapper)
    assert text.startswith("EVCXR_BEGIN_CONTENT text/html\n")
    assert text.endswith("\nEVCXR_END_CONTENT")
    assert '<div style=""><svg></svg></div>' in text


def test_style_returns_restyled_copy():
    wrapper = SVGWrapper(b"<svg/>")
    styled = wrapper.style("width:50%")
    assert styled.css == "width:50%"
    assert wrapper.css == ""
    assert '<div style="width:50%"><svg/></div>' in repr(styled)


def test_evcxr_display_prints_repr(capsys):
    wrapper = SVGWrapper(b"<svg/>").style("margin:0")
    wrapper.evcxr_display()
    out = capsys.readouterr().out
    assert out == repr(wrapper) + "\n"


def test_invalid_utf8_is_replaced():
    wrapper = SVGWrapper(b"<svg>\xff</svg>")
    assert wrapper.svg == "<svg>\ufffd</svg>"


def test_string_content_round_trips():
    wrapper = SVGWrapper("<svg>é</svg>")
    assert wrapper.content == "<svg>é</svg>".encode("utf-8")
    assert wrapper.svg == "<svg>é</svg>"


def test_html_representation_matches_repr_body():
    wrapper = SVGWrapper(b"<svg/>", "color:red")
    assert repr(wrapper).splitlines()[1] == wrapper._repr_html_()