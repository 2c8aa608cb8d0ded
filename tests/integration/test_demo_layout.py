import pytest

import easylayout as el


def test_template_to_styles():
    """The three-area demo: a wide area, a tall area and one below."""
    grid = el.parse_template(
        """
        a a b
        c c b
        """
    )

    with pytest.warns(el.AmbiguousUnitWarning):
        coords = el.compute_coordinates(grid, 2, 2)

    assert set(coords) == {"a", "b", "c"}
    for style in coords.values():
        assert style["position"] == "absolute"

    assert coords["a"]["top"] == "2%"
    assert coords["a"]["left"] == "2%"
    assert coords["a"]["height"] == "47%"
    assert coords["b"]["height"] == "96%"
    assert coords["c"]["top"] == "51%"
    assert float(coords["a"]["width"][:-1]) == pytest.approx(2 * 92 / 3 + 2)
    assert float(coords["b"]["left"][:-1]) == pytest.approx(2 + 2 * 92 / 3 + 2 * 2)


def test_pixel_container():
    grid = el.parse_template("header header\nnav main\nfooter footer")
    config = el.Config(
        padding=el.units(8),
        gap=el.units(4),
        container_width=800,
        container_height=600,
        strict_units=True,
        validate_areas=True,
    )

    rects = el.compute_rects(grid, config=config)

    # horizontal: padding 1%, gap 0.5%, portion 48.75
    assert rects["header"].left == pytest.approx(1.0)
    assert rects["header"].width == pytest.approx(98.0)
    assert rects["main"].left == pytest.approx(1.0 + 48.75 + 0.5)
    assert rects["nav"].width + rects["main"].width + 0.5 == pytest.approx(98.0)

    # vertical: padding 4/3%, gap 2/3%, three rows
    portion_v = (100 - 8 / 3 - 4 / 3) / 3
    assert rects["footer"].top == pytest.approx(4 / 3 + 2 * portion_v + 2 * 2 / 3)
    assert rects["footer"].top + rects["footer"].height == pytest.approx(100 - 4 / 3)

    assert "position: absolute;" in rects["nav"].serialize()


def test_spans_are_exported():
    layout = el.extract_spans(el.parse_template("a a\nb c"))
    assert layout.spans["a"] == el.AreaSpan(1, 1, 1, 2)
    assert layout.row_count == 2
    assert layout.column_count == 2
