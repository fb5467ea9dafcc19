import pytest

from mazerunner.resources import get_font


def test_same_size_returns_shared_font():
    first = get_font(24)
    second = get_font(24)
    assert first is second
    assert first.size("Easy") == second.size("Easy")


def test_different_sizes_are_different_fonts():
    assert get_font(20) is not get_font(30)


def test_larger_size_gives_taller_font():
    assert get_font(40).get_height() > get_font(20).get_height()


def test_font_renders_text():
    surface = get_font(24).render("Easy", True, (255, 255, 255))
    assert surface.get_width() > 0
    assert surface.get_height() > 0


@pytest.mark.parametrize("size", [0, -5])
def test_non_positive_size_rejected(size):
    with pytest.raises(ValueError):
        get_font(size)