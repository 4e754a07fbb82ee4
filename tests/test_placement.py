import pytest

from watermark_exif_date.placement import Anchor, compute_origin, margin_for


def test_margin_is_half_the_font_size():
    assert margin_for(48) == 24
    assert margin_for(25) == 12
    assert margin_for(1) == 0


def test_top_left():
    assert compute_origin(1000, 800, 200, 37, 10, 47, 48, Anchor.TOP_LEFT) == (24, 37)


def test_bottom_right():
    assert compute_origin(1000, 800, 200, 37, 10, 47, 48, Anchor.BOTTOM_RIGHT) == (776, 766)


def test_center():
    assert compute_origin(100, 100, 40, 15, 5, 20, 48, Anchor.CENTER) == (30, 55)


def test_center_truncates_odd_remainders():
    assert compute_origin(101, 101, 40, 15, 5, 20, 48, Anchor.CENTER) == (30, 55)


def test_center_truncates_toward_zero_when_text_is_larger():
    # (50 - 81) / 2 = -15.5 -> -15, not -16
    x, y = compute_origin(50, 50, 81, 15, 5, 81, 10, Anchor.CENTER)
    assert x == -15
    assert y == -15 + 15


def test_oversized_text_is_not_clamped():
    x, y = compute_origin(100, 30, 500, 40, 12, 52, 48, Anchor.BOTTOM_RIGHT)
    assert x == 100 - 500 - 24
    assert y == 30 - 12 - 24


@pytest.mark.parametrize("anchor", list(Anchor))
def test_deterministic(anchor):
    args = (640, 480, 123, 30, 8, 38, 36, anchor)
    assert compute_origin(*args) == compute_origin(*args)


def test_accepts_anchor_names():
    assert compute_origin(1000, 800, 200, 37, 10, 47, 48, "BOTTOM_RIGHT") == (776, 766)


def test_unknown_anchor():
    with pytest.raises(ValueError):
        compute_origin(100, 100, 10, 10, 2, 12, 10, "TOP_RIGHT")
