from cubzombies.hud import (
    bar_color,
    crosshair_spread,
    draw_crosshair,
    draw_gun,
    draw_health_bar,
    health_width,
)
from cubzombies.images import Image
from cubzombies.state import Keys


def test_crosshair_spread():
    assert crosshair_spread(Keys()) == 0
    assert crosshair_spread(Keys(up=True)) == 15
    assert crosshair_spread(Keys(left=True, shift=True)) == 25
    assert crosshair_spread(Keys(shift=True)) == 0


def _white(frame):
    return {
        (x, y)
        for y in range(frame.height)
        for x in range(frame.width)
        if frame.get_pixel(x, y) == 0xFFFFFF
    }


def test_crosshair_shape_without_spread():
    frame = Image.blank(100, 100)
    draw_crosshair(frame, 0)
    assert frame.get_pixel(35, 50) == 0xFFFFFF
    assert frame.get_pixel(45, 50) == 0xFFFFFF
    assert frame.get_pixel(46, 50) == 0
    assert frame.get_pixel(50, 50) == 0
    assert frame.get_pixel(51, 60) == 0xFFFFFF
    pixels = _white(frame)
    assert {(100 - x, 100 - y) for x, y in pixels} == pixels


def test_crosshair_spread_widens_gap():
    frame = Image.blank(100, 100)
    draw_crosshair(frame, 10)
    assert frame.get_pixel(45, 50) == 0
    assert frame.get_pixel(25, 50) == 0xFFFFFF


def test_bar_color():
    assert bar_color(61) == 0x00FF00
    assert bar_color(31) == 0xFFFF00
    assert bar_color(30) == 0xFF0000


def test_health_width_bounds():
    assert health_width(0) == 0
    assert health_width(-5) == 0
    assert health_width(150) == health_width(100)
    assert health_width(50) == health_width(100) // 2
    assert health_width(40) < health_width(60)


def test_health_bar_drawing():
    frame = Image.blank(400, 100)
    draw_health_bar(frame, 80)
    assert frame.get_pixel(90, 60) == 0xFFFFFF
    assert frame.get_pixel(93, 65) == bar_color(80)
    empty = Image.blank(400, 100)
    draw_health_bar(empty, 0)
    assert empty.get_pixel(93, 65) == 0
    assert empty.get_pixel(90, 60) == 0xFFFFFF


def test_draw_gun_bottom_right_with_transparency():
    frame = Image.blank(10, 10)
    gun = Image(2, 2, [0x123456, 0, 0x654321, 0xABCDEF])
    draw_gun(frame, gun)
    assert frame.get_pixel(8, 8) == 0x123456
    assert frame.get_pixel(9, 8) == 0
    assert frame.get_pixel(8, 9) == 0x654321
    assert frame.get_pixel(9, 9) == 0xABCDEF