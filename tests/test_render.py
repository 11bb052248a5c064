import xml.etree.ElementTree as ET

import pygame
import pytest

from candyquest.defs import Rect
from candyquest.render import Flip, Render

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)
GREEN = (0, 255, 0, 255)
BLACK = (0, 0, 0, 255)


def make_render(scale=1, present=None):
    return Render(pygame.Surface((100, 80)), scale=scale, present=present)


def solid(color, size=(2, 2)):
    surface = pygame.Surface(size)
    surface.fill(color)
    return surface


def split(size=(2, 1)):
    surface = pygame.Surface(size)
    surface.fill(RED)
    half = size[0] // 2
    surface.fill(BLUE, pygame.Rect(half, 0, size[0] - half, size[1]))
    return surface


def test_camera_covers_target():
    render = make_render()
    assert render.camera == Rect(0, 0, 100, 80)
    assert render.viewport == Rect(0, 0, 100, 80)


def test_draw_texture_places_pixels():
    render = make_render()
    dest = render.draw_texture(solid(RED), 5, 5)
    assert dest == Rect(5, 5, 2, 2)
    assert render.target.get_at((5, 5)) == RED
    assert render.target.get_at((6, 6)) == RED
    assert render.target.get_at((7, 7)) == BLACK


def test_draw_texture_scales_size():
    render = make_render(scale=2)
    texture = solid(RED)
    dest = render.draw_texture(texture, 3, 3)
    assert dest.w == texture.get_width() * render.scale
    assert dest.h == texture.get_height() * render.scale
    assert render.target.get_at((dest.x + dest.w - 1, dest.y + dest.h - 1)) == RED


def test_draw_texture_speed_zero_ignores_camera():
    render = make_render()
    render.camera.x = -10
    dest = render.draw_texture(solid(RED), 20, 0, speed=0.0)
    assert dest.x == 20
    moved = render.draw_texture(solid(RED), 20, 0)
    assert moved.x == 20 + render.camera.x


def test_draw_texture_section():
    render = make_render()
    render.draw_texture(split((4, 2)), 10, 10, section=Rect(2, 0, 2, 2))
    assert render.target.get_at((10, 10)) == BLUE
    assert render.target.get_at((11, 11)) == BLUE


def test_draw_texture_flip_horizontal():
    render = make_render()
    render.draw_texture(split(), 10, 10, flip=Flip.HORIZONTAL)
    assert render.target.get_at((10, 10)) == BLUE
    assert render.target.get_at((11, 10)) == RED


def test_draw_texture_rotated_half_turn():
    render = make_render()
    render.draw_texture(split(), 10, 10, angle=180)
    assert render.target.get_at((10, 10)) == BLUE
    assert render.target.get_at((11, 10)) == RED


def test_draw_texture_missing_raises():
    with pytest.raises(ValueError):
        make_render().draw_texture(None, 0, 0)


def test_draw_rectangle_filled():
    render = make_render()
    drawn = render.draw_rectangle(Rect(10, 10, 5, 5), 0, 255, 0)
    assert drawn == Rect(10, 10, 5, 5)
    assert render.target.get_at((12, 12)) == GREEN


def test_draw_rectangle_outline_leaves_inside():
    render = make_render()
    render.draw_rectangle(Rect(10, 10, 6, 6), 0, 255, 0, filled=False)
    assert render.target.get_at((10, 10)) == GREEN
    assert render.target.get_at((12, 12)) == BLACK


def test_draw_rectangle_without_camera_keeps_rect():
    render = make_render(scale=3)
    render.camera.x = 40
    rect = Rect(1, 2, 3, 4)
    assert render.draw_rectangle(rect, 1, 2, 3, use_camera=False) == rect


def test_draw_rectangle_alpha_blends():
    render = make_render()
    render.draw_rectangle(Rect(0, 0, 4, 4), 255, 0, 0, a=0)
    assert render.target.get_at((1, 1)) == BLACK
    render.draw_rectangle(Rect(0, 0, 4, 4), 255, 0, 0, a=128)
    assert 0 < render.target.get_at((1, 1)).r < 255


def test_draw_rectangle_rejects_bad_colour():
    with pytest.raises(ValueError):
        make_render().draw_rectangle(Rect(0, 0, 1, 1), 300, 0, 0)


def test_draw_line_colours_end_points():
    render = make_render()
    start, end = render.draw_line(5, 5, 20, 5, 0, 255, 0)
    assert start == (5, 5)
    assert render.target.get_at(start) == GREEN
    assert render.target.get_at(end) == GREEN


def test_draw_circle_points_on_radius():
    render = make_render()
    points = render.draw_circle(50, 40, 10, 0, 255, 0, use_camera=False)
    assert len(points) == 360
    for px, py in points:
        assert abs(((px - 50) ** 2 + (py - 40) ** 2) ** 0.5 - 10) <= 1.5
    assert render.target.get_at(points[0]) == GREEN


def test_viewport_offsets_and_clips():
    render = make_render()
    render.set_viewport(Rect(10, 10, 20, 20))
    render.draw_rectangle(Rect(0, 0, 1, 1), 0, 255, 0, use_camera=False)
    assert render.target.get_at((10, 10)) == GREEN
    render.draw_rectangle(Rect(30, 0, 1, 1), 0, 255, 0, use_camera=False)
    assert render.target.get_at((40, 10)) == BLACK


def test_reset_viewport_restores_full_area():
    render = make_render()
    render.set_viewport(Rect(10, 10, 20, 20))
    render.reset_viewport()
    assert render.active_viewport == render.viewport


def test_post_update_presents_and_resets_viewport():
    calls = []
    render = make_render(present=lambda: calls.append(True))
    render.set_viewport(Rect(5, 5, 5, 5))
    assert render.post_update() is True
    assert calls == [True]
    assert render.active_viewport == Rect(0, 0, render.camera.w, render.camera.h)


def test_pre_update_fills_background():
    render = make_render()
    render.draw_rectangle(Rect(0, 0, 4, 4), 255, 0, 0)
    render.set_background_color((0, 0, 255, 255))
    render.pre_update()
    assert render.target.get_at((1, 1)) == BLUE


def test_set_background_color_needs_four_components():
    with pytest.raises(ValueError):
        make_render().set_background_color((1, 2, 3))


def test_save_load_state_round_trip():
    render = make_render()
    render.camera.x = -120
    render.camera.y = 33
    node = ET.Element("renderer")
    assert render.save_state(node) is True
    other = make_render()
    other.load_state(node)
    assert (other.camera.x, other.camera.y) == (-120, 33)


def test_load_state_without_camera_resets_to_zero():
    render = make_render()
    render.camera.x = 7
    render.load_state(ET.Element("renderer"))
    assert (render.camera.x, render.camera.y) == (0, 0)


def test_toggle_vsync():
    render = make_render()
    render.toggle_vsync(False)
    assert render.vsync is False
    render.toggle_vsync(True)
    assert render.vsync is True