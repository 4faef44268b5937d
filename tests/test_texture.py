import pygame
import pytest

from startkit.errors import ErrorCode, StartError
from startkit.geometry import Rect
from startkit.texture import Flip, Texture

RED = pygame.Color(255, 0, 0, 255)
BLUE = pygame.Color(0, 0, 255, 255)
BLACK = pygame.Color(0, 0, 0, 255)


def split_image(vertical_split=True):
    image = pygame.Surface((4, 4))
    image.fill(RED)
    if vertical_split:
        image.fill(BLUE, pygame.Rect(2, 0, 2, 4))
    else:
        image.fill(BLUE, pygame.Rect(0, 2, 4, 2))
    return image


def make_target():
    target = pygame.Surface((10, 10))
    target.fill(BLACK)
    return target


def test_dimensions_match_image():
    texture = Texture(make_target(), pygame.Surface((4, 7)))
    assert texture.dimensions() == (4, 7)


def test_missing_surface_rejected():
    with pytest.raises(StartError) as info:
        Texture(make_target(), None)
    assert info.value.code is ErrorCode.NULL_POINTER


def test_draw_to_destination():
    target = make_target()
    Texture(target, split_image()).draw(None, Rect(0, 0, 4, 4))
    assert target.get_at((0, 0)) == RED
    assert target.get_at((3, 0)) == BLUE
    assert target.get_at((5, 5)) == BLACK


def test_draw_without_destination_fills_target():
    target = make_target()
    image = pygame.Surface((2, 2))
    image.fill(RED)
    Texture(target, image).draw()
    assert target.get_at((9, 9)) == RED
    assert target.get_at((0, 0)) == RED


def test_draw_source_region():
    target = make_target()
    Texture(target, split_image()).draw((2, 0, 2, 4), pygame.Rect(0, 0, 2, 4))
    assert target.get_at((0, 0)) == BLUE
    assert target.get_at((2, 0)) == BLACK


def test_source_out_of_bounds():
    texture = Texture(make_target(), split_image())
    with pytest.raises(StartError) as info:
        texture.draw((3, 3, 5, 5), None)
    assert info.value.code is ErrorCode.INVALID_RANGE


def test_draw_ex_horizontal_flip():
    target = make_target()
    Texture(target, split_image()).draw_ex(None, Rect(0, 0, 4, 4), 0, None, Flip.HORIZONTAL)
    assert target.get_at((0, 0)) == BLUE
    assert target.get_at((3, 0)) == RED


def test_draw_ex_vertical_flip():
    target = make_target()
    Texture(target, split_image(False)).draw_ex(None, Rect(0, 0, 4, 4), 0, None, Flip.VERTICAL)
    assert target.get_at((0, 0)) == BLUE
    assert target.get_at((0, 3)) == RED


def test_draw_ex_half_turn_matches_double_flip():
    a, b = make_target(), make_target()
    Texture(a, split_image()).draw_ex(None, Rect(0, 0, 4, 4), 180)
    Texture(b, split_image()).draw_ex(None, Rect(0, 0, 4, 4), 0, None, Flip.HORIZONTAL | Flip.VERTICAL)
    for x in range(4):
        for y in range(4):
            assert a.get_at((x, y)) == b.get_at((x, y))


def test_draw_ex_quarter_turn_is_clockwise():
    target = make_target()
    Texture(target, split_image(False)).draw_ex(None, Rect(0, 0, 4, 4), 90)
    assert target.get_at((3, 0)) == RED
    assert target.get_at((0, 0)) == BLUE


def test_load_round_trip(tmp_path):
    path = tmp_path / "image.bmp"
    pygame.image.save(split_image(), str(path))
    texture = Texture.load(make_target(), path)
    assert texture.dimensions() == (4, 4)
    assert texture.surface.get_at((0, 0)) == RED
    assert texture.surface.get_at((3, 3)) == BLUE


def test_load_missing_file(tmp_path):
    with pytest.raises(StartError) as info:
        Texture.load(make_target(), tmp_path / "absent.png")
    assert info.value.code is ErrorCode.SDL