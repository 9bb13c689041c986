import numpy as np

from maze_solver.classification import (
    PixelClass,
    classify,
    color_is_marker,
    color_is_on,
    is_marker,
    is_on,
    marker_mask,
    on_mask,
)
from maze_solver.image import MazeImage


def test_black_is_wall_white_and_red_are_open():
    assert color_is_on((0, 0, 0))
    assert not color_is_on((255, 255, 255))
    assert not color_is_on((255, 0, 0))


def test_marker_detector_accepts_reds_only():
    assert color_is_marker((255, 0, 0))
    assert color_is_marker((200, 80, 80))
    assert not color_is_marker((199, 0, 0))
    assert not color_is_marker((255, 81, 0))
    assert not color_is_marker((255, 255, 255))


def test_threshold_boundary():
    assert color_is_on((127, 128, 128))
    assert not color_is_on((128, 128, 128))


def test_image_predicates(maze_image):
    image = maze_image(["R#", ".."])
    assert is_marker(image, 0, 0)
    assert not is_on(image, 0, 0)
    assert is_on(image, 1, 0)
    assert classify(image, 1, 0) is PixelClass.WALL
    assert classify(image, 0, 1) is PixelClass.OPEN


def test_masks_agree_with_scalar_rules():
    rng = np.random.default_rng(3)
    pixels = rng.integers(0, 256, size=(6, 7, 3), dtype=np.uint8)
    pixels[0, 0] = (250, 10, 10)
    image = MazeImage(pixels)
    walls = on_mask(image)
    markers = marker_mask(image)
    for y in range(image.height()):
        for x in range(image.width()):
            assert walls[y, x] == is_on(image, x, y)
            assert markers[y, x] == is_marker(image, x, y)
