import numpy as np
import pytest

from images_resizer.services.sampler_service import SamplerService


@pytest.fixture
def sampler():
    return SamplerService()


@pytest.mark.parametrize(
    "x, y, expected",
    [
        ((-1), (-1), (0, 0)),
        (0, 0, (0, 0)),
        (3, 2, (2, 1)),
        (5, 0, (2, 0)),
        (1, 7, (1, 1)),
        (-3, 1, (0, 1)),
    ],
)
def test_clamp_snaps_each_axis_independently(sampler, x, y, expected):
    assert sampler.clamp(x, y, 3, 2) == expected


def test_average_of_identical_white_pixels_stays_white(sampler):
    white = (255, 255, 255, 255)
    assert sampler.average_2x2(white, white, white, white) == white


def test_average_truncates_instead_of_rounding(sampler):
    black = (0, 0, 0, 255)
    white = (255, 255, 255, 255)
    # 255 * 257 // 1024 == 63 (exact mean is 63.75)
    assert sampler.average_2x2(black, black, black, white) == (63, 63, 63, 255)


def test_average_mixed_channels(sampler):
    c = (10, 20, 30, 40)
    # (4 * v) * 257 // 1024
    assert sampler.average_2x2(c, c, c, c) == (10, 20, 30, 40)
    assert sampler.average_2x2((10, 0, 0, 0), (20, 0, 0, 0), (30, 0, 0, 0), (40, 0, 0, 0)) == (25, 0, 0, 0)


def test_sample_at_corners_stays_in_bounds(sampler, random_pixels):
    pixels = random_pixels(5, 3)
    for x, y in [(0, 0), (4, 0), (0, 2), (4, 2)]:
        color = sampler.sample(pixels, x, y)
        assert all(0 <= ch <= 255 for ch in color)


def test_sample_bottom_right_corner_uses_only_that_pixel(sampler):
    pixels = np.zeros((2, 2, 4), dtype=np.uint8)
    pixels[1, 1] = (200, 100, 50, 255)
    assert sampler.sample(pixels, 1, 1) == (200, 100, 50, 255)


def test_sample_on_single_pixel_image(sampler):
    pixels = np.full((1, 1, 4), 77, dtype=np.uint8)
    assert sampler.sample(pixels, 0, 0) == (77, 77, 77, 77)


def test_sample_grid_matches_scalar_sample(sampler, random_pixels):
    pixels = random_pixels(6, 4)
    grid = sampler.sample_grid(pixels)
    assert grid.shape == (4, 6, 4)
    assert grid.dtype == np.uint8
    for y in range(4):
        for x in range(6):
            assert tuple(int(v) for v in grid[y, x]) == sampler.sample(pixels, x, y)


def test_sample_grid_on_empty_image(sampler):
    assert sampler.sample_grid(np.zeros((0, 3, 4), dtype=np.uint8)).shape == (0, 3, 4)
