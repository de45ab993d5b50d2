import numpy as np
import pytest
from PIL import Image

from asciiramp.errors import RasterizationFailure
from asciiramp.raster import RESAMPLE_FILTERS, load_image, rasterize


def test_rasterize_shape_and_dtype(noise_image):
    buf = rasterize(noise_image, (13, 7))
    assert buf.shape == (7, 13, 4)
    assert buf.dtype == np.uint8


def test_rasterize_same_size_is_exact(scenario_image):
    buf = rasterize(scenario_image, (2, 2))
    assert buf[..., :3].tolist() == [
        [[0, 0, 0], [255, 255, 255]],
        [[128, 128, 128], [255, 0, 0]],
    ]
    assert (buf[..., 3] == 255).all()


def test_rasterize_returns_fresh_buffers(noise_image):
    a = rasterize(noise_image, (10, 10))
    b = rasterize(noise_image, (10, 10))
    assert a is not b
    np.testing.assert_array_equal(a, b)


@pytest.mark.parametrize("name", sorted(RESAMPLE_FILTERS))
def test_every_filter_downscales(noise_image, name):
    assert rasterize(noise_image, (5, 4), RESAMPLE_FILTERS[name]).shape == (4, 5, 4)


def test_box_filter_averages_area():
    img = Image.new("L", (2, 1))
    img.putpixel((0, 0), 0)
    img.putpixel((1, 0), 200)
    buf = rasterize(img, (1, 1))
    assert buf[0, 0, 0] == 100


@pytest.mark.parametrize("size", [(0, 5), (5, 0), (-1, -1)])
def test_rasterize_rejects_empty_target(noise_image, size):
    with pytest.raises(RasterizationFailure):
        rasterize(noise_image, size)


def test_load_image_from_path(tmp_path, noise_image):
    path = tmp_path / "noise.png"
    noise_image.save(path)
    img = load_image(path)
    assert img.size == (80, 64)


def test_load_image_from_bytes_and_file(tmp_path, noise_image):
    path = tmp_path / "noise.png"
    noise_image.save(path)
    assert load_image(path.read_bytes()).size == (80, 64)
    with path.open("rb") as f:
        assert load_image(f).size == (80, 64)


def test_load_image_rejects_garbage():
    with pytest.raises(RasterizationFailure, match="Cannot decode image"):
        load_image(b"definitely not an image")


def test_load_image_missing_file(tmp_path):
    with pytest.raises(RasterizationFailure):
        load_image(tmp_path / "missing.png")
