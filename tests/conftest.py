import numpy as np
import pytest
from PIL import Image


def make_image(pixels):
    """Build an RGB image from a nested list of rows of (r, g, b) tuples."""
    return Image.fromarray(np.array(pixels, dtype=np.uint8))


@pytest.fixture
def scenario_image():
    # Row-major: black, white / mid gray, pure red
    return make_image(
        [
            [(0, 0, 0), (255, 255, 255)],
            [(128, 128, 128), (255, 0, 0)],
        ]
    )


@pytest.fixture
def noise_image():
    rng = np.random.default_rng(42)
    return Image.fromarray(rng.integers(0, 256, (64, 80, 3), dtype=np.uint8))
