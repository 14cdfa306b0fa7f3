"""
Tests for sky compositing.
"""

import pytest
import numpy as np

from skytint.exceptions import InvalidDimensions
from skytint.processing.sky import (
    SkyCompositor, CompositingConfig, composite, transition_field
)


@pytest.fixture
def gray_image():
    """Uniform 10x10 RGB image at 100."""
    return np.full((10, 10, 3), 100, dtype=np.uint8)


@pytest.fixture
def top_half_mask():
    """Sky on rows 0-4."""
    mask = np.zeros((10, 10), dtype=bool)
    mask[:5, :] = True
    return mask


class TestTransitionField:
    """Test blend factor computation."""

    def test_sky_is_fully_blended(self, top_half_mask):
        field = transition_field(top_half_mask)
        assert field.dtype == np.float32
        assert (field[:5] == 1.0).all()

    def test_linear_fade_below_boundary(self, top_half_mask):
        """Test factors fall by 1/5 per row below the lowest sky row."""
        field = transition_field(top_half_mask)

        assert field[5, 0] == pytest.approx(0.8)
        assert field[6, 0] == pytest.approx(0.6)
        assert field[8, 0] == pytest.approx(0.2)
        assert field[9, 0] == 0.0

    def test_values_in_unit_range(self):
        """Test holes above the boundary never exceed full blend."""
        mask = np.zeros((10, 4), dtype=bool)
        mask[:6, :] = True
        mask[2, 1] = False

        field = transition_field(mask)

        assert field.min() >= 0.0
        assert field.max() <= 1.0

    def test_custom_width(self, top_half_mask):
        field = transition_field(top_half_mask, transition_width=2)
        assert field[5, 0] == pytest.approx(0.5)
        assert field[6, 0] == 0.0


class TestCompositor:
    """Test blending the sky color into the image."""

    def test_sky_and_ground_extremes(self, gray_image, top_half_mask):
        """Test sky pixels match the color and distant pixels are unchanged."""
        result = composite(gray_image, top_half_mask, (200, 150, 100))

        np.testing.assert_array_equal(result[0, 5], [200, 150, 100])
        np.testing.assert_array_equal(result[4, 5], [200, 150, 100])
        np.testing.assert_array_equal(result[9, 5], [100, 100, 100])

    def test_transition_rows(self, gray_image, top_half_mask):
        """Test rows below the boundary are partially recolored."""
        result = composite(gray_image, top_half_mask, (200, 150, 100))

        np.testing.assert_array_equal(result[5, 0], [180, 140, 100])
        np.testing.assert_array_equal(result[8, 0], [120, 110, 100])

    def test_output_is_new_array(self, gray_image, top_half_mask):
        original = gray_image.copy()
        result = composite(gray_image, top_half_mask, (200, 150, 100))

        assert result is not gray_image
        assert result.shape == gray_image.shape
        assert result.dtype == np.uint8
        np.testing.assert_array_equal(gray_image, original)

    def test_grayscale_input_promoted(self, top_half_mask):
        image = np.full((10, 10), 100, dtype=np.uint8)
        result = composite(image, top_half_mask, (200, 150, 100))
        assert result.shape == (10, 10, 3)

    def test_mask_shape_mismatch(self, gray_image):
        with pytest.raises(InvalidDimensions):
            composite(gray_image, np.zeros((5, 10), dtype=bool), (0, 0, 0))

    def test_configured_width(self, gray_image, top_half_mask):
        compositor = SkyCompositor(CompositingConfig(transition_width=2))
        result = compositor.composite(gray_image, top_half_mask, (200, 200, 200))

        np.testing.assert_array_equal(result[5, 0], [150, 150, 150])
        np.testing.assert_array_equal(result[6, 0], [100, 100, 100])

    def test_invalid_width(self):
        with pytest.raises(ValueError):
            CompositingConfig(transition_width=0)

    def test_transition_field_rejects_zero_width(self, top_half_mask):
        with pytest.raises(ValueError):
            transition_field(top_half_mask, transition_width=0)
