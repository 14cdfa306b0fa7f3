"""
Tests for sky segmentation.
"""

import pytest
import numpy as np

from skytint.exceptions import InvalidDimensions
from skytint.processing.sky import (
    SkySegmenter, SegmentationConfig, SegmentationStrategy,
    segment_sky, sky_boundary, median_smooth, smooth_sky_boundary
)


def _cap_mask(bottoms, height):
    """Build a mask that is sky from row 0 down to bottoms[x] in each column."""
    rows = np.arange(height)[:, np.newaxis]
    return rows <= np.asarray(bottoms)[np.newaxis, :]


class TestRegionGrowing:
    """Test seeded region growing."""

    @pytest.fixture
    def gradient_image(self):
        """10x10 image, 200 on the top row dropping by 20 per row."""
        image = np.zeros((10, 10), dtype=np.uint8)
        for y in range(10):
            image[y, :] = 200 - 20 * y
        return image

    def test_gradient_image(self, gradient_image):
        """Test the bright top row is sky and the dark bottom is not."""
        mask = segment_sky(gradient_image)

        assert mask.shape == (10, 10)
        assert mask.dtype == bool
        assert mask[0, :].all()
        assert not mask[9, :].any()

    def test_growth_stops_at_large_step(self, gradient_image):
        """Test a 20-level step between rows blocks growth."""
        mask = segment_sky(gradient_image)

        # 180 is bright enough but |180 - 200| >= 15
        assert not mask[1, :].any()

    def test_growth_follows_small_steps(self):
        """Test growth continues while neighbors stay similar."""
        image = np.full((6, 8), 30, dtype=np.uint8)
        image[0, :] = 200
        image[1, :] = 190
        image[2, :] = 170

        mask = segment_sky(image)

        assert mask[:2, :].all()
        assert not mask[2:, :].any()

    def test_uniform_bright_image_is_all_sky(self):
        """Test a uniform bright frame grows everywhere."""
        image = np.full((6, 8), 150, dtype=np.uint8)
        mask = segment_sky(image)
        assert mask.all()

    def test_no_seeds_gives_empty_mask(self):
        """Test a dark top row produces no sky at all."""
        image = np.full((10, 10), 100, dtype=np.uint8)
        mask = segment_sky(image)

        assert mask.shape == (10, 10)
        assert not mask.any()

    def test_no_upward_growth(self):
        """Test bright pixels reachable only from below are not grown."""
        image = np.full((10, 10), 50, dtype=np.uint8)
        image[:6, 0] = 200       # Bright column from the top
        image[5, :] = 200        # Bright row joining it
        image[1:5, 5:] = 200     # Bright block sitting on that row

        segmenter = SkySegmenter()
        raw = segmenter._grow_region(image)

        assert raw[:6, 0].all()
        assert raw[5, :].all()
        assert not raw[1:5, 5:].any()

    def test_grow_threshold(self):
        """Test neighbors must be brighter than the grow threshold."""
        image = np.full((5, 5), 95, dtype=np.uint8)
        image[0, :] = 100

        config = SegmentationConfig(seed_threshold=90)
        mask = segment_sky(image, config)

        assert mask[0, :].all()
        assert not mask[1:, :].any()

    def test_rgb_input(self):
        """Test RGB frames are converted to grayscale first."""
        image = np.full((6, 8, 3), 150, dtype=np.uint8)
        mask = segment_sky(image)
        assert mask.shape == (6, 8)
        assert mask.all()

    @pytest.mark.parametrize("shape", [(0, 10), (10, 0), (0, 0)])
    def test_zero_size_rejected(self, shape):
        """Test zero-sized images are invalid."""
        with pytest.raises(InvalidDimensions):
            segment_sky(np.zeros(shape, dtype=np.uint8))

    def test_input_not_modified(self, gradient_image):
        """Test the source image is left untouched."""
        original = gradient_image.copy()
        segment_sky(gradient_image)
        np.testing.assert_array_equal(gradient_image, original)


class TestBoundarySmoothing:
    """Test median smoothing of the sky boundary."""

    def test_sky_boundary(self):
        """Test lowest sky row per column, 0 for empty columns."""
        mask = np.zeros((6, 3), dtype=bool)
        mask[:4, 0] = True
        mask[2, 1] = True

        np.testing.assert_array_equal(sky_boundary(mask), [3, 2, 0])

    def test_median_window_clamped_at_edges(self):
        """Test windows shrink at the array edges."""
        np.testing.assert_array_equal(median_smooth(np.array([5, 1, 9])), [5, 5, 5])
        np.testing.assert_array_equal(median_smooth(np.array([1, 2, 3, 4])), [3, 3, 3, 3])

    def test_spike_removed(self):
        """Test a single deep column is pulled back to its neighbors."""
        bottoms = [3] * 20
        bottoms[10] = 9
        mask = smooth_sky_boundary(_cap_mask(bottoms, 12))

        assert mask[3, 10]
        assert not mask[4, 10]
        np.testing.assert_array_equal(sky_boundary(mask), [3] * 20)

    def test_holes_filled(self):
        """Test the result is a solid cap in every column."""
        mask = _cap_mask([4] * 10, 8)
        mask[2, 3] = False
        mask[0, 7] = False

        smoothed = smooth_sky_boundary(mask)

        assert smoothed[:5, :].all()
        assert not smoothed[5:, :].any()

    def test_step_boundary_preserved(self):
        """Test a wide step in the boundary survives smoothing."""
        bottoms = [3] * 10 + [6] * 10
        smoothed = smooth_sky_boundary(_cap_mask(bottoms, 10))
        np.testing.assert_array_equal(sky_boundary(smoothed), bottoms)

    def test_idempotent(self):
        """Test smoothing an already smoothed mask changes nothing."""
        bottoms = [3] * 10 + [6] * 10
        bottoms[4] = 9
        bottoms[15] = 0

        once = smooth_sky_boundary(_cap_mask(bottoms, 12))
        twice = smooth_sky_boundary(once)

        np.testing.assert_array_equal(once, twice)


class TestProbabilisticStrategy:
    """Test the hysteresis-based segmentation strategy."""

    @pytest.fixture
    def segmenter(self):
        return SkySegmenter(SegmentationConfig(strategy=SegmentationStrategy.PROBABILISTIC))

    def test_blue_sky_over_dark_ground(self, segmenter):
        """Test blue top half is sky and brown bottom half is not."""
        image = np.zeros((20, 20, 3), dtype=np.uint8)
        image[:10] = (100, 150, 230)
        image[10:] = (60, 40, 20)

        mask = segmenter.segment(image)

        assert mask.shape == (20, 20)
        assert mask[:10].all()
        assert not mask[10:].any()

    def test_black_frame_has_no_sky(self, segmenter):
        """Test no strong pixels means no sky."""
        image = np.zeros((10, 10), dtype=np.uint8)
        assert not segmenter.segment(image).any()

    def test_strategy_from_string(self):
        """Test strategy names are accepted."""
        config = SegmentationConfig(strategy="probabilistic")
        assert config.strategy == SegmentationStrategy.PROBABILISTIC

    def test_invalid_hysteresis_thresholds(self):
        """Test low threshold may not exceed high threshold."""
        with pytest.raises(ValueError):
            SegmentationConfig(high_threshold=0.3, low_threshold=0.5)
