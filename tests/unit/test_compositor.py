"""Unit tests for the frame compositor and background samplers."""

import numpy as np
import pytest

from ripplesim.core.compositor import (
    BRIGHTNESS_SENSITIVITY,
    FALLBACK_COLOR,
    ArraySampler,
    ConstantSampler,
    compose,
)


def gradient_image(height, width):
    """Image whose red channel encodes x/100 and green channel y/100."""
    img = np.zeros((height, width, 3))
    yy, xx = np.mgrid[:height, :width]
    img[:, :, 0] = xx / 100.0
    img[:, :, 1] = yy / 100.0
    return img


class TestSamplers:
    """Tests for ArraySampler and ConstantSampler."""

    def test_array_sampler_dimensions(self):
        sampler = ArraySampler(np.zeros((40, 60, 3)))
        assert sampler.width == 60
        assert sampler.height == 40

    def test_uint8_scaled(self):
        sampler = ArraySampler(np.full((2, 2, 3), 255, dtype=np.uint8))
        assert np.allclose(sampler.pixels, 1.0)

    def test_uint16_scaled_by_dtype_range(self):
        sampler = ArraySampler(np.full((4, 4, 3), 32768, dtype=np.uint16))
        assert np.allclose(sampler.pixels, 32768 / 65535)

        frame = compose(np.zeros((4, 4)), sampler, scale=1)
        assert np.allclose(frame[:, :, :3], 32768 / 65535)

    def test_alpha_dropped(self):
        img = np.zeros((3, 3, 4))
        img[:, :, 3] = 0.5
        sampler = ArraySampler(img)
        assert sampler.pixels.shape == (3, 3, 3)

    def test_grayscale_expanded(self):
        sampler = ArraySampler(np.full((3, 4), 0.25))
        assert sampler.pixels.shape == (3, 4, 3)
        assert np.allclose(sampler.pixels, 0.25)

    def test_invalid_shape(self):
        with pytest.raises(ValueError):
            ArraySampler(np.zeros((4, 4, 2)))

    def test_array_sampler_sample(self):
        sampler = ArraySampler(gradient_image(10, 10))
        rgb = sampler.sample(np.array([3]), np.array([7]))
        assert rgb.shape == (1, 3)
        assert rgb[0, 0] == pytest.approx(0.03)
        assert rgb[0, 1] == pytest.approx(0.07)

    def test_constant_sampler(self):
        sampler = ConstantSampler((0.1, 0.2, 0.3), 5, 5)
        rgb = sampler.sample(np.zeros((2, 3), dtype=int), np.zeros((2, 3), dtype=int))
        assert rgb.shape == (2, 3, 3)
        assert np.allclose(rgb, (0.1, 0.2, 0.3))

    def test_fallback_color_is_dark_blue(self):
        assert ConstantSampler().color == FALLBACK_COLOR
        assert FALLBACK_COLOR == pytest.approx((0.0, 0.0, 139 / 255))


class TestCompose:
    """Tests for compose()."""

    def test_output_shape(self):
        heights = np.zeros((20, 30))
        out = compose(heights, ConstantSampler(width=60, height=40), scale=2)
        assert out.shape == (40, 60, 4)

    def test_scale_one(self):
        heights = np.zeros((5, 7))
        out = compose(heights, ConstantSampler(width=7, height=5), scale=1)
        assert out.shape == (5, 7, 4)

    def test_alpha_opaque(self):
        heights = np.random.default_rng(0).normal(0, 50, (6, 6))
        out = compose(heights, ConstantSampler(width=12, height=12), scale=2)
        assert np.all(out[:, :, 3] == 1.0)

    def test_flat_surface_shows_background(self):
        heights = np.zeros((4, 4))
        out = compose(heights, ConstantSampler((0.2, 0.4, 0.6), 8, 8), scale=2)
        assert np.allclose(out[:, :, :3], (0.2, 0.4, 0.6))

    def test_brightness_shift_fills_block(self):
        heights = np.zeros((4, 5))
        heights[1, 2] = 10.0  # shift of 0.3
        bg = (0.2, 0.4, 0.6)
        out = compose(heights, ConstantSampler(bg, 10, 8), scale=2)

        block = out[2:4, 4:6, :3]
        assert np.allclose(block, (0.5, 0.7, 0.9))

        mask = np.ones((8, 10), dtype=bool)
        mask[2:4, 4:6] = False
        assert np.allclose(out[mask][:, :3], bg)

    def test_negative_heights_darken(self):
        heights = np.full((2, 2), -5.0)  # shift of -0.15
        out = compose(heights, ConstantSampler((0.5, 0.5, 0.5), 4, 4), scale=2)
        assert np.allclose(out[:, :, :3], 0.35)

    def test_custom_sensitivity(self):
        heights = np.full((2, 2), 1.0)
        out = compose(heights, ConstantSampler((0.0, 0.0, 0.0), 2, 2), scale=1, sensitivity=0.5)
        assert np.allclose(out[:, :, :3], 0.5)

    def test_default_sensitivity(self):
        assert BRIGHTNESS_SENSITIVITY == 0.03

    @pytest.mark.parametrize("spike", [1e3, 1e9, -1e9, np.finfo(np.float64).max / 10])
    def test_channels_clamped(self, spike):
        heights = np.zeros((5, 5))
        heights[2, 2] = spike
        heights[1, 1] = -spike
        out = compose(heights, ArraySampler(gradient_image(10, 10)), scale=2)

        assert out.min() >= 0.0
        assert out.max() <= 1.0

    def test_samples_at_block_origin(self):
        heights = np.zeros((3, 4))
        out = compose(heights, ArraySampler(gradient_image(6, 8)), scale=2)

        for gy in range(3):
            for gx in range(4):
                block = out[gy * 2:gy * 2 + 2, gx * 2:gx * 2 + 2]
                assert np.allclose(block[:, :, 0], gx * 2 / 100.0)
                assert np.allclose(block[:, :, 1], gy * 2 / 100.0)

    def test_small_background_clamped(self):
        """A background smaller than the display repeats its edge pixels."""
        img = gradient_image(3, 3)
        heights = np.zeros((4, 4))
        out = compose(heights, ArraySampler(img), scale=2)

        assert out.shape == (8, 8, 4)
        # Cell (3, 3) samples display (6, 6) -> clamped to pixel (2, 2)
        assert np.allclose(out[7, 7, :3], img[2, 2])
        # Cell (0, 3) samples display x=6 -> clamped to x=2, y=0
        assert np.allclose(out[0, 6, :3], img[0, 2])

    def test_reuses_out_buffer(self):
        heights = np.zeros((4, 4))
        buf = np.zeros((8, 8, 4))
        out = compose(heights, ConstantSampler(width=8, height=8), scale=2, out=buf)
        assert out is buf
        assert np.all(buf[:, :, 3] == 1.0)

    def test_wrong_out_shape(self):
        with pytest.raises(ValueError):
            compose(np.zeros((4, 4)), ConstantSampler(), scale=2, out=np.zeros((4, 4, 4)))

    def test_bad_scale(self):
        with pytest.raises(ValueError):
            compose(np.zeros((4, 4)), ConstantSampler(), scale=0)

    def test_deterministic(self):
        heights = np.random.default_rng(1).normal(0, 20, (10, 12))
        bg = ArraySampler(gradient_image(20, 24))
        a = compose(heights, bg, scale=2)
        b = compose(heights, bg, scale=2)
        np.testing.assert_array_equal(a, b)

    def test_heights_not_modified(self):
        heights = np.full((3, 3), 4.0)
        compose(heights, ConstantSampler(), scale=2)
        assert np.all(heights == 4.0)
