"""Unit tests for RippleField and RippleFieldConfig."""

import numpy as np
import pytest

from ripplesim.core.ripple_field import RippleField, RippleFieldConfig
from ripplesim.analysis.energy import field_magnitude


class TestRippleFieldConfig:
    """Tests for RippleFieldConfig."""

    def test_default_config(self):
        cfg = RippleFieldConfig(grid_width=300, grid_height=200)
        assert cfg.grid_width == 300
        assert cfg.grid_height == 200
        assert cfg.scale == 2
        assert cfg.damping == 0.96
        assert cfg.ripple_strength == 40.0

    def test_rejects_tiny_grid(self):
        with pytest.raises(ValueError):
            RippleFieldConfig(grid_width=2, grid_height=10)

    def test_rejects_bad_scale(self):
        with pytest.raises(ValueError):
            RippleFieldConfig(grid_width=10, grid_height=10, scale=0)

    @pytest.mark.parametrize("damping", [0.0, -0.5, 1.01])
    def test_rejects_bad_damping(self, damping):
        with pytest.raises(ValueError):
            RippleFieldConfig(grid_width=10, grid_height=10, damping=damping)

    def test_accepts_damping_one(self):
        cfg = RippleFieldConfig(grid_width=10, grid_height=10, damping=1.0)
        assert cfg.damping == 1.0


class TestRippleField:
    """Tests for RippleField creation and accessors."""

    def test_creation(self, small_field_config):
        field = RippleField(small_field_config)

        assert field.previous.shape == (10, 10)
        assert field.current.shape == (10, 10)
        assert np.all(field.previous == 0.0)
        assert np.all(field.current == 0.0)

    def test_from_display(self):
        field = RippleField.from_display(600, 400, scale=2)

        assert field.grid_width == 300
        assert field.grid_height == 200
        assert field.shape == (200, 300)
        assert field.display_shape == (400, 600)

    def test_damping_setter_validates(self, small_field_config):
        field = RippleField(small_field_config)
        field.damping = 0.9
        assert field.damping == 0.9

        with pytest.raises(ValueError):
            field.damping = 1.5

    def test_reset(self, small_field_config):
        field = RippleField(small_field_config)
        field.disturb(5, 5, 40.0)
        field.step()
        field.reset()

        assert np.all(field.previous == 0.0)
        assert np.all(field.current == 0.0)


class TestDisturb:
    """Tests for disturbance injection."""

    def test_interior_adds_exactly(self, small_field_config):
        field = RippleField(small_field_config)

        assert field.disturb(5, 5, 40.0) is True

        expected = np.zeros((10, 10))
        expected[5, 5] = 40.0
        np.testing.assert_array_equal(field.previous, expected)
        assert np.all(field.current == 0.0)

    def test_accumulates(self, small_field_config):
        field = RippleField(small_field_config)
        field.disturb(4, 6, 40.0)
        field.disturb(4, 6, 40.0)
        assert field.previous[6, 4] == 80.0

    def test_display_to_grid_uses_scale(self):
        cfg = RippleFieldConfig(grid_width=20, grid_height=20, scale=2)
        field = RippleField(cfg)

        field.disturb(11.7, 7.2, 5.0)  # -> grid (5, 3)

        assert field.previous[3, 5] == 5.0
        assert field.previous.sum() == 5.0

    @pytest.mark.parametrize("x, y", [
        (0, 5), (1, 5), (9, 5),  # left border zone and right border
        (5, 0), (5, 1), (5, 9),  # top border zone and bottom border
        (-3, 5), (5, -1), (50, 5), (5, 50),  # off the grid
        (-0.5, 5),  # floors to -1
        (float("nan"), 5), (5, float("inf")), (float("-inf"), 5),  # not finite
    ])
    def test_near_edge_is_ignored(self, small_field_config, x, y):
        field = RippleField(small_field_config)

        assert field.disturb(x, y, 40.0) is False
        assert np.all(field.previous == 0.0)

    def test_accepted_range(self, small_field_config):
        """Grid columns/rows 2..8 accept splashes on a 10-cell grid."""
        field = RippleField(small_field_config)

        for g in range(2, 9):
            assert field.disturb(g, g, 1.0) is True

        assert field.previous.sum() == 7.0


class TestStep:
    """Tests for wave propagation."""

    def test_single_step_scenario(self, small_field_config):
        """A splash only reaches the neighbours on the first step."""
        field = RippleField(small_field_config)
        field.disturb(5, 5, 40.0)

        field.step()

        # Centre: (0 + 0 + 0 + 0) / 2 - 0 = 0
        assert field.previous[5, 5] == 0.0
        # Orthogonal neighbours: (40 / 2 - 0) * 0.96
        for y, x in [(4, 5), (6, 5), (5, 4), (5, 6)]:
            assert field.previous[y, x] == pytest.approx(19.2)
        # Diagonals untouched
        for y, x in [(4, 4), (4, 6), (6, 4), (6, 6)]:
            assert field.previous[y, x] == 0.0
        # The stale buffer still holds the splash
        assert field.current[5, 5] == 40.0

    def test_second_step(self, small_field_config):
        field = RippleField(small_field_config)
        field.disturb(5, 5, 40.0)

        field.step()
        field.step()

        # Centre: (4 * 19.2 / 2 - 40) * 0.96
        assert field.previous[5, 5] == pytest.approx(-1.536)
        # Two cells out: (19.2 / 2 - 0) * 0.96
        assert field.previous[3, 5] == pytest.approx(9.216)
        # Diagonal: (2 * 19.2 / 2 - 0) * 0.96
        assert field.previous[4, 4] == pytest.approx(18.432)

    def test_swaps_handles(self, small_field_config):
        field = RippleField(small_field_config)
        prev, cur = field.previous, field.current

        field.step()

        assert field.previous is cur
        assert field.current is prev

    def test_border_never_written(self, small_field_config):
        field = RippleField(small_field_config)
        for buf in (field.previous, field.current):
            buf[0, :] = 7.0
            buf[-1, :] = 7.0
            buf[:, 0] = 7.0
            buf[:, -1] = 7.0
        field.disturb(5, 5, 40.0)

        for _ in range(10):
            field.step()

        for buf in (field.previous, field.current):
            assert np.all(buf[0, :] == 7.0)
            assert np.all(buf[-1, :] == 7.0)
            assert np.all(buf[:, 0] == 7.0)
            assert np.all(buf[:, -1] == 7.0)

    def test_flat_surface_stays_flat(self, small_field_config):
        field = RippleField(small_field_config)
        for _ in range(5):
            field.step()
        assert np.all(field.previous == 0.0)

    def test_values_not_clamped(self, small_field_config):
        field = RippleField(small_field_config)
        field.disturb(5, 5, 1e6)
        field.step()
        assert field.previous[4, 5] == pytest.approx(0.96 * 5e5)

    @pytest.mark.parametrize("damping", [0.5, 0.9, 0.96, 0.99])
    def test_energy_dissipates(self, medium_field_config, damping):
        medium_field_config.damping = damping
        field = RippleField(medium_field_config)
        field.disturb(20, 20, 100.0)

        magnitudes = []
        for _ in range(1000):
            field.step()
            magnitudes.append(field_magnitude(field))

        early = max(magnitudes[50:100])
        late = max(magnitudes[-50:])
        assert late < early
