"""Tests for pose values, operation specs and render configuration."""

import pytest

from cubeproj.config.operations import OperationSpec
from cubeproj.config.render import RENDER_CONFIG, RenderConfig
from cubeproj.config.values import BoxPose, CameraPose


class TestBoxPose:
    """Test BoxPose."""

    def test_defaults_are_neutral(self):
        """Test default pose is the identity."""
        pose = BoxPose()
        assert pose.rotation == (0.0, 0.0, 0.0)
        assert pose.scale == (1.0, 1.0, 1.0)
        assert pose.translation == (0.0, 0.0, 0.0)
        assert pose.is_neutral()

    def test_is_neutral(self):
        """Test any non-default component breaks neutrality."""
        assert not BoxPose(rx=1).is_neutral()
        assert not BoxPose(sy=2).is_neutral()
        assert not BoxPose(tz=-1).is_neutral()

    def test_factories(self):
        """Test factory methods set only their own fields."""
        assert BoxPose.from_rotation(1, 2, 3) == BoxPose(rx=1, ry=2, rz=3)
        assert BoxPose.from_translation(4, 5, 6) == BoxPose(tx=4, ty=5, tz=6)
        assert BoxPose.from_scale(2.0) == BoxPose(sx=2.0, sy=2.0, sz=2.0)
        assert BoxPose.from_scale(1, 2, 3).scale == (1, 2, 3)

    def test_clamp(self):
        """Test clamp limits angles and scale but not translation."""
        pose = BoxPose(rx=720, ry=-400, sx=5000, tx=1e6).clamp()
        assert pose.rx == 360.0
        assert pose.ry == -360.0
        assert pose.sx == 1000.0
        assert pose.tx == 1e6

    def test_clamp_rejects_non_numeric(self):
        """Test clamp raises for non-numeric fields."""
        with pytest.raises(ValueError, match="expected number"):
            BoxPose(rx="10").clamp()

    def test_frozen(self):
        """Test poses are immutable."""
        with pytest.raises(AttributeError):
            BoxPose().rx = 5


class TestCameraPose:
    """Test CameraPose."""

    def test_defaults_are_neutral(self):
        """Test default camera pose."""
        cam = CameraPose()
        assert cam.orientation == (0.0, 0.0, 0.0)
        assert cam.position == (0.0, 0.0, 0.0)
        assert cam.zoom == 1.0
        assert cam.is_neutral()

    def test_is_neutral(self):
        """Test any non-default component breaks neutrality."""
        assert not CameraPose(ry=1).is_neutral()
        assert not CameraPose(tx=1).is_neutral()
        assert not CameraPose(zoom=2).is_neutral()

    def test_factories(self):
        """Test factory methods."""
        assert CameraPose.from_orientation(1, 2, 3).orientation == (1, 2, 3)
        assert CameraPose.from_position(4, 5, 6).position == (4, 5, 6)
        assert CameraPose.from_zoom(2.0).zoom == 2.0

    def test_clamp(self):
        """Test zoom and angles are clamped."""
        cam = CameraPose(rz=1000, zoom=0.0).clamp()
        assert cam.rz == 360.0
        assert cam.zoom == 0.01

        assert CameraPose(zoom=500).clamp().zoom == 100.0


class TestOperationSpec:
    """Test OperationSpec."""

    def test_validate_clamps(self):
        """Test validate clamps into range."""
        spec = OperationSpec("x", min_value=0.0, max_value=1.0, default=0.5, neutral=0.5)
        assert spec.validate(-1) == 0.0
        assert spec.validate(2) == 1.0
        assert spec.validate(0.25) == 0.25

    def test_validate_rejects_non_numbers(self):
        """Test non-numeric values raise ValueError."""
        spec = RENDER_CONFIG.zoom
        with pytest.raises(ValueError, match="zoom: expected number, got str"):
            spec.validate("2")
        with pytest.raises(ValueError):
            spec.validate(True)

    def test_is_neutral(self):
        """Test neutral detection."""
        assert RENDER_CONFIG.zoom.is_neutral(1.0)
        assert not RENDER_CONFIG.zoom.is_neutral(1.1)

    def test_repr(self):
        """Test repr shows the range."""
        assert "range=[0.01, 100.0]" in repr(RENDER_CONFIG.zoom)


class TestRenderConfig:
    """Test RenderConfig."""

    def test_defaults(self):
        """Test default constants."""
        assert RENDER_CONFIG.base_projection_constant == 300.0
        assert RENDER_CONFIG.z_translate_offset == 5.0
        assert not RENDER_CONFIG.exact_camera_inverse

    def test_projection_constant(self):
        """Test k = 300 * zoom."""
        assert RENDER_CONFIG.projection_constant(1.0) == 300.0
        assert RENDER_CONFIG.projection_constant(2.5) == 750.0
        assert RenderConfig(base_projection_constant=100.0).projection_constant(2) == 200.0

    def test_get_spec(self):
        """Test spec lookup by name."""
        assert RENDER_CONFIG.get_spec("zoom") is RENDER_CONFIG.zoom
        with pytest.raises(AttributeError):
            RENDER_CONFIG.get_spec("missing")
        with pytest.raises(AttributeError):
            RENDER_CONFIG.get_spec("z_translate_offset")

    def test_get_all_specs(self):
        """Test all specs are listed."""
        assert set(RENDER_CONFIG.get_all_specs()) == {"zoom", "rotation_angle", "scale_factor"}
