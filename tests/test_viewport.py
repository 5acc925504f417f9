import pytest

from bbox2d.bounding_box import BoundingBox
from bbox2d.vector import Vector2D
from bbox2d.viewport import ViewportSettings, render_svg, viewport_box, viewport_size

POINTS = [Vector2D(0.0, 0.0), Vector2D(20.0, 10.0), Vector2D(5.0, 2.0)]


class TestViewportSettings:
    def test_defaults(self) -> None:
        settings = ViewportSettings()
        assert settings.margin == 10
        assert settings.default_width == 100
        assert settings.default_height == 100

    @pytest.mark.parametrize('field', ['margin', 'default_width', 'default_height', 'point_radius'])
    def test_negative_values_are_rejected(self, field: str) -> None:
        with pytest.raises(ValueError, match=field):
            ViewportSettings(**{field: -1.0})

    @pytest.mark.parametrize('field', ['margin', 'default_width', 'default_height', 'point_radius'])
    def test_nan_values_are_rejected(self, field: str) -> None:
        with pytest.raises(ValueError, match=field):
            ViewportSettings(**{field: float('nan')})


class TestViewportSize:
    def test_box_grows_by_margin(self) -> None:
        b = viewport_box(POINTS, ViewportSettings(margin=10.0))
        assert b == BoundingBox.from_corners(Vector2D(-10.0, -10.0), Vector2D(30.0, 20.0))

    def test_size(self) -> None:
        assert viewport_size(POINTS, ViewportSettings(margin=10.0)) == (40.0, 30.0)

    def test_zero_margin(self) -> None:
        assert viewport_size(POINTS, ViewportSettings(margin=0.0)) == (20.0, 10.0)

    def test_single_point(self) -> None:
        assert viewport_size([Vector2D(3.0, 3.0)], ViewportSettings(margin=5.0)) == (10.0, 10.0)

    def test_no_points_falls_back_to_default(self) -> None:
        settings = ViewportSettings(default_width=640.0, default_height=480.0)
        assert viewport_box([], settings) is None
        assert viewport_size([], settings) == (640.0, 480.0)


class TestRenderSvg:
    def test_render(self) -> None:
        svg = render_svg(POINTS, ViewportSettings(margin=10.0, point_radius=2.0))
        assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg" width="40.0" height="30.0"')
        assert 'viewBox="-10.0 -10.0 40.0 30.0"' in svg
        assert svg.count('<circle ') == 3
        assert '<circle cx="20.0" cy="10.0" r="2.0" />' in svg
        assert svg.endswith('</svg>\n')

    def test_render_no_points(self) -> None:
        svg = render_svg([], ViewportSettings(default_width=50.0, default_height=20.0))
        assert 'viewBox="0.0 0.0 50.0 20.0"' in svg
        assert '<circle' not in svg
