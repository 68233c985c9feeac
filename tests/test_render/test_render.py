"""
Unit tests for the drawing adapters: surfaces, pixmap export and PNG plotting.
"""

import math

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from pathbuilder import (  # noqa: E402
    DrawingSurface,
    MatplotlibSurface,
    Pen,
    PathBuilder,
    PathStyle,
    PillowSurface,
    Styles,
)


class RecordingSurface(DrawingSurface):
    """Drawing surface that records every call."""

    def __init__(self):
        self.calls = []

    def draw_line(self, start, end, pen):
        self.calls.append(("line", start.to_tuple(), end.to_tuple(), pen))

    def draw_circle(self, center, radius, color):
        self.calls.append(("circle", center.to_tuple(), radius, color))

    def draw_rect(self, box, pen):
        self.calls.append(("rect", box, pen))

    def kinds(self, kind):
        return [call for call in self.calls if call[0] == kind]


@pytest.fixture
def straight():
    builder = PathBuilder()
    builder.add_linear(100)
    return builder


class TestDraw:
    """PathBuilder.draw issues primitive calls from the path data."""

    def test_invalid_path_draws_nothing(self):
        surface = RecordingSurface()

        PathBuilder().draw(surface)
        PathBuilder().draw_from_vectors(surface)

        assert surface.calls == []

    def test_straight_path_calls(self, straight):
        surface = RecordingSurface()
        style = PathStyle()

        straight.draw(surface, style)

        assert surface.calls[0] == ("rect", straight.bounding_box, style.bounding_box_pen)
        path_lines = [call for call in surface.kinds("line") if call[3] == style.path_pen]
        assert path_lines == [("line", (0.0, 0.0), (100.0, 0.0), style.path_pen)]
        assert len(surface.kinds("circle")) == 2
        # shaft and two head strokes per arrow
        assert len(surface.kinds("line")) == 1 + 3 + 3

    def test_arrows_use_entry_and_exit_orientation(self):
        builder = PathBuilder()
        builder.add_l_shape(100, 50)
        surface = RecordingSurface()
        style = PathStyle()

        builder.draw(surface, style)

        start_shaft = [c for c in surface.kinds("line") if c[3] == style.start_vector_pen][0]
        end_shaft = [c for c in surface.kinds("line") if c[3] == style.end_vector_pen][0]
        assert start_shaft[1] + start_shaft[2] == pytest.approx((0, 0, 35, 0), abs=1e-9)
        assert end_shaft[1] + end_shaft[2] == pytest.approx((100, 50, 100, 85), abs=1e-9)

    def test_point_markers_disabled_by_zero_radius(self, straight):
        surface = RecordingSurface()

        straight.draw(surface, PathStyle(point_radius=0.0))

        assert surface.kinds("circle") == []

    def test_draw_from_vectors_matches_draw(self):
        builder = PathBuilder()
        builder.add_extended_circular(20, 15, -2.5, 20, segments=9)
        direct, walked = RecordingSurface(), RecordingSurface()

        builder.draw(direct)
        builder.draw_from_vectors(walked)

        assert len(direct.calls) == len(walked.calls)
        for a, b in zip(direct.kinds("circle"), walked.kinds("circle")):
            assert a[1] == pytest.approx(b[1])


class TestMatplotlibSurface:
    def test_draws_on_axes(self, straight):
        fig, ax = plt.subplots()
        try:
            straight.draw(MatplotlibSurface(ax))

            assert len(ax.lines) == 7
            # bounding box and two point markers
            assert len(ax.patches) == 3
        finally:
            plt.close(fig)

    def test_invisible_pen_is_skipped(self, straight):
        fig, ax = plt.subplots()
        try:
            straight.draw(MatplotlibSurface(ax), Styles.MINIMAL)

            assert len(ax.patches) == 0
        finally:
            plt.close(fig)


class TestToPixmap:
    """Raster export sized from the bounding box."""

    def test_invalid_path_gives_none(self):
        assert PathBuilder().to_pixmap() is None

    def test_size_from_bounding_box_and_margin(self):
        builder = PathBuilder()
        builder.add_l_shape(100, 50)

        image = builder.to_pixmap(margin=35)

        assert image.mode == "RGBA"
        assert image.size == (170, 120)

    def test_default_background_is_transparent(self, straight):
        image = straight.to_pixmap()

        assert image.getpixel((0, 0)) == (0, 0, 0, 0)
        assert image.getbbox() is not None

    def test_fill_color_from_style(self, straight):
        image = straight.to_pixmap(margin=10, style=Styles.PRINT)

        assert image.size == (120, 20)
        assert image.getpixel((0, 0)) == (255, 255, 255, 255)

    def test_path_pixels_are_drawn(self):
        builder = PathBuilder()
        builder.add_l_shape(100, 50)
        style = PathStyle(point_radius=0.0, path_pen=Pen((255, 0, 0, 255), 3.0))

        image = builder.to_pixmap(margin=20, style=style)

        # midpoint of the vertical leg, away from arrows and the box outline
        assert image.getpixel((120, 45)) == (255, 0, 0, 255)

    def test_pillow_surface_offset(self):
        from PIL import Image

        image = Image.new("RGBA", (20, 20), (0, 0, 0, 0))
        surface = PillowSurface(image, offset=(10, 10))

        surface.draw_circle((0, 0), 3, (0, 255, 0, 255))

        assert image.getpixel((10, 10)) == (0, 255, 0, 255)
        assert image.getpixel((0, 0)) == (0, 0, 0, 0)


class TestToPng:
    def test_writes_file(self, tmp_path):
        builder = PathBuilder()
        builder.add_circular(40, math.pi, 12)
        target = tmp_path / "path.png"

        builder.to_png(str(target), width=400, height=300)

        assert target.exists()
        assert target.stat().st_size > 0

    def test_invalid_path_writes_nothing(self, tmp_path):
        target = tmp_path / "empty.png"

        PathBuilder().to_png(str(target))

        assert not target.exists()


class TestStyles:
    def test_with_changes_returns_new_style(self):
        style = PathStyle().with_changes(vector_length=10.0)

        assert style.vector_length == 10.0
        assert PathStyle().vector_length == 35.0

    def test_default_palette(self):
        style = Styles.DEFAULT

        assert style.path_pen == Pen((132, 164, 217, 255), 2.0)
        assert style.point_color == (67, 114, 196, 255)
        assert style.fill_color == (0, 0, 0, 0)
