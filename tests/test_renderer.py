import pytest

from p2_tools import Dart, Kite, ImageRenderer, Operations, build_vertex
import p2_vertex_generator

KITE = (205, 255, 255)
DART = (0, 0, 255)
WHITE = (255, 255, 255)


def centroid_pixel(tile, xoff, yoff, scale, height):
    x, y = Operations().calculate_centroid(tile.polygon(xoff, yoff, scale))
    return int(round(x)), int(round(height - y))


class TestImageRenderer:
    def test_fills_by_shape(self) -> None:
        renderer = ImageRenderer(400, 300, color1=KITE, color2=DART)
        tiles = [Dart(-2., 0., 0), Kite(2., 0., 0)]
        image = renderer.render(tiles, 200., 150., 40.)

        assert image.size == (400, 300)
        assert image.getpixel(centroid_pixel(tiles[0], 200., 150., 40., 300)) == DART
        assert image.getpixel(centroid_pixel(tiles[1], 200., 150., 40., 300)) == KITE
        assert image.getpixel((2, 2)) == WHITE

    def test_render_figure(self) -> None:
        renderer = ImageRenderer(300, 300, color1=KITE, color2=DART)
        tiles = build_vertex(6)
        image = renderer.render(tiles, 150., 150., 40.)
        for tile in tiles:
            expected = KITE if tile.is_kite else DART
            assert image.getpixel(centroid_pixel(tile, 150., 150., 40., 300)) == expected

    def test_y_axis_points_up(self) -> None:
        renderer = ImageRenderer(200, 200, color1=KITE, color2=DART)
        # Tip of a dart turned by 90 degrees points up the page
        image = renderer.render([Dart(0., 0., 90)], 100., 100., 40.)
        assert image.getpixel((100, 75)) == DART
        assert image.getpixel((100, 125)) == WHITE

    def test_half_turn_moves_tip_left(self) -> None:
        renderer = ImageRenderer(200, 200, color1=KITE, color2=DART)
        # Tip moves from the right (0 degrees) to the left (180 degrees)
        image = renderer.render([Dart(0., 0., 180)], 100., 100., 40.)
        assert image.getpixel((75, 100)) == DART
        assert image.getpixel((125, 100)) == WHITE

    def test_colors_are_clamped(self) -> None:
        renderer = ImageRenderer(10, 10, color1=(300, -1, 20))
        assert renderer.kite_color == (255, 0, 20)

    def test_save(self, tmp_path) -> None:
        renderer = ImageRenderer(50, 50)
        path = renderer.save(renderer.render([Kite(0., 0., 0)], 25., 25., 10.), tmp_path / "kite.png")
        assert path.exists()


class TestCommandLine:
    def test_creates_config_and_image(self, tmp_path) -> None:
        config = tmp_path / "config.ini"
        output = tmp_path / "out.png"
        code = p2_vertex_generator.main(['--config', str(config), '-o', str(output), '-v', '1', '-v', '3'])
        assert code == 0
        assert config.exists()
        assert output.exists()

    def test_layout(self) -> None:
        groups = p2_vertex_generator.layout_vertices([1, 2], 300, 100, 10., 0)
        assert len(groups) == 2
        corners = [Operations().find_common_vertex(tiles) for tiles in groups]
        assert corners[0] == pytest.approx((10., 5.))
        assert corners[1] == pytest.approx((20., 5.))

    def test_bad_config_reports_failure(self, tmp_path) -> None:
        config = tmp_path / "config.ini"
        Operations().write_config_file(config, {'vertices': [9]})
        code = p2_vertex_generator.main(['--config', str(config), '-o', str(tmp_path / "x.png")])
        assert code == 1

    def test_old_config_without_outline(self, tmp_path) -> None:
        config = tmp_path / "config.ini"
        config.write_text("[Settings]\nwidth = 200\nheight = 100\nscale = 10\nvertices = 3\n")
        code = p2_vertex_generator.main(['--config', str(config), '-o', str(tmp_path / "old.png")])
        assert code == 0
        assert (tmp_path / "old.png").exists()

    def test_layout_warns_when_figure_is_cut_off(self, caplog) -> None:
        p2_vertex_generator.layout_vertices([3], 60, 60, 20., 0)
        assert any("does not fit" in r.getMessage() for r in caplog.records)

    def test_layout_quiet_when_figures_fit(self, caplog) -> None:
        p2_vertex_generator.layout_vertices([1, 3], 900, 300, 20., 0)
        assert not any("does not fit" in r.getMessage() for r in caplog.records)
