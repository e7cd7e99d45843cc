# p2_vertex_generator.py
import os
import sys
import logging
import argparse
from p2_tools import Operations, ImageRenderer, build_vertex, VERTEX_NAMES
from p2_tools.Operations import DEFAULT_CONFIG

CONFIG_PATH = 'config.ini'

op = Operations()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger('P2_Vertex_Generator')


def initialize_config(path):
    if not os.path.isfile(path):
        logger.info(f"Config file {path} not found. Creating a new one...")
        op.write_config_file(path, DEFAULT_CONFIG)
    return op.read_config_file(path)


def layout_vertices(vertices, width, height, scale, rotation):
    """Build each requested figure, spread evenly along the horizontal midline.

    Figures are built in pixel units divided by `scale`, so rendering them
    is a pure scale with no offset.
    """
    groups = []
    spacing = width / (len(vertices) + 1)
    for i, k in enumerate(vertices):
        x = spacing * (i + 1) / scale
        y = (height / 2) / scale
        tiles = build_vertex(k, x, y, rotation)
        groups.append(tiles)
        logger.info(f"Built vertex {k} ({VERTEX_NAMES[k]}) at ({x:.3f}, {y:.3f})")
        min_x, min_y, max_x, max_y = op.bounds(tiles)
        if min_x < 0 or min_y < 0 or max_x > width / scale or max_y > height / scale:
            logger.warning(f"Vertex {k} ({VERTEX_NAMES[k]}) does not fit in the {width}x{height} image at scale {scale}")
    return groups


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Penrose kite and dart vertex figures")
    parser.add_argument('--config', default=CONFIG_PATH, help='Path to the settings file')
    parser.add_argument('-v', '--vertex', type=int, action='append', choices=sorted(VERTEX_NAMES),
                        help='Vertex configuration to draw (repeatable, default from config)')
    parser.add_argument('-r', '--rotation', type=int, help='Rotation of every figure in degrees')
    parser.add_argument('-s', '--scale', type=float, help='Pixels per tile unit')
    parser.add_argument('-o', '--output', default='vertices.png', help='Output image path')
    parser.add_argument('--debug', action='store_true', help='Log every placement')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        settings = initialize_config(args.config)
        vertices = args.vertex or settings['vertices']
        rotation = settings['rotation'] if args.rotation is None else args.rotation
        scale = args.scale or settings['scale']

        groups = layout_vertices(vertices, settings['width'], settings['height'], scale, rotation)
        renderer = ImageRenderer.from_settings(settings)
        image = renderer.render_groups(groups, scale)
        renderer.save(image, args.output)
    except Exception as e:
        logger.error(f"An error occurred: {e}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
