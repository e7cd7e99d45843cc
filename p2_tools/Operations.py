import configparser
import logging
import numpy as np
from p2_tools.Geometry import distance

logger = logging.getLogger('Operations')

DEFAULT_CONFIG = {
    'width': 1280,
    'height': 720,
    'scale': 60,
    'vertices': [1, 2, 3, 4, 5, 6, 7],
    'rotation': 0,
    'color1': [205, 255, 255],
    'color2': [0, 0, 255],
    'outline': [0, 0, 0],
}


class Operations:
    def __init__(self):
        self.config = configparser.ConfigParser()

    def write_config_file(self, config_path, settings=None):
        """Write a complete [Settings] section, falling back to the defaults."""
        merged = dict(DEFAULT_CONFIG)
        merged.update(settings or {})
        self.config['Settings'] = {key: self._format_value(value) for key, value in merged.items()}
        with open(config_path, 'w') as configfile:
            self.config.write(configfile)
        logger.info(f"Wrote settings to {config_path}")

    def read_config_file(self, config_path):
        """Read [Settings]; keys missing from older files fall back to DEFAULT_CONFIG."""
        self.config.read(config_path)
        settings = {
            'width': self.config.getint('Settings', 'width', fallback=DEFAULT_CONFIG['width']),
            'height': self.config.getint('Settings', 'height', fallback=DEFAULT_CONFIG['height']),
            'scale': self.config.getfloat('Settings', 'scale', fallback=float(DEFAULT_CONFIG['scale'])),
            'vertices': self._int_list(self._get_raw('vertices')),
            'rotation': self.config.getint('Settings', 'rotation', fallback=DEFAULT_CONFIG['rotation']),
            'color1': self._int_list(self._get_raw('color1')),
            'color2': self._int_list(self._get_raw('color2')),
            'outline': self._int_list(self._get_raw('outline')),
        }
        return settings

    def _get_raw(self, key):
        return self.config.get('Settings', key, fallback=self._format_value(DEFAULT_CONFIG[key]))

    def update_config_file(self, config_path, **kwargs):
        self.config.read(config_path)
        if not self.config.has_section('Settings'):
            self.config.add_section('Settings')
        for key, value in kwargs.items():
            self.config.set('Settings', key, self._format_value(value))
            logger.debug(f"Setting {key} = {value}")
        with open(config_path, 'w') as configfile:
            self.config.write(configfile)

    def _format_value(self, value):
        if isinstance(value, (list, tuple)):
            # Drop empty entries so the list parses back cleanly
            return ', '.join(str(v).strip() for v in value if str(v).strip())
        return str(value)

    def _int_list(self, raw):
        return [int(x.strip()) for x in raw.split(',') if x.strip()]

    def calculate_centroid(self, vertices):
        """ Calculate the centroid from a list of vertices. """
        pts = np.asarray(vertices, dtype=float)
        cx, cy = pts.mean(axis=0)
        return (float(cx), float(cy))

    def bounds(self, tiles):
        """Axis-aligned (min_x, min_y, max_x, max_y) around all tile corners."""
        pts = np.concatenate([tile.vertices() for tile in tiles])
        min_x, min_y = pts.min(axis=0)
        max_x, max_y = pts.max(axis=0)
        return (float(min_x), float(min_y), float(max_x), float(max_y))

    def to_canvas(self, tiles, xoff, yoff, scale):
        """Outline of every tile in output coordinates, as lists of (x, y) tuples."""
        return [[(float(x), float(y)) for x, y in tile.polygon(xoff, yoff, scale)] for tile in tiles]

    def clamp_color(self, color):
        """Ensure all color values are within the legal RGB range."""
        return tuple(max(0, min(255, int(c))) for c in color)

    def find_common_vertex(self, tiles, tolerance=1e-6):
        """Find a corner shared by every tile in the group, or None."""
        if not tiles:
            return None

        for candidate in tiles[0].vertices():
            if all(self._corner_index(tile, candidate, tolerance) is not None for tile in tiles[1:]):
                return (float(candidate[0]), float(candidate[1]))
        return None

    def angle_sum_at(self, tiles, point, tolerance=1e-6):
        """Sum of the interior angles that the tiles contribute at `point`."""
        total = 0
        for tile in tiles:
            index = self._corner_index(tile, point, tolerance)
            if index is not None:
                # internal_angles() is keyed by the edge ending at the corner
                total += tile.internal_angles()[(index - 1) % 4]
        return total

    def _corner_index(self, tile, point, tolerance):
        for index, vertex in enumerate(tile.vertices()):
            if distance(vertex, point) <= tolerance:
                return index
        return None
