import xml.etree.ElementTree as ET
import logging

logger = logging.getLogger(__name__)


class SVGParser:
    """Pull the path data out of an SVG document."""

    def __init__(self, svg_file, root=None):
        self.svg_file = svg_file
        self.namespace = {'svg': 'http://www.w3.org/2000/svg'}
        self._root = root

    @classmethod
    def from_string(cls, svg_text):
        return cls(None, ET.fromstring(svg_text))

    def root(self):
        if self._root is None:
            self._root = ET.parse(self.svg_file).getroot()
        return self._root

    def path_data(self):
        """Return the d attribute of every <path>, in document order."""
        paths = []
        for path in self.root().iterfind(".//svg:path", self.namespace):
            d = path.get("d", "").strip()
            if not d:
                logger.debug("Skipping <path id=%r> without data", path.get("id"))
                continue
            paths.append(d)
        logger.info("Found %d path(s) in %s", len(paths), self.svg_file or "<string>")
        return paths

# Example usage:
# parser = SVGParser("input.svg")
# for d in parser.path_data():
#     print(d)
