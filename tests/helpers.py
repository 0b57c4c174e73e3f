from pdfsvg.svgdevice import SVGCanvas


class RecordingCanvas(SVGCanvas):
    """Records every drawing call as a (name, arguments) tuple."""

    def __init__(self, page_width=600, page_height=800):
        SVGCanvas.__init__(self, page_width, page_height)
        self.log = []

    def names(self):
        return [name for (name, _) in self.log]

    def _record(self, name, *args):
        self.log.append((name, args))

    def move_to(self, x, y):
        self._record("move_to", x, y)

    def line_to(self, x, y):
        self._record("line_to", x, y)

    def curve_to(self, x1, y1, x2, y2, x3, y3):
        self._record("curve_to", x1, y1, x2, y2, x3, y3)

    def close_path(self):
        self._record("close_path")

    def fill(self):
        self._record("fill")

    def stroke(self):
        self._record("stroke")

    def fill_color(self, color):
        self._record("fill_color", color)

    def add_content(self, content):
        self._record("add_content", content)

    def draw_text(self, text, options):
        self._record("draw_text", text, options)

    def bounding_box(self, at, width, height, block=None):
        self._record("bounding_box", tuple(at), width, height)
        SVGCanvas.bounding_box(self, at, width, height, block=block)
        self._record("end_bounding_box")

    def save_graphics_state(self, block=None):
        self._record("save_graphics_state")
        if block is not None:
            block()
            self._record("restore_graphics_state")

    def restore_graphics_state(self):
        self._record("restore_graphics_state")

    def transformation_matrix(self, a, b, c, d, e, f, block=None):
        self._record("transformation_matrix", a, b, c, d, e, f)
        if block is not None:
            block()
            self._record("end_transformation_matrix")

    def transparent(self, opacity, stroke_opacity=None, block=None):
        self._record("transparent", opacity, stroke_opacity)
        if block is not None:
            block()
            self._record("end_transparent")
