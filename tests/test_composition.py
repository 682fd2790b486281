"""Tests for the canvas builder and label renderer."""

import numpy as np
import pytest
from PIL import Image

from classifyit.composition import CanvasBuilder, LabelRenderer
from classifyit.enums import ImageFormat, Placement
from classifyit.exceptions import InvalidDimensionError
from classifyit.models import BannerSpec, SourceBitmap


class TestCanvasBuilder:
    def setup_method(self):
        self.builder = CanvasBuilder()

    def test_output_size(self, gradient_source, cui_spec):
        canvas = self.builder.build_canvas(gradient_source, cui_spec)
        assert canvas.size == (100, 50 + 2 * 60)
        assert canvas.mode == "RGBA"

    def test_banners_filled_opaque(self, gradient_source, cui_spec):
        arr = np.array(self.builder.build_canvas(gradient_source, cui_spec))
        assert (arr[:60] == (0, 255, 0, 255)).all()
        assert (arr[110:] == (0, 255, 0, 255)).all()

    def test_source_copied_without_row_shift(self, gradient_source, cui_spec):
        arr = np.array(self.builder.build_canvas(gradient_source, cui_spec))
        src = np.array(gradient_source.image)
        assert np.array_equal(arr[60:110, :, :3], src)
        assert (arr[60:110, :, 3] == 255).all()

    def test_source_alpha_preserved(self, rgba_source, cui_spec):
        arr = np.array(self.builder.build_canvas(rgba_source, cui_spec))
        assert (arr[60:100] == (10, 20, 30, 100)).all()

    def test_grayscale_source(self, cui_spec):
        source = SourceBitmap(image=Image.new("L", (20, 10), 128), format=ImageFormat.PNG)
        arr = np.array(self.builder.build_canvas(source, cui_spec))
        assert arr.shape == (130, 20, 4)
        assert (arr[60:70] == (128, 128, 128, 255)).all()

    def test_palette_source(self, cui_spec):
        img = Image.new("P", (20, 10), 0)
        img.putpalette([200, 10, 10] + [0, 0, 0] * 255)
        source = SourceBitmap(image=img, format=ImageFormat.PNG)
        arr = np.array(self.builder.build_canvas(source, cui_spec))
        assert (arr[60:70] == (200, 10, 10, 255)).all()

    def test_source_not_modified(self, gradient_source, cui_spec):
        before = np.array(gradient_source.image).copy()
        self.builder.build_canvas(gradient_source, cui_spec)
        assert np.array_equal(np.array(gradient_source.image), before)

    def test_zero_width_source_rejected(self, cui_spec):
        source = SourceBitmap(image=Image.new("RGB", (0, 10)), format=ImageFormat.PNG)
        with pytest.raises(InvalidDimensionError, match="non-empty"):
            self.builder.build_canvas(source, cui_spec)

    def test_zero_height_source_rejected(self, cui_spec):
        source = SourceBitmap(image=Image.new("RGB", (10, 0)), format=ImageFormat.PNG)
        with pytest.raises(InvalidDimensionError):
            self.builder.build_canvas(source, cui_spec)

    def test_one_pixel_banner(self, gradient_source):
        spec = BannerSpec((1, 2, 3), (4, 5, 6), "X", 1, Placement.CENTER)
        canvas = self.builder.build_canvas(gradient_source, spec)
        assert canvas.size == (100, 52)
        assert canvas.getpixel((0, 0)) == (1, 2, 3, 255)
        assert canvas.getpixel((99, 51)) == (1, 2, 3, 255)


class TestLabelRenderer:
    def setup_method(self):
        self.renderer = LabelRenderer()

    def _canvas(self):
        return Image.new("RGBA", (200, 80), (0, 255, 0, 255))

    def test_draws_in_text_color(self, font):
        canvas = self._canvas()
        self.renderer.draw_label(canvas, "CUI", (10, 50), (0, 0, 0), font)
        arr = np.array(canvas)
        assert ((arr[:, :, :3] == (0, 0, 0)).all(axis=-1)).any()

    def test_ink_sits_on_baseline(self, font):
        canvas = self._canvas()
        self.renderer.draw_label(canvas, "CUI", (10, 50), (0, 0, 0), font)
        arr = np.array(canvas)
        ink_rows = np.where((arr[:, :, 1] != 255).any(axis=1))[0]
        ink_cols = np.where((arr[:, :, 1] != 255).any(axis=0))[0]
        assert ink_rows.max() <= 51
        assert ink_rows.min() < 50
        assert ink_cols.min() >= 9

    def test_empty_text_is_noop(self, font):
        canvas = self._canvas()
        before = np.array(canvas).copy()
        self.renderer.draw_label(canvas, "", (10, 50), (0, 0, 0), font)
        assert np.array_equal(np.array(canvas), before)

    def test_unsupported_glyphs_do_not_raise(self, font):
        canvas = self._canvas()
        self.renderer.draw_label(canvas, "機密 ☃", (10, 50), (0, 0, 0), font)
        assert canvas.size == (200, 80)

    def test_label_partly_off_canvas(self, font):
        canvas = self._canvas()
        self.renderer.draw_label(canvas, "UNCLASSIFIED", (-40, 50), (255, 255, 255), font)
        assert canvas.size == (200, 80)
