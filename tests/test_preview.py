"""Tests de la vista previa SVG."""

from ratio_reels.domain.models import FrameOutput, node
from ratio_reels.video.preview import SvgPreview, render_preview, svg_text


class TestSvgPreview:

    def test_document_shape(self, registry):
        svg = SvgPreview().render(registry.render("RatioShowcase", 130))
        assert svg.startswith("<svg")
        assert svg.endswith("</svg>")
        assert 'width="393.0"' in svg
        assert '<g id="dashboard">' in svg

    def test_text_and_placeholders(self, registry):
        svg = SvgPreview().render(registry.render("RatioShowcase", 130))
        assert "Your Dashboard" in svg
        assert "screenshots/mobile/dashboard-mobile.png" in svg

    def test_frame_label(self, registry):
        svg = SvgPreview().render(registry.render("RatioShowcase", 130))
        assert "RatioShowcase #130" in svg

    def test_caption_words(self, registry):
        svg = SvgPreview().render(registry.render("AnalyticsFeedbackVideo", 1395))
        assert svg.count("<tspan") == 7

    def test_invisible_nodes_are_skipped(self):
        tree = node("composition", node("scene", node("text", text="oculto"), id="s", opacity=0.0),
                    width=393, height=852)
        svg = SvgPreview().render(FrameOutput(composition_id="X", frame=0, tree=tree))
        assert "oculto" not in svg

    def test_scale(self, registry):
        svg = SvgPreview(scale=0.5).render(registry.render("RatioShowcase", 0))
        assert 'width="196.5"' in svg
        assert 'transform="scale(0.5)"' in svg

    def test_write(self, registry, tmp_path):
        path = tmp_path / "frames" / "f.svg"
        svg = render_preview(registry.render("RatioShowcase", 0), path=path)
        assert path.read_text(encoding="utf-8") == svg

    def test_text_is_escaped(self):
        assert "&amp;" in svg_text(0, 0, "Q&A <1>")
        assert "<1>" not in svg_text(0, 0, "Q&A <1>")
