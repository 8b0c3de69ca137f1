"""End-to-end tests for template extraction from presentation archives."""

import pytest

from tests.conftest import (
    MASTER_ENTRY,
    THEME_ENTRY,
    THEME_XML,
    layout_entry,
    make_archive,
    placeholder_sp,
    slide_doc,
    solid_background,
)


class TestFullArchive:
    def test_no_warnings(self, full_archive):
        from src.pptx_engine.template_extractor import extract_template

        result = extract_template(full_archive, "Corporate.pptx")
        assert result.warnings == []
        assert result.is_partial is False
        assert result.template.name == "Corporate"

    def test_background_from_master(self, full_archive):
        from src.pptx_engine.template_extractor import extract_template

        assert extract_template(full_archive, "x.pptx").template.background.color == "#112233"

    def test_heading_merges_master_and_layout(self, full_archive):
        from src.pptx_engine.template_extractor import extract_template
        from src.schemas.slide_template import ElementName

        template = extract_template(full_archive, "x.pptx").template
        heading = template.find_element(ElementName.HEADING).primary_style
        assert heading.font_family == "Georgia"
        assert heading.font_size == 36
        assert heading.font_color == "#000000"
        assert heading.font_weight == 700

    def test_body_uses_modified_scheme_color(self, full_archive):
        from src.pptx_engine.color_space import apply_lum_mod, normalize_hex
        from src.pptx_engine.template_extractor import extract_template
        from src.schemas.slide_template import ElementName

        template = extract_template(full_archive, "x.pptx").template
        body = template.find_element(ElementName.BODY).primary_style
        assert body.font_family == "Malgun Gothic"
        assert body.font_size == 20
        assert body.font_color == normalize_hex(apply_lum_mod("#4F81BD", 0.75))
        assert body.font_weight == 500

    def test_meta_caption_and_speaker(self, full_archive):
        from src.pptx_engine.template_extractor import extract_template
        from src.schemas.slide_template import ElementName

        template = extract_template(full_archive, "x.pptx").template
        meta = template.find_element(ElementName.META_PRIMARY).primary_style
        assert (meta.font_size, meta.font_color, meta.font_weight) == (18, "#999999", 400)

        caption = template.find_element(ElementName.CAPTION).primary_style
        assert (caption.font_size, caption.font_color) == (10, "#777777")

        speaker = template.find_element(ElementName.META_SECONDARY)
        assert speaker.primary_style.font_family == "Malgun Gothic"
        assert speaker.primary_style.font_size == 19
        assert speaker.primary_style.font_color == "#000000"
        assert speaker.primary_style.font_weight == 700
        assert speaker.secondary_style.font_color == "#4D4D4D"
        assert speaker.secondary_style.font_weight == 500


class TestDegradedArchives:
    def test_empty_archive_gives_defaults(self, empty_archive):
        from src.pptx_engine.template_extractor import extract_template
        from src.schemas.slide_template import ElementName

        result = extract_template(empty_archive, "empty.pptx")
        assert result.is_partial is True
        assert result.warnings == ["Theme color scheme not found, using defaults"]
        template = result.template
        assert len(template.elements) == 6
        assert template.background.color == "#FFFFFF"
        heading = template.find_element(ElementName.HEADING).primary_style
        assert (heading.font_size, heading.font_color) == (14, "#434343")

    def test_not_a_zip(self):
        from src.pptx_engine.template_extractor import InvalidContainerError, extract_template

        with pytest.raises(InvalidContainerError):
            extract_template(b"\x00\x01\x02\x03", "broken.pptx")

    def test_corrupt_theme_is_a_warning(self):
        from src.pptx_engine.template_extractor import extract_template

        data = make_archive({THEME_ENTRY: "<a:theme", MASTER_ENTRY: slide_doc("p:sldMaster")})
        result = extract_template(data, "x.pptx")
        assert result.warnings == ["Failed to parse theme, using defaults"]
        assert result.is_partial is True

    def test_corrupt_master_is_a_warning(self):
        from src.pptx_engine.template_extractor import extract_template

        data = make_archive({THEME_ENTRY: THEME_XML, MASTER_ENTRY: "<p:sldMaster>"})
        result = extract_template(data, "x.pptx")
        assert result.warnings == ["Failed to parse slide master"]
        assert result.template.background.color == "#FFFFFF"

    def test_corrupt_layout_skipped_others_kept(self):
        from src.pptx_engine.template_extractor import extract_template
        from src.schemas.slide_template import ElementName

        good = slide_doc(
            "p:sldLayout",
            shapes=placeholder_sp("title", rpr='<a:rPr lang="en-US" sz="4000"/>'),
            background=solid_background('<a:srgbClr val="112233"/>'),
        )
        data = make_archive({
            THEME_ENTRY: THEME_XML,
            MASTER_ENTRY: slide_doc("p:sldMaster"),
            layout_entry(1): good,
            layout_entry(7): "<p:sldLayout",
        })
        result = extract_template(data, "x.pptx")
        assert result.warnings == []
        assert result.is_partial is False
        assert result.template.background.color == "#112233"
        assert result.template.find_element(ElementName.HEADING).primary_style.font_size == 40

    def test_missing_master_is_silent(self):
        from src.pptx_engine.template_extractor import extract_template

        result = extract_template(make_archive({THEME_ENTRY: THEME_XML}), "x.pptx")
        assert result.warnings == []
        assert result.is_partial is False
        assert len(result.template.elements) == 6


class TestLayoutBackground:
    def test_lowest_layout_with_background_wins(self):
        from src.pptx_engine.template_extractor import extract_template

        data = make_archive({
            THEME_ENTRY: THEME_XML,
            MASTER_ENTRY: slide_doc("p:sldMaster"),
            layout_entry(2): slide_doc("p:sldLayout", background=solid_background('<a:srgbClr val="AAAAAA"/>')),
            layout_entry(3): slide_doc("p:sldLayout"),
            layout_entry(5): slide_doc("p:sldLayout", background=solid_background('<a:srgbClr val="BBBBBB"/>')),
        })
        result = extract_template(data, "x.pptx")
        assert result.warnings == []
        assert result.template.background.color == "#AAAAAA"

    def test_master_background_beats_layouts(self):
        from src.pptx_engine.template_extractor import extract_template

        master = slide_doc("p:sldMaster", background=solid_background('<a:srgbClr val="010203"/>'))
        data = make_archive({
            THEME_ENTRY: THEME_XML,
            MASTER_ENTRY: master,
            layout_entry(1): slide_doc("p:sldLayout", background=solid_background('<a:srgbClr val="AAAAAA"/>')),
        })
        assert extract_template(data, "x.pptx").template.background.color == "#010203"


class TestFromFile:
    def test_python_pptx_default_deck(self, tmp_path):
        from pptx import Presentation

        from src.pptx_engine.template_extractor import extract_template_from_file

        path = tmp_path / "Default.pptx"
        Presentation().save(str(path))

        result = extract_template_from_file(path)
        assert result.template.name == "Default"
        assert len(result.template.elements) == 6
        assert not result.is_partial

    def test_wrong_suffix(self, tmp_path):
        from src.pptx_engine.template_extractor import extract_template_from_file

        path = tmp_path / "notes.txt"
        path.write_text("hello")
        with pytest.raises(ValueError):
            extract_template_from_file(path)

    def test_missing_file(self, tmp_path):
        from src.pptx_engine.template_extractor import extract_template_from_file

        with pytest.raises(FileNotFoundError):
            extract_template_from_file(tmp_path / "missing.pptx")
