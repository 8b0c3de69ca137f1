"""Tests for theme parsing and symbolic color/font resolution."""


class TestParseTheme:
    def test_color_scheme(self, theme_xml):
        from src.pptx_engine.theme_resolver import parse_theme
        from src.pptx_engine.xml_query import parse_xml

        theme = parse_theme(parse_xml(theme_xml.encode()))
        assert theme.color_scheme["dk1"] == "#000000"
        assert theme.color_scheme["lt1"] == "#FFFFFF"
        assert theme.color_scheme["accent1"] == "#4F81BD"
        # Slots missing from the document stay absent
        assert "accent3" not in theme.color_scheme
        assert "hlink" not in theme.color_scheme

    def test_fonts(self, theme_xml):
        from src.pptx_engine.theme_resolver import parse_theme
        from src.pptx_engine.xml_query import parse_xml

        theme = parse_theme(parse_xml(theme_xml.encode()))
        assert theme.major_font == "Georgia"
        # Latin typeface is a reference, so the east-Asian one is used
        assert theme.minor_font == "Malgun Gothic"

    def test_missing_theme_gives_empty_defaults(self):
        from src.pptx_engine.theme_resolver import DEFAULT_FONT, parse_theme

        theme = parse_theme(None)
        assert theme.color_scheme == {}
        assert theme.major_font == DEFAULT_FONT
        assert theme.minor_font == DEFAULT_FONT

    def test_theme_without_font_scheme(self):
        from src.pptx_engine.theme_resolver import DEFAULT_FONT, parse_theme
        from src.pptx_engine.xml_query import parse_xml

        doc = parse_xml(
            b'<a:theme xmlns:a="http://schemas.openxmlformats.org/drawingml/2006/main">'
            b'<a:themeElements><a:clrScheme name="x"><a:dk1><a:srgbClr val="222222"/></a:dk1>'
            b'</a:clrScheme></a:themeElements></a:theme>'
        )
        theme = parse_theme(doc)
        assert theme.color_scheme == {"dk1": "#222222"}
        assert theme.major_font == DEFAULT_FONT


class TestResolution:
    def _theme(self):
        from src.schemas.extraction import ThemeData

        return ThemeData(
            color_scheme={"dk1": "#111111", "lt1": "#EEEEEE", "accent1": "#4F81BD"},
            major_font="Georgia",
            minor_font="Calibri",
        )

    def test_direct_slot(self):
        from src.pptx_engine.theme_resolver import resolve_scheme_color

        assert resolve_scheme_color("accent1", self._theme()) == "#4F81BD"

    def test_aliases(self):
        from src.pptx_engine.theme_resolver import resolve_scheme_color

        theme = self._theme()
        assert resolve_scheme_color("tx1", theme) == "#111111"
        assert resolve_scheme_color("bg1", theme) == "#EEEEEE"
        # Alias target missing from the scheme
        assert resolve_scheme_color("tx2", theme) is None

    def test_unknown_slot(self):
        from src.pptx_engine.theme_resolver import resolve_scheme_color

        assert resolve_scheme_color("accent9", self._theme()) is None

    def test_resolve_font(self):
        from src.pptx_engine.theme_resolver import resolve_font

        theme = self._theme()
        assert resolve_font("+mj-lt", theme) == "Georgia"
        assert resolve_font("+mj-ea", theme) == "Georgia"
        assert resolve_font("+mn-lt", theme) == "Calibri"
        assert resolve_font("+mn-ea", theme) == "Calibri"
        assert resolve_font("Arial", theme) == "Arial"
