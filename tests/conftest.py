"""Shared fixtures: in-memory presentation archives with hand-written XML parts."""

import io
import zipfile

import pytest

NSDECL = (
    'xmlns:a="http://schemas.openxmlformats.org/drawingml/2006/main" '
    'xmlns:p="http://schemas.openxmlformats.org/presentationml/2006/main" '
    'xmlns:r="http://schemas.openxmlformats.org/officeDocument/2006/relationships"'
)

THEME_XML = f"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<a:theme {NSDECL} name="Test">
  <a:themeElements>
    <a:clrScheme name="Test">
      <a:dk1><a:sysClr val="windowText" lastClr="000000"/></a:dk1>
      <a:lt1><a:sysClr val="window" lastClr="FFFFFF"/></a:lt1>
      <a:dk2><a:srgbClr val="1F497D"/></a:dk2>
      <a:lt2><a:srgbClr val="EEECE1"/></a:lt2>
      <a:accent1><a:srgbClr val="4F81BD"/></a:accent1>
      <a:accent2><a:srgbClr val="C0504D"/></a:accent2>
    </a:clrScheme>
    <a:fontScheme name="Test">
      <a:majorFont><a:latin typeface="Georgia"/><a:ea typeface=""/></a:majorFont>
      <a:minorFont><a:latin typeface="+mn-lt"/><a:ea typeface="Malgun Gothic"/></a:minorFont>
    </a:fontScheme>
  </a:themeElements>
</a:theme>"""


def placeholder_sp(ph_type: str | None, rpr: str = "", lst_style: str = "") -> str:
    """A placeholder shape; ``rpr`` goes on the first run, ``lst_style`` into a:lstStyle."""
    ph = f'<p:ph type="{ph_type}"/>' if ph_type else '<p:ph idx="1"/>'
    return f"""
    <p:sp>
      <p:nvSpPr><p:cNvPr id="2" name="Shape"/><p:cNvSpPr/><p:nvPr>{ph}</p:nvPr></p:nvSpPr>
      <p:spPr/>
      <p:txBody>
        <a:bodyPr/>
        <a:lstStyle>{lst_style}</a:lstStyle>
        <a:p>{f'<a:r>{rpr}<a:t>Text</a:t></a:r>' if rpr else ''}</a:p>
      </p:txBody>
    </p:sp>"""


def slide_doc(root: str, shapes: str = "", background: str = "", extra: str = "") -> str:
    """A master (``root="p:sldMaster"``) or layout (``root="p:sldLayout"``) document."""
    return f"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<{root} {NSDECL}>
  <p:cSld>
    {background}
    <p:spTree>
      <p:nvGrpSpPr><p:cNvPr id="1" name=""/><p:cNvGrpSpPr/><p:nvPr/></p:nvGrpSpPr>
      <p:grpSpPr/>
      {shapes}
    </p:spTree>
  </p:cSld>
  {extra}
</{root}>"""


def solid_background(color_xml: str) -> str:
    return f"<p:bg><p:bgPr><a:solidFill>{color_xml}</a:solidFill><a:effectLst/></p:bgPr></p:bg>"


def make_archive(entries: dict[str, str | bytes]) -> bytes:
    """Zip the given entry name -> content mapping into bytes."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as zf:
        for name, content in entries.items():
            zf.writestr(name, content)
    return buffer.getvalue()


MASTER_ENTRY = "ppt/slideMasters/slideMaster1.xml"
THEME_ENTRY = "ppt/theme/theme1.xml"


def layout_entry(index: int) -> str:
    return f"ppt/slideLayouts/slideLayout{index}.xml"


@pytest.fixture
def theme_xml() -> str:
    return THEME_XML


@pytest.fixture
def full_archive() -> bytes:
    """Theme + master (title/body placeholders, dark background) + two layouts."""
    master = slide_doc(
        "p:sldMaster",
        shapes=(
            placeholder_sp(
                "title",
                lst_style=(
                    '<a:lvl1pPr><a:defRPr sz="4400" b="1">'
                    '<a:solidFill><a:schemeClr val="tx1"/></a:solidFill>'
                    '<a:latin typeface="+mj-lt"/></a:defRPr></a:lvl1pPr>'
                ),
            )
            + placeholder_sp(
                "body",
                lst_style=(
                    '<a:lvl1pPr><a:defRPr sz="2000">'
                    '<a:solidFill><a:schemeClr val="accent1"><a:lumMod val="75000"/></a:schemeClr></a:solidFill>'
                    '</a:defRPr></a:lvl1pPr>'
                ),
            )
        ),
        background=solid_background('<a:srgbClr val="112233"/>'),
    )
    layout1 = slide_doc(
        "p:sldLayout",
        shapes=(
            placeholder_sp("title", rpr='<a:rPr lang="en-US" sz="3600"/>')
            + placeholder_sp("subTitle", rpr='<a:rPr lang="en-US" sz="1800"/>')
        ),
        background=solid_background('<a:srgbClr val="ABCDEF"/>'),
    )
    layout3 = slide_doc(
        "p:sldLayout",
        shapes=placeholder_sp(
            "ftr",
            rpr='<a:rPr lang="en-US" sz="1000"><a:solidFill><a:srgbClr val="777777"/></a:solidFill></a:rPr>',
        ),
    )
    return make_archive({
        THEME_ENTRY: THEME_XML,
        MASTER_ENTRY: master,
        layout_entry(1): layout1,
        layout_entry(3): layout3,
    })


@pytest.fixture
def empty_archive() -> bytes:
    return make_archive({"[Content_Types].xml": "<Types/>"})
