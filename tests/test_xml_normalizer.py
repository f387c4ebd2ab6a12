"""Tests for the XML gradient normalizer."""
import pytest

from conftest import SAMPLE_XML
from gradient_bin_viewer.xml_normalizer import parse_time_attribute, parse_xml_document


def test_full_document():
    doc = parse_xml_document(SAMPLE_XML)

    assert doc is not None
    assert doc.color_sequence == [
        {"time": 0.0, "color": "#000000"},
        {"time": 0.5, "color": "#888888"},
        {"time": 1.0, "color": "#FFFFFF"},
    ]
    assert doc.props_colors == [
        {"name": "border", "color": "#445566"},
        {"name": "shadow", "color": "#112233"},
    ]
    assert doc.first_color == "#000000"
    assert doc.last_color == "#FFFFFF"


def test_keypoints_are_reordered_by_time():
    doc = parse_xml_document(
        '<root><colorSequence>'
        '<keypoint time="1" color="#111"/><keypoint time="0" color="#222"/>'
        '</colorSequence></root>'
    )
    assert [kp["time"] for kp in doc.color_sequence] == [0.0, 1.0]
    assert [kp["color"] for kp in doc.color_sequence] == ["#222", "#111"]


def test_missing_attributes_get_defaults():
    doc = parse_xml_document(
        '<root>'
        '<colorSequence><keypoint/><keypoint time="x" color=""/></colorSequence>'
        '<propsColors><prop>   </prop><prop name="">#123</prop></propsColors>'
        '</root>'
    )
    assert doc.color_sequence == [
        {"time": 0.0, "color": "#FFF"},
        {"time": 0.0, "color": "#FFF"},
    ]
    assert doc.props_colors == [
        {"name": "??", "color": "#FFF"},
        {"name": "??", "color": "#123"},
    ]


def test_missing_sections_yield_empty_document():
    doc = parse_xml_document("<root></root>")
    assert doc.to_dict() == {
        "colorSequence": [],
        "propsColors": [],
        "firstColor": None,
        "lastColor": None,
    }


def test_blank_first_and_last_color_become_none():
    doc = parse_xml_document("<root><firstColor>  </firstColor><lastColor/></root>")
    assert doc.first_color is None
    assert doc.last_color is None


def test_only_direct_children_are_collected():
    doc = parse_xml_document(
        '<root><colorSequence>'
        '<group><keypoint time="0.3" color="#nested"/></group>'
        '<keypoint time="0.2" color="#direct"/>'
        '</colorSequence>'
        '<keypoint time="0.1" color="#stray"/>'
        '</root>'
    )
    assert doc.color_sequence == [{"time": 0.2, "color": "#direct"}]


def test_colors_are_not_validated():
    doc = parse_xml_document('<root><colorSequence><keypoint time="0" color="rebeccapurple"/></colorSequence></root>')
    assert doc.color_sequence[0]["color"] == "rebeccapurple"


@pytest.mark.parametrize(
    "payload",
    [
        "<root><colorSequence></root>",
        "<root>",
        "<root><a></b></root>",
    ],
)
def test_malformed_xml_returns_none(payload):
    assert parse_xml_document(payload) is None


def test_malformed_xml_is_logged(caplog):
    with caplog.at_level("WARNING"):
        parse_xml_document("<root><unclosed></root>")
    assert "XML parse error" in caplog.text


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 0.0),
        ("", 0.0),
        ("0.25", 0.25),
        ("  .5", 0.5),
        ("0.75s", 0.75),
        ("1e-1", 0.1),
        ("-0", 0.0),
        ("abc", 0.0),
        ("Infinity", float("inf")),
    ],
)
def test_parse_time_attribute(raw, expected):
    assert parse_time_attribute(raw) == expected
