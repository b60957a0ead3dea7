import pytest

from shotargs.core import Configuration, LineMode, LineStyle, SelectionMode
from shotargs.core import suboptions
from shotargs.core.errors import ErrorKind, OptionError


def test_iter_suboptions_splits_names_and_values():
    pairs = list(suboptions.iter_suboptions("style=dash,width,color=#ff0000,"))
    assert pairs == [("style", "dash"), ("width", None), ("color", "#ff0000")]


def test_iter_suboptions_keeps_empty_token_in_the_middle():
    assert list(suboptions.iter_suboptions("a=1,,b=2")) == [("a", "1"), ("", None), ("b", "2")]


def test_parse_line_sets_style_width_and_opacity():
    config = Configuration()
    suboptions.parse_line(config, "style=dash,width=3,opacity=50")
    assert config.line_style is LineStyle.DASHED
    assert config.line_width == 3
    assert config.line_opacity == 50


def test_parse_line_color_and_mode():
    config = Configuration()
    suboptions.parse_line(config, "color=red,mode=edge")
    assert config.line_color == "red"
    assert config.line_mode is LineMode.EDGE


def test_parse_line_later_keys_win():
    config = Configuration()
    suboptions.parse_line(config, "width=2,style=dash,width=5,style=solid")
    assert config.line_width == 5
    assert config.line_style is LineStyle.SOLID


@pytest.mark.parametrize("text", ["width=9", "width=0", "width=-1"])
def test_parse_line_width_out_of_range_is_fatal(text):
    with pytest.raises(OptionError) as info:
        suboptions.parse_line(Configuration(), text)
    assert info.value.kind is ErrorKind.VALUE_OUT_OF_RANGE


def test_parse_line_opacity_is_not_range_checked():
    # Out-of-range opacity is passed through unchanged.
    config = Configuration()
    suboptions.parse_line(config, "opacity=250")
    assert config.line_opacity == 250


@pytest.mark.parametrize("text", ["style=", "width", "color="])
def test_parse_line_missing_value_names_the_key(text):
    with pytest.raises(OptionError) as info:
        suboptions.parse_line(Configuration(), text)
    assert info.value.kind is ErrorKind.MISSING_VALUE
    assert info.value.argument == text.split("=")[0]


@pytest.mark.parametrize("text", ["thickness=2", ",style=dash"])
def test_parse_line_unknown_key_is_fatal(text):
    with pytest.raises(OptionError) as info:
        suboptions.parse_line(Configuration(), text)
    assert info.value.kind is ErrorKind.UNKNOWN_TOKEN
    assert "No match found for token" in str(info.value)


@pytest.mark.parametrize("text", ["style=dotted", "mode=fancy"])
def test_parse_line_unknown_value_is_fatal(text):
    with pytest.raises(OptionError) as info:
        suboptions.parse_line(Configuration(), text)
    assert info.value.kind is ErrorKind.UNKNOWN_VALUE


def test_parse_selection_defaults_to_capture():
    config = Configuration()
    suboptions.parse_selection(config, None)
    assert config.select is SelectionMode.CAPTURE


@pytest.mark.parametrize(
    "value, expected",
    [("hide", SelectionMode.HIDE), ("hole", SelectionMode.HOLE), ("mode=capture", SelectionMode.CAPTURE), ("a=b=hole", SelectionMode.HOLE)],
)
def test_parse_selection_reads_suffix_after_last_equals(value, expected):
    config = Configuration()
    suboptions.parse_selection(config, value)
    assert config.select is expected


def test_parse_selection_unknown_mode_is_fatal():
    with pytest.raises(OptionError) as info:
        suboptions.parse_selection(Configuration(), "bogus")
    assert info.value.kind is ErrorKind.UNKNOWN_VALUE
    assert info.value.option == "select"
