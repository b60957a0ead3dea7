import pytest

from shotargs.utils import file_tools


@pytest.mark.parametrize(
    "name, expected",
    [
        ("shot.png", "shot-thumb.png"),
        ("shotnoext", "shotnoext-thumb"),
        ("archive.tar.gz", "archive.tar-thumb.gz"),
        ("pics.d/shot", "pics.d/shot-thumb"),
        (".shot", "-thumb.shot"),
        ("dir/.shot", "dir/-thumb.shot"),
    ],
)
def test_name_thumbnail(name, expected):
    assert file_tools.name_thumbnail(name) == expected


def test_output_format_known_extensions():
    assert file_tools.output_format("shot.png") == "PNG"
    assert file_tools.output_format("shot.JPG") == "JPEG"


def test_output_format_unknown_or_missing_extension():
    assert file_tools.output_format("shot") is None
    assert file_tools.output_format("shot.notanimage") is None
