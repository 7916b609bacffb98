# File: tests/test_report.py
import json

import pytest

from link_scout.errors import OutputError
from link_scout.report import format_url, render_json, render_text, write_output
from link_scout.utils import has_file_extension, read_url_list, remove_duplicates

URLS = ["https://a.com/", "https://a.com/app.js", "https://a.com/docs"]


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://a.com", False),
        ("https://a.com/", False),
        ("https://a.com/page", False),
        ("https://a.com/app.js", True),
        ("https://a.com/img/logo.PNG?v=3", True),
        ("https://a.com/mirror/site.com", False),
        ("https://a.com/feeds/planet.org", False),
        ("https://a.com/archive.tar.gz", True),
    ],
)
def test_has_file_extension(url, expected):
    assert has_file_extension(url) is expected


def test_format_url_colors():
    assert format_url("https://a.com/app.js").startswith("\x1b[32m")
    assert format_url("https://a.com/docs").startswith("\x1b[34m")


def test_render_json(tmp_path):
    out = render_json(URLS, tmp_path / "nested" / "result.json")
    text = out.read_text(encoding="utf-8")
    assert json.loads(text) == {"urls": URLS}
    assert '\n  "urls": [\n    "https://a.com/",' in text


def test_render_text(tmp_path):
    out = render_text(URLS, tmp_path / "result.txt")
    assert out.read_text(encoding="utf-8") == "".join(u + "\n" for u in URLS)


def test_write_output_picks_format(tmp_path):
    write_output(URLS, tmp_path / "r.json")
    write_output(URLS, tmp_path / "r.txt")
    assert json.loads((tmp_path / "r.json").read_text())["urls"] == URLS
    assert (tmp_path / "r.txt").read_text().splitlines() == URLS


def test_write_output_to_terminal(capsys):
    assert write_output(URLS, None) is None
    assert capsys.readouterr().out.splitlines() == URLS


def test_write_failure_raises_output_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    with pytest.raises(OutputError):
        render_text(URLS, blocker / "out.txt")
    with pytest.raises(OutputError):
        render_json(URLS, blocker / "out.json")


def test_read_url_list(tmp_path):
    listing = tmp_path / "urls.txt"
    listing.write_text("https://a.com/\n\n   \n  https://b.com/x.js  \n", encoding="utf-8")
    assert read_url_list(listing) == ["https://a.com/", "https://b.com/x.js"]


def test_remove_duplicates_keeps_order():
    assert remove_duplicates(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
