"""link_scout.report: writers for the final URL list (terminal, text file, JSON)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

from link_scout.report.json_report import render_json
from link_scout.report.text_report import echo_urls, format_url, render_text


def write_output(urls: Sequence[str], output: Union[str, Path, None]) -> Optional[Path]:
    """
    Emit *urls* to *output*: JSON when the path ends in ``.json``, plain
    lines for any other path, colored lines on the terminal when *output*
    is ``None``. Returns the written path, if any.
    """
    if output is None or str(output) == "":
        echo_urls(urls)
        return None
    if str(output).endswith(".json"):
        return render_json(urls, output)
    return render_text(urls, output)


__all__ = ["echo_urls", "format_url", "render_json", "render_text", "write_output"]
