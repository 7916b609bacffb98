"""link_scout.report.text_report: one URL per line, colored on the terminal."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, Union

import click

from link_scout.errors import OutputError
from link_scout.utils import has_file_extension


def format_url(url: str) -> str:
    """Green for URLs pointing at a file, blue for everything else."""
    return click.style(url, fg="green" if has_file_extension(url) else "blue")


def echo_urls(urls: Sequence[str]) -> None:
    for url in urls:
        click.echo(format_url(url))


def render_text(urls: Sequence[str], output_path: Union[str, Path]) -> Path:
    """Write *urls* to *output_path*, one per line, without colors."""
    output = Path(output_path)
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text("".join(f"{url}\n" for url in urls), encoding="utf-8")
    except OSError as exc:
        raise OutputError(str(output), exc) from exc
    return output
