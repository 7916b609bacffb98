# link_scout/report/json_report.py

"""
JSON output for LinkScout: ``{"urls": [...]}`` with a two-space indent.
"""
import json
from pathlib import Path
from typing import Sequence

from link_scout.errors import OutputError


def render_json(urls: Sequence[str], output_path: Path | str) -> Path:
    """
    Save *urls* as JSON at *output_path*.

    :param urls: deduplicated URL list
    :param output_path: path of the JSON file
    :return: Path of the saved file
    :raises OutputError: if the file cannot be written
    """
    output = Path(output_path)
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        with output.open('w', encoding='utf-8') as f:
            json.dump({'urls': list(urls)}, f, ensure_ascii=False, indent=2)
    except OSError as exc:
        raise OutputError(str(output), exc) from exc

    return output
