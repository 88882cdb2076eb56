"""Export functions for generation results."""

import json
from pathlib import Path

from .models import GenerationResult


def export_result_json(result: GenerationResult, output_path: Path | str) -> None:
    """Export a generation result to a JSON file.

    Args:
        result: GenerationResult to export
        output_path: Path to output JSON file
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with open(output, "w", encoding="utf-8") as f:
        json.dump(result.to_dict(), f, ensure_ascii=False, indent=2)
