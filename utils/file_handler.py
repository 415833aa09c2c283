import json
from pathlib import Path
from typing import Any, List


def read_json(path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def read_words(path) -> List[str]:
    """Whitespace-separated word list; empty list when the file is absent."""
    p = Path(path)
    if not p.exists():
        return []
    text = p.read_text(encoding="utf-8").replace("\r\n", "\n")
    return [w for w in text.split() if w]
