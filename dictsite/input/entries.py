"""Load dictionary entries from a cedict.json file.

The input is a JSON array of objects:

    [{"traditional": "你好", "simplified": "你好", "pinyin": "nǐ hǎo",
      "definitions": ["hello"]}, ...]

`simplified` is the page key. Entries come back in array order.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

from dictsite.common.errors import DataSourceError, ParseError
from dictsite.common.utils import (
    _clean_value,
    count_occurrences,
    simplified_to_traditional,
    unsafe_key_reason,
)


@dataclass(frozen=True)
class Entry:
    """One dictionary entry."""
    simplified: str
    traditional: str
    pinyin: str
    definitions: Tuple[str, ...] = ()

    @property
    def primary_key(self) -> str:
        """Filename stem for this entry's page."""
        return self.simplified

    @property
    def secondary_key(self) -> str:
        return self.traditional

    @property
    def annotation(self) -> str:
        return self.pinyin


def _check_encodable(value: str, name: str, index: int) -> str:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ParseError(f"'{name}' is not valid Unicode text: {e.reason}", index) from e
    return value


def _string_field(obj: Dict[str, Any], name: str, index: int, default: str = "") -> str:
    value = obj.get(name, default)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ParseError(f"'{name}' must be a string, got {type(value).__name__}", index)
    return _check_encodable(_clean_value(value), name, index)


def _definitions_field(obj: Dict[str, Any], index: int) -> Tuple[str, ...]:
    value = obj.get("definitions")
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ParseError(f"'definitions' must be a list, got {type(value).__name__}", index)
    defs: List[str] = []
    for d in value:
        if not isinstance(d, str):
            raise ParseError(f"definitions must be strings, got {type(d).__name__}", index)
        defs.append(_check_encodable(_clean_value(d), "definitions", index))
    return tuple(defs)


def parse_entry(obj: Any, index: int) -> Entry:
    """Build an Entry from one decoded JSON object.

    Missing optional fields default the way the dictionary data allows:
    traditional is derived from simplified, pinyin is empty and
    definitions is an empty tuple.
    """
    if not isinstance(obj, dict):
        raise ParseError(f"expected an object, got {type(obj).__name__}", index)

    simplified = _string_field(obj, "simplified", index)
    reason = unsafe_key_reason(simplified)
    if reason:
        raise ParseError(f"invalid 'simplified' ({reason})", index)

    if obj.get("traditional") is None:
        traditional = simplified_to_traditional(simplified)
    else:
        traditional = _string_field(obj, "traditional", index)

    return Entry(
        simplified=simplified,
        traditional=traditional,
        pinyin=_string_field(obj, "pinyin", index),
        definitions=_definitions_field(obj, index),
    )


def parse_entries(text: str) -> List[Entry]:
    """Parse the full text of a cedict.json file."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise ParseError(f"expected a JSON array, got {type(data).__name__}")
    return [parse_entry(obj, idx) for idx, obj in enumerate(data)]


def load_entries(path: Path) -> List[Entry]:
    """Read and parse a cedict.json file.

    Raises DataSourceError if the file can't be read and ParseError if its
    content isn't UTF-8 JSON holding an array of entries.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise DataSourceError(f"cannot read {path}: {e}") from e
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"{path} is not UTF-8 text: {e}") from e
    return parse_entries(text)


def find_duplicate_keys(entries: Sequence[Entry]) -> Dict[str, int]:
    """Return {key: count} for page keys used by more than one entry."""
    counts = count_occurrences(e.primary_key for e in entries)
    return {key: n for key, n in counts.items() if n > 1}
