"""Line-oriented text codec for the database file.

Each entry is written on its own line::

    #-#<key>\t<value>\n
"""

from typing import Iterable, Mapping

KEY_PREFIX = "#-#"
# Reserved for future format revisions; never emitted by ``encode``.
VALUE_PREFIX = "#$#"
DESCRIPTION_PREFIX = "#&#"
SEPARATOR = "\t"


def encode_entry(key: str, value: str) -> str:
    """Encode a single entry, including its trailing newline."""
    return f"{KEY_PREFIX}{key}{SEPARATOR}{value}\n"


def encode(entries: Mapping[str, str] | Iterable[tuple[str, str]]) -> str:
    """Encode entries as text. Emission order follows iteration order."""
    pairs = entries.items() if isinstance(entries, Mapping) else entries
    return "".join(encode_entry(key, value) for key, value in pairs)


def decode(text: str) -> dict[str, str]:
    """Decode text into a key -> value mapping.

    Lines without a separator are dropped. A repeated key keeps the
    value from its last line.
    """
    entries: dict[str, str] = {}
    for line in text.split("\n"):
        raw_key, sep, value = line.removesuffix("\r").partition(SEPARATOR)
        if not sep:
            continue
        entries[raw_key.replace(KEY_PREFIX, "", 1)] = value
    return entries
