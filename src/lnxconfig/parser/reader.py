from __future__ import annotations

import io
from pathlib import Path
from typing import Iterator

from lnxconfig.core.errors import ConfigReadError

NumberedLine = tuple[int, str]


def iter_file_lines(path: Path | str) -> Iterator[NumberedLine]:
    """Yield ``(lineno, text)`` pairs from an lnx file, numbering from 1.

    Only the newline terminator is removed; comments and trailing whitespace
    are left for the classifier. The file is closed when the iterator is
    exhausted or discarded.
    """
    path = Path(path)
    try:
        f = path.open("r", encoding="utf-8")
    except OSError as exc:
        raise ConfigReadError(path, exc.strerror or str(exc)) from exc
    with f:
        try:
            for lineno, line in enumerate(f, start=1):
                yield lineno, line.rstrip("\r\n")
        except UnicodeDecodeError as exc:
            raise ConfigReadError(path, f"not valid UTF-8 text ({exc.reason})") from exc
        except OSError as exc:
            raise ConfigReadError(path, exc.strerror or str(exc)) from exc


def iter_text_lines(text: str) -> Iterator[NumberedLine]:
    # same newline handling as a file opened in text mode
    for lineno, line in enumerate(io.StringIO(text, newline=None), start=1):
        yield lineno, line.rstrip("\r\n")
