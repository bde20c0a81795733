import os
from typing import Iterator, Optional
from ftsearch import schemas
from ftsearch.core import config
from ftsearch.utils import logger


def _list_files(file_dir: str, extension: str) -> list[str]:
    if not file_dir or not os.path.isdir(file_dir):
        if file_dir:
            logger.warning(f"Corpus directory '{file_dir}' does not exist.")
        return []

    paths: list[str] = []
    for root, dirs, files in os.walk(file_dir):
        dirs.sort()
        for name in sorted(files):
            if name.endswith(extension):
                paths.append(os.path.join(root, name))
    return paths


def parse_line(
    line: str, separator: str = config.RECORD_SEPARATOR
) -> Optional[schemas.IngestionRecord]:
    """Parses `..._!_<text>_!_<hint>`; lines with fewer than three fields are skipped."""
    fields = line.rstrip("\r\n").split(separator)
    if len(fields) <= 2:
        return None
    return schemas.IngestionRecord(text=fields[-2], hint=fields[-1])


def iter_corpus(
    file_paths: Optional[list[str]] = None,
    file_dir: str = "",
    separator: str = config.RECORD_SEPARATOR,
    extension: str = config.CORPUS_FILE_EXT,
) -> Iterator[schemas.IngestionRecord]:
    paths = list(file_paths or []) + _list_files(file_dir, extension)

    for path in paths:
        try:
            with open(path, "r", encoding="utf-8") as f:
                lines = f.read().split("\n")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading corpus file {path}: {e}")
            continue

        logger.info(f"Reading corpus file {path} ({len(lines)} lines)")
        for line in lines:
            record = parse_line(line, separator=separator)
            if record is not None:
                yield record
