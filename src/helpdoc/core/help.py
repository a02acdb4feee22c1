"""Help document discovery and loading from bundled resource directories"""

import logging
from pathlib import Path
from typing import Iterable


logger = logging.getLogger(__name__)

PLACEHOLDER_HELP = "# Help\n\n{name} not bundled."


def find_help_file(name: str, search_dirs: Iterable[str | Path]) -> Path | None:
    """Return the first search_dirs/name that exists, else the first match found recursively."""
    dirs = [Path(d) for d in search_dirs]
    for d in dirs:
        candidate = d / name
        if candidate.is_file():
            return candidate
    for d in dirs:
        if not d.is_dir():
            continue
        match = next((p for p in sorted(d.rglob(name)) if p.is_file()), None)
        if match is not None:
            return match
    return None


def locate_help(name: str, search_dirs: Iterable[str | Path]) -> tuple[str, Path | None]:
    """Return the help document text with the file it was read from.

    The path is None when no file is bundled and the text is the placeholder
    document.
    """
    dirs = list(search_dirs)
    path = find_help_file(name, dirs)
    if path is None:
        logger.warning("Help file %s not found in %s", name, [str(d) for d in dirs])
        return PLACEHOLDER_HELP.format(name=name), None
    logger.info("Loading help from %s", path)
    return path.read_text(encoding='utf-8', errors='replace'), path


def load_help(name: str, search_dirs: Iterable[str | Path]) -> str:
    """Return the help document text, or a placeholder document when none is bundled."""
    text, _ = locate_help(name, search_dirs)
    return text
