"""Checks on the folder a documentation generator writes into.

A conversion produces a fixed set of Markdown documents (see
``patterns.GENERATED_FILES``) plus, when definitions are separated, a
``definitions`` sub-folder with one document per definition.
"""

import logging
import shutil
from collections.abc import Iterable
from pathlib import Path

from md_verify import config
from md_verify.patterns import GENERATED_COUNT_MESSAGE, GENERATED_MISSING_MESSAGE, MISSING_TEXT_MESSAGE
from md_verify.verify import VerificationError

logger = logging.getLogger(__name__)


class GeneratedFilesError(VerificationError):
    """Raised when an output folder does not hold the expected entries."""


class MissingTextError(VerificationError):
    """Raised when a generated document lacks an expected snippet."""


def clean_output_directory(path: Path) -> None:
    """Delete a previously generated output folder or file; a missing path is ignored."""
    path = Path(path)
    if path.exists():
        logger.info("Removing generated output %s", path)
    if path.is_file() or path.is_symlink():
        path.unlink(missing_ok=True)
    else:
        shutil.rmtree(path, ignore_errors=True)


def verify_generated_files(output_dir: Path, expected: Iterable[str], count: int | None = None) -> list[str]:
    """Check that *output_dir* contains every name in *expected*.

    When *count* is given the folder must also hold exactly that many
    entries.  Returns the sorted folder listing.
    """
    output_dir = Path(output_dir)
    names = sorted(entry.name for entry in output_dir.iterdir())
    logger.debug("Output folder %s: %s", output_dir, names)

    if count is not None and len(names) != count:
        raise GeneratedFilesError(
            GENERATED_COUNT_MESSAGE.format(folder=output_dir, actual=len(names), expected=count, names=names)
        )

    missing = sorted(set(expected) - set(names))
    if missing:
        raise GeneratedFilesError(GENERATED_MISSING_MESSAGE.format(folder=output_dir, missing=missing))
    return names


def verify_markdown_contains_text(doc: Path, text: str) -> None:
    """Check that the generated document *doc* contains *text* somewhere in its body."""
    with open(doc, "r", encoding=config.ENCODING) as fopen:
        body = fopen.read()
    if text not in body:
        raise MissingTextError(MISSING_TEXT_MESSAGE.format(doc=doc, text=text))
    logger.debug("Found %r in %s", text, doc)
