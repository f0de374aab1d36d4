"""
Source writer: renders the declaration list back to text and replaces the
original file.
"""
import logging
import os
import tempfile
from typing import Optional

from enumgen.core.error_handling import WriteError
from enumgen.core.formatting.go_formatter import GoFormatter
from enumgen.models.declarations import SourceFile

logger = logging.getLogger(__name__)


def render_source(source_file: SourceFile, formatter: Optional[GoFormatter] = None) -> str:
    """
    Render ``source_file`` to Go source text.

    Parsed declarations are emitted verbatim with their leading text;
    synthesized ones are rendered by ``formatter`` using the file's line
    ending.
    """
    formatter = formatter or GoFormatter()
    newline = source_file.newline
    parts = []
    for declaration in source_file.declarations:
        parts.append(declaration.leading)
        if declaration.is_synthesized:
            parts.append(formatter.format_declaration(declaration).replace('\n', newline))
        else:
            parts.append(declaration.source)
    trailing = source_file.trailing
    if not trailing and source_file.declarations and source_file.declarations[-1].is_synthesized:
        trailing = newline
    parts.append(trailing)
    return ''.join(parts)


def write_source(path: str, text: str, atomic: bool = True, encoding: str = 'utf8') -> None:
    """
    Replace the contents of ``path`` with ``text``.

    With ``atomic`` the text goes to a temporary file in the same directory
    which is then moved over ``path``; otherwise the file is truncated and
    rewritten in place.

    Raises:
        WriteError: If the destination cannot be written
    """
    if atomic:
        _write_atomic(path, text, encoding)
    else:
        try:
            with open(path, 'w', encoding=encoding, newline='') as fh:
                fh.write(text)
        except OSError as e:
            raise WriteError(path, str(e)) from e
    logger.debug(f"Wrote {len(text)} characters to {path}")


def _write_atomic(path: str, text: str, encoding: str) -> None:
    directory = os.path.dirname(os.path.abspath(path))
    try:
        fd, tmp_path = tempfile.mkstemp(prefix='.enumgen-', suffix='.tmp', dir=directory)
    except OSError as e:
        raise WriteError(path, str(e)) from e
    try:
        with os.fdopen(fd, 'w', encoding=encoding, newline='') as fh:
            fh.write(text)
        if os.path.exists(path):
            os.chmod(tmp_path, os.stat(path).st_mode & 0o7777)
        os.replace(tmp_path, path)
    except OSError as e:
        try:
            os.remove(tmp_path)
        except OSError:
            logger.warning(f"Could not remove temporary file {tmp_path}")
        raise WriteError(path, str(e)) from e
