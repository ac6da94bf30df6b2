import logging
import os
import tempfile
from typing import List

import graphviz
from graphviz.backend import dot_command, execute

from . import config as cfg
from .errors import RenderFailure

log = logging.getLogger(__name__)


def _decode(*streams) -> str:
    parts = []
    for stream in streams:
        if not stream:
            continue
        if isinstance(stream, bytes):
            stream = stream.decode("utf-8", errors="replace")
        parts.append(stream.rstrip("\n"))
    return "\n".join(parts)


class Renderer:
    """Renderer hands DOT source to the GraphViz ``dot`` executable."""

    def __init__(self, path: str = ""):
        """Renderer runs ``dot`` to produce images.

        :param path: Directory containing the ``dot`` executable. Empty to
            look it up on the PATH.
        """
        self.path = path

    def export(self, source: str, format: str, filename: str) -> str:
        """Render DOT ``source`` into ``filename``.

        The source is written to a temporary file which is always removed
        again, whether rendering succeeded or not. ``dot`` runs in the
        current working directory, so relative paths in the source (images,
        shape files) resolve as they do for the caller.

        :param source: DOT source text.
        :param format: Output format, e.g. "png", "pdf" or "png:cairo".
        :param filename: Path of the file to write.
        :return: The written filename.
        :raises RenderFailure: If the format is unknown, ``dot`` cannot be
            found or exits with a non-zero status.
        """
        fd, tmpfile = tempfile.mkstemp(prefix=cfg.TMP_PREFIX)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(source)
            self._run(self.command(format, filename, tmpfile))
        finally:
            os.remove(tmpfile)
        return filename

    def command(self, format: str, filename: str, tmpfile: str) -> List[str]:
        """Builds the ``dot`` command line.

        :raises RenderFailure: If ``format`` (or its renderer and formatter
            part after a colon) is unknown to GraphViz.
        """
        format, _, rest = format.partition(":")
        renderer, _, formatter = rest.partition(":")
        try:
            cmd = dot_command.command(cfg.DOT_COMMAND, format, renderer=renderer or None, formatter=formatter or None)
        except ValueError as e:
            raise RenderFailure(str(e)) from e

        cmd = [os.fspath(arg) for arg in cmd]
        if self.path:
            cmd[0] = os.path.join(self.path, cfg.DOT_COMMAND)
        return cmd + ["-o", filename, tmpfile]

    def _run(self, cmd: List[str]) -> None:
        log.debug("run %r", cmd)
        try:
            execute.run_check(cmd, capture_output=True, quiet=True)
        except graphviz.CalledProcessError as e:
            raise RenderFailure(_decode(e.stdout, e.stderr)) from e
        except graphviz.ExecutableNotFound as e:
            raise RenderFailure(str(e)) from e
        except OSError as e:
            raise RenderFailure(str(e)) from e
