"""Serialization of the configuration tree.

The configuration is written once, after every package is processed, via a
temporary sibling file that replaces the destination. Readers of the output
path see either the previous file or the complete new one.

Example:
    >>> import tempfile
    >>> from pathlib import Path
    >>> from docsconfig.models.module import DocsConfig, ModuleEntry, ModuleGroup
    >>> from docsconfig.writer import read_config, write_config
    >>> config = DocsConfig(modules=[ModuleGroup(group="Joins", modules=[ModuleEntry(name="tag")])])
    >>> with tempfile.TemporaryDirectory() as tmpdir:
    ...     path = write_config(config, Path(tmpdir) / "assets" / "config.json")
    ...     read_config(path) == config
    True
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
import uuid
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from docsconfig.models.module import DocsConfig

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def atomic_write(path: Path) -> Iterator[TextIO]:
    """Write to a temporary file and atomically replace the destination."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(f"{path.name}.tmp.{uuid.uuid4().hex}")
    try:
        with tmp.open("w", encoding="utf-8") as handle:
            yield handle
            handle.flush()
            os.fsync(handle.fileno())
        tmp.replace(path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


def dumps_config(config: DocsConfig) -> str:
    """Render the configuration as indented JSON with a trailing newline."""
    return json.dumps(config.to_dict(), indent=2, ensure_ascii=False) + "\n"


def write_config(config: DocsConfig, path: Path) -> Path:
    """Write the configuration file.

    Args:
        config: Completed configuration tree.
        path: Destination path; parent directories are created.

    Returns:
        The path written.
    """
    text = dumps_config(config)
    with atomic_write(path) as handle:
        handle.write(text)
    logger.info(f"Saved Config: {path}")
    return path


def read_config(path: Path) -> DocsConfig:
    """Read a configuration file back into the model tree."""
    data = json.loads(path.read_text(encoding="utf-8"))
    return DocsConfig.model_validate(data)
