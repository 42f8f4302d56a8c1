"""Save a workspace to a YAML file on disk."""

import logging
import os
import tempfile
from pathlib import Path

import yaml

from taskorium.model.node import Node
from taskorium.model.snapshot import workspace_to_dict

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


def dump_workspace(workspace: Node) -> str:
    """Serialize a workspace to YAML text."""
    data = {"version": FORMAT_VERSION, **workspace_to_dict(workspace)}
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)


def save_workspace(workspace: Node, path: str | Path) -> Path:
    """Write the workspace to path, replacing the old file in one step.

    The text goes to a temporary file next to path first, so a crash
    mid-write leaves the previous save intact.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    text = dump_workspace(workspace)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    logger.debug("saved workspace to %s (%d bytes)", path, len(text))
    return path
