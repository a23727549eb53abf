# 19.10.26

import os
import sys
import json
import logging
from typing import Dict, Mapping


# Internal utilities
from M3UJson.utils import config_manager
from M3UJson.source.utils.object import StreamRecord


# Variable
logger = logging.getLogger(__name__)
STDOUT = "-"


def streams_to_dict(streams: Mapping[str, StreamRecord]) -> Dict[str, dict]:
    return {identifier: record.to_dict() for identifier, record in streams.items()}


def dump_streams(streams: Mapping[str, StreamRecord], indent: int = None, ensure_ascii: bool = None) -> str:
    """Serialize the mapping to indented JSON, key4 omitted where empty."""
    if indent is None:
        indent = config_manager.config.get_int('OUTPUT', 'indent', default=2)
    if ensure_ascii is None:
        ensure_ascii = config_manager.config.get_bool('OUTPUT', 'ensure_ascii')

    return json.dumps(streams_to_dict(streams), indent=indent, ensure_ascii=ensure_ascii)


def write_streams(streams: Mapping[str, StreamRecord], path: str = None, indent: int = None) -> str:
    """
    Write the JSON document to path, or to stdout when path is '-'.

    Returns:
        str: The absolute destination path, or '-' for stdout.
    """
    path = path or config_manager.config.get('OUTPUT', 'path', default="output.json")
    payload = dump_streams(streams, indent=indent)

    if path == STDOUT:
        sys.stdout.write(payload + "\n")
        sys.stdout.flush()
        return STDOUT

    path = os.path.abspath(os.path.expanduser(path))
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(path, 'w', encoding='utf-8') as f:
        f.write(payload)

    logger.info(f"Wrote {len(streams)} stream(s) to {path}")
    return path
