from pathlib import Path

import yaml
from loguru import logger

from menu_builder.errors import MenuFileNotFoundError, MenuParseError


def load_document(path):
    """
    reads the YAML menu source at ``path`` into plain dicts, lists and scalars
    """
    path = Path(path)
    if not path.exists():
        raise MenuFileNotFoundError(path)

    logger.debug("Loading menu document from {}", path)
    try:
        # bytes let PyYAML detect the encoding and report bad input as a YAMLError
        return yaml.safe_load(path.read_bytes())
    except yaml.YAMLError as exc:
        raise MenuParseError(str(exc)) from exc
    except OSError as exc:
        raise MenuParseError(f"Could not read {path}: {exc.strerror}") from exc
