from pathlib import Path

from loguru import logger


def write_output(path, html: str) -> Path:
    """
    writes the page to ``path``, creating missing parent directories
    and replacing any file already there
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")
    logger.debug("Wrote {} bytes to {}", len(html.encode("utf-8")), path)
    return path
