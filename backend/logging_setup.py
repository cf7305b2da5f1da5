"""Process-wide logging configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union


def setup_logging(level: str = "INFO", log_dir: Optional[Union[str, Path]] = None) -> None:
    """Configure the root logger once for the API process or a CLI run.

    Always logs to stderr; additionally writes ``app.log`` inside *log_dir*
    when one is given.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path / "app.log", encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        handlers=handlers,
        force=True,
    )
