"""Runner credential persistence (JSON-backed ``.runner`` file).

After a successful registration the instance hands back the runner id, uuid
and token. They are written here so the runner daemon can authenticate later.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from runner_register.models import RegisteredRunner

logger = logging.getLogger("runner_register.runner_file")


class RunnerFile:
    """Reads and writes a registered runner record.

    Args:
        path: Path to the JSON file (conventionally ``.runner``).
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def load(self) -> RegisteredRunner | None:
        """Load the stored runner, or None if absent or unreadable."""
        if not self._path.exists():
            return None
        try:
            raw = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.exception("Failed to read runner file %s", self._path)
            return None
        if not isinstance(raw, dict):
            logger.warning("Runner file %s does not hold a JSON object", self._path)
            return None
        try:
            return RegisteredRunner.model_validate(raw)
        except ValidationError:
            logger.exception("Runner file %s has an unexpected shape", self._path)
            return None

    def save(self, runner: RegisteredRunner) -> None:
        """Write ``runner`` to disk. I/O errors propagate."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        data = json.dumps(runner.model_dump(), indent=2, sort_keys=True)
        self._path.write_text(data + "\n", "utf-8")
        logger.debug("Saved runner file %s", self._path)
