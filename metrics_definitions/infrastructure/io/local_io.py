"""Local file I/O operations."""

import json
from pathlib import Path

import pandas as pd

from metrics_definitions.domain.types import JsonValue


class LocalIO:
    """Read and write JSON documents and CSV value frames on the local filesystem."""

    def __init__(self, base_dir: str | Path | None = None) -> None:
        """Initialize with an optional base directory for relative paths."""
        self.base_dir = Path(base_dir) if base_dir is not None else None

    def resolve(self, path: str | Path) -> Path:
        """Resolve path against the base directory."""
        path = Path(path)
        if self.base_dir is not None and not path.is_absolute():
            return self.base_dir / path
        return path

    def get_json(self, path: str | Path) -> dict[str, JsonValue]:
        """Read a JSON object from a file."""
        full_path = self.resolve(path)
        try:
            content = full_path.read_text(encoding="utf-8")
        except OSError as e:
            raise RuntimeError(f"Failed to read file {full_path}: {e}") from e
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise RuntimeError(f"Invalid JSON in {full_path}: {e}") from e
        if not isinstance(data, dict):
            raise RuntimeError(f"Expected a JSON object in {full_path}, got {type(data).__name__}")
        return data

    def get_lines(self, path: str | Path) -> list[str]:
        """Read non-empty lines from a text file."""
        full_path = self.resolve(path)
        try:
            content = full_path.read_text(encoding="utf-8")
        except OSError as e:
            raise RuntimeError(f"Failed to read file {full_path}: {e}") from e
        return [line for line in content.splitlines() if line.strip()]

    def put_text(self, path: str | Path, content: str) -> Path:
        """Write text to a file, creating parent directories."""
        full_path = self.resolve(path)
        try:
            full_path.parent.mkdir(parents=True, exist_ok=True)
            full_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise RuntimeError(f"Failed to write file {full_path}: {e}") from e
        return full_path

    def list_json(self, directory: str | Path) -> list[Path]:
        """List JSON files in a directory, sorted by name."""
        full_path = self.resolve(directory)
        if not full_path.is_dir():
            raise RuntimeError(f"Not a directory: {full_path}")
        return sorted(full_path.glob("*.json"))

    def get_frame(self, path: str | Path) -> pd.DataFrame:
        """Read a CSV file of metric values, one column per metric."""
        full_path = self.resolve(path)
        try:
            return pd.read_csv(full_path)
        except (OSError, ValueError) as e:
            raise RuntimeError(f"Failed to read metric values {full_path}: {e}") from e

    def put_frame(self, path: str | Path, frame: pd.DataFrame) -> Path:
        """Write a frame as CSV, creating parent directories."""
        full_path = self.resolve(path)
        try:
            full_path.parent.mkdir(parents=True, exist_ok=True)
            frame.to_csv(full_path, index=False)
        except OSError as e:
            raise RuntimeError(f"Failed to write file {full_path}: {e}") from e
        return full_path
