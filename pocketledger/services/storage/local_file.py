"""
Local JSON File Storage

DESIGN DECISION: The ledger lives in a plain JSON file in a per-user data
directory because:
1. The user can back it up or move it by copying one file
2. No database setup required
3. The document format is easy to inspect by hand

Files are named data.<app>.json, data.1.<app>.json, ... so several ledgers
can share the directory. At startup the most recently modified valid file
wins.

TRADEOFFS:
- Writes are not atomic (persistence transactions are out of scope)
- The whole document is rewritten on every save (fine for personal use)
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

from pocketledger.models.data import Data
from pocketledger.models.identity import LedgerIds
from pocketledger.services.storage.codec import dump_data, load_data
from pocketledger.services.storage.interface import (
    DataStorageInterface,
    NotFoundError,
    StorageError,
)


MAX_FILE_NAME_ATTEMPTS = 1000


class DataFile(DataStorageInterface):
    """One ledger document on the local file system."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"DataFile({str(self.path)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataFile):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)

    @property
    def location(self) -> str:
        return str(self.path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self, ids: LedgerIds) -> Data:
        try:
            content = self.path.read_bytes()
        except FileNotFoundError as e:
            raise NotFoundError(f"Ledger file not found: {self.path}") from e
        except OSError as e:
            raise StorageError(f"Failed to read ledger file {self.path}: {e}") from e
        return load_data(content, ids)

    def save(self, data: Data) -> bool:
        if data.is_empty():
            return False
        try:
            self.path.write_bytes(dump_data(data))
        except OSError as e:
            raise StorageError(f"Failed to write ledger file {self.path}: {e}") from e
        return True

    def remove(self) -> None:
        try:
            self.path.unlink()
        except OSError as e:
            raise StorageError(f"Failed to remove ledger file {self.path}: {e}") from e

    def modified_time(self) -> datetime:
        try:
            return datetime.fromtimestamp(self.path.stat().st_mtime)
        except OSError as e:
            raise StorageError(f"Failed to stat ledger file {self.path}: {e}") from e

    # =========================================================================
    # Validity checks used when scanning a data directory
    # =========================================================================

    def is_valid(self, app_name: str) -> bool:
        return (
            self.has_valid_extension()
            and self.has_valid_filename(app_name)
            and self.has_valid_content()
        )

    def has_valid_extension(self) -> bool:
        return self.path.suffix == ".json"

    def has_valid_filename(self, app_name: str) -> bool:
        return app_name in self.path.name

    def has_valid_content(self) -> bool:
        # Probe with throwaway ids so scanning doesn't burn real ones
        try:
            self.load(LedgerIds())
        except StorageError:
            return False
        return True


class DataDirectory:
    """The directory holding a user's ledger files."""

    def __init__(self, path: Path, app_name: str):
        self.path = Path(path)
        self.app_name = app_name

    def ensure_exists(self) -> None:
        try:
            self.path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to create data directory {self.path}: {e}") from e

    def list_valid(self) -> list[DataFile]:
        """All decodable ledger files in the directory, in name order."""
        try:
            entries = sorted(self.path.iterdir())
        except OSError as e:
            raise StorageError(f"Failed to list data directory {self.path}: {e}") from e

        return [
            DataFile(entry)
            for entry in entries
            if entry.is_file() and DataFile(entry).is_valid(self.app_name)
        ]

    def find_most_recent_data_file(self) -> Optional[DataFile]:
        latest: Optional[tuple[DataFile, datetime]] = None
        for data_file in self.list_valid():
            modified = data_file.modified_time()
            if latest is None or modified > latest[1]:
                latest = (data_file, modified)
        return latest[0] if latest else None

    def build_data_path(self, count: int) -> Path:
        if count == 0:
            return self.path / f"data.{self.app_name}.json"
        return self.path / f"data.{count}.{self.app_name}.json"

    def generate_unique_file_path(self) -> Path:
        for count in range(MAX_FILE_NAME_ATTEMPTS):
            candidate = self.build_data_path(count)
            if not candidate.exists():
                return candidate
        raise StorageError(
            f"Could not find a unique file name in {self.path} "
            f"after {MAX_FILE_NAME_ATTEMPTS} attempts"
        )

    def generate_unique_file_path_or_default(self) -> Path:
        try:
            return self.generate_unique_file_path()
        except StorageError:
            return self.build_data_path(0)

    def create_new_data_file(self) -> DataFile:
        """Reserve a fresh file name. Nothing is written until the first save."""
        return DataFile(self.generate_unique_file_path())
