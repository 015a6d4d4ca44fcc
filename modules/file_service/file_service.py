"""
File service module for the File Manager.

Provides list, create, delete, copy, and move operations rooted under a
base directory. Every failure is raised as an OperationError.
"""

import os
import shutil
import stat
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Protocol

from core.errors import InvalidOperation, Operation, OperationError


DIR_MODE = 0o755


class Logger(Protocol):
    """Logging capability used for non-fatal diagnostics."""

    def info(self, msg: str, **fields: Any) -> Any:
        ...

    def error(self, msg: str, **fields: Any) -> Any:
        ...


@dataclass(frozen=True)
class FileRecord:
    """Snapshot of one directory entry's metadata."""
    name: str
    size: int
    mode: int
    modified: datetime
    is_dir: bool

    @property
    def permissions(self) -> str:
        """Mode rendered like `ls -l`, e.g. '-rw-r--r--'."""
        return stat.filemode(self.mode)


class FileService:
    """Sandboxed file operations relative to a fixed base directory."""

    def __init__(self, base_dir: str, logger: Logger):
        """
        Initialize FileService.

        Args:
            base_dir: Root directory for all logical paths
            logger: Logger for diagnostics
        """
        self.base_dir = base_dir
        self.logger = logger

    def _resolve(self, op: Operation, path: str) -> str:
        """
        Join a logical path onto the base directory.

        Leading separators are ignored, so absolute paths stay under the
        base directory. Paths that climb out of it are rejected.

        Raises:
            OperationError: If the path holds a NUL byte or resolves outside
                the base directory
        """
        if "\x00" in path:
            raise OperationError(op, path, InvalidOperation(f"path contains a NUL byte: {path!r}"))

        relative = path.lstrip("/" + os.sep)
        full_path = os.path.normpath(os.path.join(self.base_dir, relative))

        root = os.path.abspath(self.base_dir)
        if os.path.commonpath([root, os.path.abspath(full_path)]) != root:
            raise OperationError(op, path, InvalidOperation(f"path escapes base directory: {path}"))

        return full_path

    def list(self, path: str = ".") -> List[FileRecord]:
        """
        List the entries of a directory, non-recursively.

        Entries whose metadata cannot be read are logged and skipped.

        Args:
            path: Directory relative to the base directory

        Returns:
            FileRecords in the order the filesystem yields them

        Raises:
            OperationError: If the directory cannot be read
        """
        full_path = self._resolve(Operation.LIST, path or ".")

        try:
            with os.scandir(full_path) as it:
                entries = list(it)
        except OSError as e:
            raise OperationError(Operation.LIST, path, e) from e

        files = []
        for entry in entries:
            try:
                info = entry.stat(follow_symlinks=False)
            except OSError as e:
                self.logger.error("Failed to get file info", file=entry.name, error=str(e))
                continue

            files.append(FileRecord(
                name=entry.name,
                size=info.st_size,
                mode=info.st_mode,
                modified=datetime.fromtimestamp(info.st_mtime),
                is_dir=stat.S_ISDIR(info.st_mode)
            ))

        return files

    def create(self, path: str) -> None:
        """
        Create an empty file, truncating any existing one.

        Missing parent directories are created.

        Raises:
            OperationError: If the directory or file cannot be created
        """
        full_path = self._resolve(Operation.CREATE, path)

        try:
            os.makedirs(_parent(full_path), DIR_MODE, exist_ok=True)
            with open(full_path, "wb"):
                pass
        except OSError as e:
            raise OperationError(Operation.CREATE, path, e) from e

    def delete(self, path: str) -> None:
        """
        Remove a file or an empty directory. Does not recurse.

        Raises:
            OperationError: If the target is missing or cannot be removed
        """
        full_path = self._resolve(Operation.DELETE, path)

        try:
            if os.path.isdir(full_path) and not os.path.islink(full_path):
                os.rmdir(full_path)
            else:
                os.remove(full_path)
        except OSError as e:
            raise OperationError(Operation.DELETE, path, e) from e

    def copy(self, src: str, dst: str) -> None:
        """
        Copy the bytes of src into dst, creating dst's parents.

        Raises:
            OperationError: With path=src if the source cannot be read,
                path=dst if the destination cannot be created or is the
                source itself
        """
        src_path = self._resolve(Operation.COPY, src)
        dst_path = self._resolve(Operation.COPY, dst)
        if _same_file(src_path, dst_path):
            raise OperationError(Operation.COPY, dst, InvalidOperation("source and destination are the same file"))

        try:
            source = open(src_path, "rb")
        except OSError as e:
            raise OperationError(Operation.COPY, src, e) from e

        with source:
            try:
                os.makedirs(_parent(dst_path), DIR_MODE, exist_ok=True)
                destination = open(dst_path, "wb")
            except OSError as e:
                raise OperationError(Operation.COPY, dst, e) from e

            with destination:
                try:
                    shutil.copyfileobj(source, destination)
                except OSError as e:
                    raise OperationError(Operation.COPY, src, e) from e

    def move(self, src: str, dst: str) -> None:
        """
        Move src to dst as a copy followed by a delete.

        Not atomic: if the delete fails, both src and dst exist.

        Raises:
            OperationError: From whichever step failed, unchanged
        """
        self.copy(src, dst)
        self.delete(src)


def _parent(full_path: str) -> str:
    return os.path.dirname(full_path) or os.curdir


def _same_file(src_path: str, dst_path: str) -> bool:
    if os.path.abspath(src_path) == os.path.abspath(dst_path):
        return True
    try:
        return os.path.samefile(src_path, dst_path)
    except OSError:
        # Destination missing: not the same file.
        return False
