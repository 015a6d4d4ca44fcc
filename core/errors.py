"""
Error types for the File Manager.

Every failed file operation surfaces as an OperationError carrying the
operation kind, the logical path the caller asked for, and the underlying
cause. The sentinel categories below classify that cause.
"""

from enum import Enum
from typing import Optional, Type


class Operation(Enum):
    """Kinds of file operations."""
    LIST = "list"
    CREATE = "create"
    DELETE = "delete"
    COPY = "copy"
    MOVE = "move"


class FileManagerError(Exception):
    """Base exception for all File Manager errors."""


class FileNotFound(FileManagerError):
    """The target file does not exist."""

    def __init__(self, message: str = "file not found"):
        super().__init__(message)


class PathNotFound(FileManagerError):
    """A directory along the path does not exist."""

    def __init__(self, message: str = "path not found"):
        super().__init__(message)


class InvalidOperation(FileManagerError):
    """The operation cannot be performed on the given path."""

    def __init__(self, message: str = "invalid operation"):
        super().__init__(message)


class OperationError(FileManagerError):
    """
    A failed file operation.

    Attributes:
        op: The Operation that failed
        path: The logical (caller-supplied) path involved
        cause: The underlying exception
    """

    def __init__(self, op: Operation, path: str, cause: BaseException):
        if cause is None:
            raise ValueError("OperationError requires a cause")
        self.op = Operation(op)
        self.path = path
        self.cause = cause
        self.__cause__ = cause
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"operation {self.op.value} failed for path {self.path}: {self.cause}"

    def __repr__(self) -> str:
        return f"OperationError(op={self.op.value!r}, path={self.path!r}, cause={self.cause!r})"

    @property
    def category(self) -> Optional[Type[FileManagerError]]:
        """
        Map the cause onto a sentinel category.

        Returns:
            FileNotFound, PathNotFound, InvalidOperation, or None when the
            cause fits none of them (e.g. permission denied)
        """
        cause = self.cause
        if isinstance(cause, (InvalidOperation, IsADirectoryError)):
            return InvalidOperation
        if isinstance(cause, NotADirectoryError):
            return PathNotFound
        if isinstance(cause, FileNotFoundError):
            if self.op is Operation.LIST:
                return PathNotFound
            return FileNotFound
        if isinstance(cause, (FileNotFound, PathNotFound)):
            return type(cause)
        return None
