"""
File Service module for the File Manager.

Provides sandboxed list, create, delete, copy, and move operations
rooted under a base directory.
"""

from .file_service import FileService, FileRecord, Logger

__all__ = ['FileService', 'FileRecord', 'Logger']
