# agent_toolbox/infrastructure/tools/file_system/file_system.py

import logging
import os
from typing import List, Optional, Union

from agent_toolbox.abstractions.dto.tools import ErrorMessage
from ..config import Config
from ..tool_base import Tool

logger = logging.getLogger(__name__)


class FileSystemTool(Tool):
    """
    Lists directories, reads and writes text files.

    Missing paths and permission problems are returned as messages. When a
    ``root_dir`` is configured, every path must resolve inside it.
    """

    def __init__(self, root_dir: Optional[str] = None, encoding: Optional[str] = None):
        """
        Args:
            root_dir: Directory all paths are confined to. Defaults to
                ``Config.FILE_SYSTEM_ROOT``; empty means paths are used as given.
            encoding: Text encoding for reads and writes.
        """
        super().__init__()
        root_dir = root_dir if root_dir is not None else Config.FILE_SYSTEM_ROOT
        self.root_dir = os.path.realpath(root_dir) if root_dir else None
        self.encoding = encoding or Config.FILE_SYSTEM_ENCODING

    @property
    def name(self) -> str:
        return "file_system"

    @property
    def description(self) -> str:
        return (
            "Interacts with the file system: lists the entries of a directory, "
            "reads the full contents of a text file and writes content to a file, "
            "replacing whatever was there."
        )

    def list_directory(self, *, directory_path: str) -> Union[List[str], ErrorMessage]:
        try:
            resolved = self._resolve(directory_path)
            if isinstance(resolved, ErrorMessage):
                return resolved
            return sorted(os.listdir(resolved))
        except (FileNotFoundError, NotADirectoryError, ValueError):
            return self.failure("not_found", f"No such directory: {directory_path}")
        except PermissionError:
            return self.failure("permission_denied", f"Permission denied: {directory_path}")

    def read_file(self, *, file_path: str) -> Union[str, ErrorMessage]:
        try:
            resolved = self._resolve(file_path)
            if isinstance(resolved, ErrorMessage):
                return resolved
            with open(resolved, "r", encoding=self.encoding, newline="") as f:
                return f.read()
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
            return self.failure("not_found", f"No such file: {file_path}")
        except PermissionError:
            return self.failure("permission_denied", f"Permission denied: {file_path}")
        except UnicodeDecodeError:
            return self.failure("decode_error", f"Cannot decode {file_path} as {self.encoding}")
        except ValueError:
            # embedded null byte
            return self.failure("not_found", f"No such file: {file_path}")

    def write_to_file(self, *, file_path: str, content: str) -> Union[int, ErrorMessage]:
        """Overwrite ``file_path`` with ``content``; returns the number of characters written."""
        try:
            resolved = self._resolve(file_path)
            if isinstance(resolved, ErrorMessage):
                return resolved
            with open(resolved, "w", encoding=self.encoding, newline="") as f:
                written = f.write(content)
        except (FileNotFoundError, NotADirectoryError):
            return self.failure("not_found", f"No such directory: {os.path.dirname(file_path)}")
        except (PermissionError, IsADirectoryError):
            return self.failure("permission_denied", f"Permission denied: {file_path}")
        except UnicodeEncodeError:
            return self.failure("encode_error", f"Cannot encode content as {self.encoding}")
        except ValueError:
            return self.failure("not_found", f"No such directory: {os.path.dirname(file_path)}")
        logger.info(f"Wrote {written} characters to {resolved}")
        return written

    def _resolve(self, path: str) -> Union[str, ErrorMessage]:
        """Map a caller path onto the sandbox root, if one is configured."""
        if self.root_dir is None:
            return path
        candidate = path if os.path.isabs(path) else os.path.join(self.root_dir, path)
        resolved = os.path.realpath(candidate)
        if os.path.commonpath([resolved, self.root_dir]) != self.root_dir:
            logger.warning(f"Blocked access to {path} outside {self.root_dir}")
            return self.failure("access_denied", f"Access denied: {path} is outside {self.root_dir}")
        return resolved
