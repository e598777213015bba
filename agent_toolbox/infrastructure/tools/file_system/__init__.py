from .file_system import FileSystemTool

__all__ = ["FileSystemTool"]
