"""Task handles for asynchronous engine operations."""

from searchlayer.task.task import AsyncTask, SyncTask, TaskHelper, TaskInterface

__all__ = ["AsyncTask", "SyncTask", "TaskHelper", "TaskInterface"]
