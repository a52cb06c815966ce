"""Task persistence helpers."""

from .json_store import load_registry, load_tasks, save_tasks, task_from_dict, task_to_dict

__all__ = ['load_registry', 'load_tasks', 'save_tasks', 'task_from_dict', 'task_to_dict']
