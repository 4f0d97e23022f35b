"""Task listing parsing, filtering and grouping."""

from mise_discover.tasks.grouping import TASK_DELIMITER, group_by_project, projects_json
from mise_discover.tasks.parser import filter_by_prefix, normalize_tasks, split_task_name
from mise_discover.tasks.types import ROOT_PROJECT, NormalizedTask, ProjectGroup, RawTask

__all__ = [
    "ROOT_PROJECT",
    "TASK_DELIMITER",
    "NormalizedTask",
    "ProjectGroup",
    "RawTask",
    "filter_by_prefix",
    "group_by_project",
    "normalize_tasks",
    "projects_json",
    "split_task_name",
]
