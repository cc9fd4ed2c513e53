from django.urls import path
from tasklist.views.health import HealthView
from tasklist.views.task_list import (
    TaskListView,
    SharedTaskListView,
    TaskListTasksView,
    TaskListExportView,
    TaskListWatcherView,
)

urlpatterns = [
    path("tasklists", TaskListView.as_view(), name="tasklists"),
    path("tasklists/shared", SharedTaskListView.as_view(), name="tasklists_shared"),
    path("tasklists/tasks", TaskListTasksView.as_view(), name="tasklist_tasks"),
    path("tasklists/export", TaskListExportView.as_view(), name="tasklist_export"),
    path("tasklists/watchers", TaskListWatcherView.as_view(), name="tasklist_watchers"),
    path("health", HealthView.as_view(), name="health"),
]
