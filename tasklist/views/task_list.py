from django.conf import settings
from django.http import HttpResponse
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.request import Request
from rest_framework.exceptions import AuthenticationFailed
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from drf_spectacular.types import OpenApiTypes

from tasklist.constants.messages import ApiErrors
from tasklist.dto.responses.error_response import ApiErrorResponse
from tasklist.dto.task_list_dto import SaveTaskListDTO, SharedTaskListDTO, TaskDTO, TaskListDTO
from tasklist.middlewares.jwt_auth import get_current_user_info
from tasklist.serializers.save_task_list_serializer import SaveTaskListSerializer
from tasklist.serializers.save_tasks_serializer import SaveTasksSerializer
from tasklist.serializers.task_list_id_serializer import TaskListIdSerializer, TaskListQueryParamsSerializer
from tasklist.services.task_list_service import TaskListService

TASK_LIST_QUERY_PARAMETER = OpenApiParameter(
    name="tl",
    type=OpenApiTypes.STR,
    location=OpenApiParameter.QUERY,
    description="ID of the task list",
    required=True,
)


def _current_user_id(request: Request) -> str:
    user = get_current_user_info(request)
    if not user:
        raise AuthenticationFailed(ApiErrors.AUTHENTICATION_FAILED)
    return user["user_id"]


def _task_list_id_from_query(request: Request) -> str:
    query = TaskListQueryParamsSerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    return query.validated_data["tl"]


class TaskListView(APIView):
    @extend_schema(
        operation_id="get_task_lists",
        summary="List the caller's task lists",
        description="Every task list the authenticated user owns or watches, regardless of its share mode.",
        tags=["tasklists"],
        responses={
            200: OpenApiResponse(response=TaskListDTO,description="Task lists"),
            500: OpenApiResponse(response=ApiErrorResponse, description="Internal server error"),
        },
    )
    def get(self, request: Request):
        user_id = _current_user_id(request)
        task_lists = TaskListService.list(user_id)
        return Response(data=[task_list.model_dump(mode="json") for task_list in task_lists], status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="save_task_list",
        summary="Create or update a task list",
        description="""
        Without an id the list is created and owned by the caller; the created list is returned.

        With an id the list's title, tasks, shareMode and watchers are replaced. Only the owner may do this.
        Watchers are cleared unless shareMode is `read` or `write`.
        """,
        tags=["tasklists"],
        request=SaveTaskListSerializer,
        responses={
            200: OpenApiResponse(response=TaskListDTO, description="List updated (empty body) or created"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request - validation error"),
            403: OpenApiResponse(response=ApiErrorResponse, description="Caller does not own the list"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Task list not found"),
            500: OpenApiResponse(response=ApiErrorResponse, description="Internal server error"),
        },
    )
    def post(self, request: Request):
        user_id = _current_user_id(request)
        serializer = SaveTaskListSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        dto = SaveTaskListDTO(**serializer.validated_data["taskList"])
        created = TaskListService.save(user_id, dto)
        if created is None:
            return Response(status=status.HTTP_200_OK)
        return Response(data=created.model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="delete_task_list",
        summary="Delete a task list",
        description="Delete the task list given by `tl`. Only the owner may delete a list.",
        tags=["tasklists"],
        parameters=[TASK_LIST_QUERY_PARAMETER],
        responses={
            200: OpenApiResponse(description="Task list deleted"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Invalid task list ID"),
            403: OpenApiResponse(response=ApiErrorResponse, description="Caller does not own the list"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Task list not found"),
            500: OpenApiResponse(response=ApiErrorResponse, description="Internal server error"),
        },
    )
    def delete(self, request: Request):
        user_id = _current_user_id(request)
        TaskListService.remove(user_id, _task_list_id_from_query(request))
        return Response(status=status.HTTP_200_OK)


class SharedTaskListView(APIView):
    @extend_schema(
        operation_id="get_shared_task_lists",
        summary="List task lists available to join",
        description="Task lists shared for reading or writing that the caller is not watching yet. "
        "The owner is resolved to its id and name.",
        tags=["tasklists"],
        responses={
            200: OpenApiResponse(response=SharedTaskListDTO, description="Joinable task lists"),
            500: OpenApiResponse(response=ApiErrorResponse, description="Internal server error"),
        },
    )
    def get(self, request: Request):
        user_id = _current_user_id(request)
        task_lists = TaskListService.list_shared(user_id)
        return Response(data=[task_list.model_dump(mode="json") for task_list in task_lists], status=status.HTTP_200_OK)


class TaskListTasksView(APIView):
    @extend_schema(
        operation_id="save_task_list_tasks",
        summary="Replace the tasks of a task list",
        description="Replaces the tasks wholesale and broadcasts a `task update` event with "
        "`{taskListId, tasks}` to the list's owner and watchers. Owner and watchers may call this.",
        tags=["tasklists"],
        request=SaveTasksSerializer,
        responses={
            200: OpenApiResponse(description="Tasks saved"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request - validation error"),
            403: OpenApiResponse(response=ApiErrorResponse, description="Caller neither owns nor watches the list"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Task list not found"),
            500: OpenApiResponse(response=ApiErrorResponse, description="Internal server error"),
        },
    )
    def put(self, request: Request):
        user_id = _current_user_id(request)
        serializer = SaveTasksSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        tasks = [TaskDTO(**task) for task in serializer.validated_data["tasks"]]
        TaskListService.save_tasks(user_id, serializer.validated_data["taskListId"], tasks)
        return Response(status=status.HTTP_200_OK)


class TaskListExportView(APIView):
    @extend_schema(
        operation_id="export_task_list",
        summary="Export the tasks of a task list as CSV",
        description="Columns `uuid;title;dueDate;done`, one row per task in list order.",
        tags=["tasklists"],
        parameters=[TASK_LIST_QUERY_PARAMETER],
        responses={
            (200, "text/csv"): OpenApiResponse(response=OpenApiTypes.STR, description="CSV attachment"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Invalid task list ID"),
            403: OpenApiResponse(response=ApiErrorResponse, description="Caller may not read the list"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Task list not found"),
            500: OpenApiResponse(response=ApiErrorResponse, description="Internal server error"),
        },
    )
    def get(self, request: Request):
        user_id = _current_user_id(request)
        csv_content = TaskListService.export_tasks(user_id, _task_list_id_from_query(request))

        filename = settings.TASK_LIST_SETTINGS["CSV_EXPORT_FILENAME"]
        response = HttpResponse(csv_content, content_type="text/csv; charset=utf-8", status=status.HTTP_200_OK)
        response["Content-Disposition"] = f'attachment; filename="{filename}"'
        return response


class TaskListWatcherView(APIView):
    @extend_schema(
        operation_id="add_task_list_watcher",
        summary="Watch a shared task list",
        description="Adds the caller to the watchers of a list shared for reading or writing. "
        "Calling it again has no further effect.",
        tags=["watchers"],
        request=TaskListIdSerializer,
        responses={
            200: OpenApiResponse(description="Caller is watching the list"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Invalid task list ID"),
            403: OpenApiResponse(response=ApiErrorResponse, description="Task list is not shared"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Task list not found"),
            500: OpenApiResponse(response=ApiErrorResponse, description="Internal server error"),
        },
    )
    def post(self, request: Request):
        user_id = _current_user_id(request)
        serializer = TaskListIdSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        TaskListService.add_watcher(user_id, serializer.validated_data["taskListId"])
        return Response(status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="remove_task_list_watcher",
        summary="Stop watching a task list",
        description="Removes the caller from the watchers of `tl`. Succeeds even if the caller was not watching.",
        tags=["watchers"],
        parameters=[TASK_LIST_QUERY_PARAMETER],
        responses={
            200: OpenApiResponse(description="Caller is no longer watching the list"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Invalid task list ID"),
            500: OpenApiResponse(response=ApiErrorResponse, description="Internal server error"),
        },
    )
    def delete(self, request: Request):
        user_id = _current_user_id(request)
        TaskListService.remove_watcher(user_id, _task_list_id_from_query(request))
        return Response(status=status.HTTP_200_OK)
