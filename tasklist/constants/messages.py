# Repository error messages
class RepositoryErrors:
    TASK_LIST_CREATION_FAILED = "Failed to create task list: {0}"
    TASK_LIST_UPDATE_FAILED = "Failed to update task list: {0}"
    TASK_LIST_DELETION_FAILED = "Failed to delete task list: {0}"
    TASK_LIST_QUERY_FAILED = "Failed to query task lists: {0}"
    USER_NOT_FOUND = "User not found"


# API error messages
class ApiErrors:
    REPOSITORY_ERROR = "Repository Error"
    INTERNAL_SERVER_ERROR = "Internal server error"
    VALIDATION_ERROR = "Validation Error"
    RESOURCE_NOT_FOUND_TITLE = "Resource Not Found"
    TASK_LIST_NOT_FOUND = "Task list with ID {0} not found."
    TASK_LIST_NOT_FOUND_GENERIC = "Task list not found."
    FORBIDDEN_TITLE = "Forbidden"
    AUTHENTICATION_FAILED = "Authentication failed"


# Validation error messages
class ValidationErrors:
    BLANK_TITLE = "Title must not be blank."
    INVALID_TASK_LIST_ID_FORMAT = "Please enter a valid task list ID format."
    INVALID_SHARE_MODE = "shareMode must be one of: {0}."


# Auth error messages
class AuthErrorMessages:
    TOKEN_EXPIRED = "Authentication token has expired"
    TOKEN_INVALID = "Invalid authentication token"
    REFRESH_TOKEN_EXPIRED = "Refresh token has expired"
    NO_ACCESS_TOKEN = "No access token"
    INVALID_TOKEN = "Invalid token"
    AUTHENTICATION_REQUIRED = "Authentication required"
    TOKEN_EXPIRED_TITLE = "Token Expired"
    INVALID_TOKEN_TITLE = "Invalid Token"


# Permission error messages
class PermissionErrors:
    TASK_LIST_ACCESS_DENIED = "Access denied: cannot {0} task list '{1}'"
    TASK_LIST_NOT_SHARED = "Task list '{0}' is not shared"
