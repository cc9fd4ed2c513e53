from tasklist.constants.messages import AuthErrorMessages, RepositoryErrors


class BaseAuthException(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class TokenExpiredError(BaseAuthException):
    def __init__(self, message: str = AuthErrorMessages.TOKEN_EXPIRED):
        super().__init__(message)


class TokenMissingError(BaseAuthException):
    def __init__(self, message: str = AuthErrorMessages.NO_ACCESS_TOKEN):
        super().__init__(message)


class TokenInvalidError(BaseAuthException):
    def __init__(self, message: str = AuthErrorMessages.TOKEN_INVALID):
        super().__init__(message)


class RefreshTokenExpiredError(BaseAuthException):
    def __init__(self, message: str = AuthErrorMessages.REFRESH_TOKEN_EXPIRED):
        super().__init__(message)


class UserNotFoundException(BaseAuthException):
    def __init__(self, message: str = RepositoryErrors.USER_NOT_FOUND):
        super().__init__(message)
