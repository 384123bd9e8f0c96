class ApiError(Exception):
    """Error carrying the HTTP status it should be reported with."""

    status_code = 500

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {"error": self.message}


class NotFoundError(ApiError):
    status_code = 404


class FieldValidationError(ApiError):
    """A submitted field could not be coerced to its declared type."""

    def __init__(self, field, message):
        super().__init__(message)
        self.field = field


class AssetUploadError(ApiError):
    """The asset store refused or failed an upload."""


class DocumentStoreUnavailable(ApiError):
    pass
