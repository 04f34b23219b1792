from fastapi import status
from fastapi.responses import JSONResponse
from travelcraft.libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def server_error_response(base_error: Error) -> JSONResponse:
    """Error envelope for failures raised outside the exception handlers' reach"""
    error_dict = {"code": base_error.code, "message": "Internal server error"}
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )
