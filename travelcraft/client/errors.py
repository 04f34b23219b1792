class TransientAuthError(Exception):
    """The server could not give a definitive answer; the session state is unknown"""


class NetworkError(TransientAuthError):
    """The request never reached the server (as opposed to a definitive 401)"""


class ServerUnavailableError(TransientAuthError):
    """The server answered with an error other than 401, e.g. STORE_UNAVAILABLE"""

    def __init__(self, status_code: int):
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code
