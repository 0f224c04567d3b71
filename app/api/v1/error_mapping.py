# Standard library imports
from typing import Union

# External package imports
from fastapi import HTTPException, status

# Local application imports
from ...domain.exceptions import DevConnectError, NotAuthorizedError, NotFoundError


def to_http_exception(exception: Union[DevConnectError, ValueError]) -> HTTPException:
    """
    Translate a domain error into the HTTP error returned to the client

    NotFound -> 404, NotAuthorized -> 401, conflicts and invalid input -> 400.
    """
    if isinstance(exception, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exception, NotAuthorizedError):
        status_code = status.HTTP_401_UNAUTHORIZED
    else:
        status_code = status.HTTP_400_BAD_REQUEST

    return HTTPException(status_code=status_code, detail=str(exception))
