"""Exceptions for the MetOcean API client.

All exceptions inherit from MetOceanError and carry an ``ErrorKind`` tag in
``kind``. There are two tiers:

    - MetOceanIllegalArgumentError: raised locally, before any request is
      sent, when argument validation fails.
    - MetOceanRequestError and its subclasses: raised after the server
      answered with a non-200 status, or with a body that could not be
      decoded.

Network failures (DNS, refused connections, timeouts) are not wrapped and
surface as the underlying ``httpx`` exceptions.

Example:
    Telling "fix my request" from "retry later"::

        from metocean import (
            MetOceanClient,
            MetOceanInputError,
            MetOceanServerError,
            MetOceanUnauthorizedError,
        )

        try:
            data = await client.get_point(points, ["sea.depth.below-sea-level"])
        except MetOceanUnauthorizedError:
            print("Check the API key")
        except MetOceanInputError as e:
            print(f"Bad request: {e.error_list}")
        except MetOceanServerError as e:
            print(f"Server failed with {e.status_code}, try again later")
"""

from typing import Optional, Sequence

from .types import ErrorKind


class MetOceanError(Exception):
    """Base exception for all MetOcean errors.

    Attributes:
        kind: ErrorKind tag identifying the failure category.
    """

    kind: ErrorKind


class MetOceanIllegalArgumentError(MetOceanError):
    """Exception raised when local argument validation fails.

    Collects every problem found in one pass so the caller can fix them
    together.

    Args:
        violations: Human-readable descriptions, one per broken constraint.

    Attributes:
        violations: The list passed in.

    Example:
        >>> err = MetOceanIllegalArgumentError(["'variables' must not be empty"])
        >>> err.violations
        ["'variables' must not be empty"]
    """

    kind = ErrorKind.ILLEGAL_ARGUMENT

    def __init__(self, violations: Sequence[str]) -> None:
        if isinstance(violations, str):
            violations = [violations]
        self.violations = list(violations)
        lines = "\n".join(f" - {v}" for v in self.violations)
        super().__init__(f"Illegal argument(s):\n{lines}")


class MetOceanRequestError(MetOceanError):
    """Exception raised when the API answers with an unusable response.

    Base class for the status-code driven errors below.

    Args:
        status_code: HTTP status of the response.
        error_list: Error messages returned by the server.
        message: Optional override for the exception message.

    Attributes:
        status_code: HTTP status of the response.
        error_list: Error messages returned by the server.
    """

    def __init__(
        self,
        status_code: int,
        error_list: Optional[Sequence[str]] = None,
        message: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.error_list = list(error_list or [])
        if message is None:
            message = "; ".join(self.error_list) or "no error message"
        super().__init__(f"Status {status_code}: {message}")


class MetOceanUnauthorizedError(MetOceanRequestError):
    """Raised on HTTP 401: missing, invalid or revoked API key."""

    kind = ErrorKind.UNAUTHORIZED


class MetOceanNotFoundError(MetOceanRequestError):
    """Raised on HTTP 404."""

    kind = ErrorKind.NOT_FOUND


class MetOceanInputError(MetOceanRequestError):
    """Raised on any other 4xx status: the server rejected the request body."""

    kind = ErrorKind.INPUT


class MetOceanServerError(MetOceanRequestError):
    """Raised on 5xx, and on any other unexpected non-200 status."""

    kind = ErrorKind.SERVER


class MetOceanDecodeError(MetOceanRequestError):
    """Raised when a response body is not JSON or has an unexpected shape."""

    kind = ErrorKind.DECODE
