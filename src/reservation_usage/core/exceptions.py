class ReservationUsageError(Exception):
    """Base exception for reservation usage."""

    pass


class InvalidSizeDescriptor(ReservationUsageError, ValueError):
    """Raised when an instance size cannot be normalized."""

    pass


class UpstreamLoadFailure(ReservationUsageError):
    """Raised when the EC2 API call backing a load fails."""

    pass


class RegionNotConfigured(ReservationUsageError):
    """Raised when no region was given and no default region is configured."""

    pass


class AuthenticationFailure(ReservationUsageError):
    """Raised when a request does not carry the expected verification token."""

    pass
