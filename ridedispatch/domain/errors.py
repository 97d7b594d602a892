"""
Dispatch error taxonomy.

Every error is recoverable and reported to the caller; none of them is
fatal to the engine.  ``status_code`` is what the HTTP layer answers with.
"""


class DispatchError(Exception):
    status_code: int = 400


class InvalidInput(DispatchError):
    """A required field is empty or malformed."""

    status_code = 422


class DuplicateIdentifier(DispatchError):
    """A participant with the same id is already registered in that role."""

    status_code = 409


class RiderNotFound(DispatchError):
    status_code = 404


class DriverNotFound(DispatchError):
    status_code = 404


class TripNotFound(DispatchError):
    status_code = 404


class DriverUnavailable(DispatchError):
    """A busy or off-duty driver tried to accept a trip."""

    status_code = 409


class NoAvailableTrips(DispatchError):
    status_code = 409


class NoActiveTrip(DispatchError):
    """The driver has no ongoing trip to complete."""

    status_code = 409


class InvalidStateTransition(DispatchError):
    """Raised when a trip status change violates the state machine."""

    status_code = 409
