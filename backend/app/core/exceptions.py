"""Domain error types.

Every error carries the HTTP status the API answers with; a single
exception handler in ``app.main`` renders them as ``{"detail": ...}``.
"""


class HolidayTrackerError(Exception):
    """Base exception for holiday tracker errors."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(HolidayTrackerError):
    """Raised for malformed input (bad date string, empty name).

    Always raised before storage is touched.
    """

    status_code = 422


class ReferentialIntegrityError(HolidayTrackerError):
    """Raised when a holiday references a team member that does not exist."""

    status_code = 404

    def __init__(self, team_member_id: int) -> None:
        self.team_member_id = team_member_id
        super().__init__(f"Team member with ID {team_member_id} not found")


class StorageUnavailableError(HolidayTrackerError):
    """Raised when the database cannot be reached or times out. Never retried."""

    status_code = 503
