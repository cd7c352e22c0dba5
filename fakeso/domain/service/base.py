"""Base service class for domain services."""

from datetime import datetime

from fakeso.domain.error import InvalidInputError


class Service:
    """Base class for all domain services.

    Domain services hold the forum rules that span several entities, such as
    resolving tags for a new question or keeping an answer's vote counter in
    step with its voters.
    """

    @staticmethod
    def require_aware(value: datetime, field: str) -> datetime:
        """Reject timestamps without a timezone.

        Raises:
            InvalidInputError: If ``value`` is naive
        """
        if value.tzinfo is None or value.utcoffset() is None:
            raise InvalidInputError(f"{field} must carry a timezone")
        return value
