"""
Membership service domain exceptions.
"""


class MembershipServiceError(Exception):
    """Base exception for membership service errors"""
    pass


class MembershipValidationError(MembershipServiceError):
    """Raised when the caller passes input that cannot be acted on"""
    pass


class MemberNotFoundError(MembershipValidationError):
    """Raised when a member id does not resolve to a stored member"""

    def __init__(self, member_id):
        super().__init__(f"member not found: {member_id}")
        self.member_id = member_id


class InvalidRenewalPeriodError(MembershipValidationError):
    """Raised when a subscription is extended by a non-positive number of days"""
    pass
