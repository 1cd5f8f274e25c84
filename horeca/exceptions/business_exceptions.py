# horeca/exceptions/business_exceptions.py
class BusinessException(Exception):
    """Base exception for business-related errors."""
    pass


class BusinessNotFoundError(BusinessException):
    """Raised when business is not found."""

    def __init__(self, business_id: str):
        self.business_id = business_id
        super().__init__("Business not found")


class MissingBusinessFieldsError(BusinessException):
    """Raised when onboarding data is incomplete."""

    def __init__(self, message: str = "Missing required fields"):
        super().__init__(message)


class EmailAlreadyRegisteredError(BusinessException):
    """Raised when a business with the same email already exists."""

    def __init__(self, message: str = "Email is already registered"):
        super().__init__(message)
