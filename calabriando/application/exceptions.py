class BookingValidationError(ValueError):
    """Raised when a booking form or payment return is incomplete or inconsistent.

    `message` is already localised and safe to show to the customer.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ItemNotFoundError(LookupError):
    """Raised when a bookable item does not exist."""
    pass


class BookingNotFoundError(LookupError):
    """Raised when a booking reference does not exist."""
    pass


class BackendError(RuntimeError):
    """Raised when the managed store fails (timeouts, network errors, rejected queries)."""
    pass


class PaymentError(RuntimeError):
    """Raised when the payment function fails or returns an unusable answer."""
    pass


class NotificationError(RuntimeError):
    """Raised when the email dispatch function fails."""
    pass


class ReceiptError(RuntimeError):
    """Raised when the PDF receipt cannot be rendered."""
    pass


class ContentLoadError(RuntimeError):
    """Raised when the initial content load exhausts its retries."""
    pass
