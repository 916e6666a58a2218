class PromoCodeError(ValueError):
    """Raised when a promo code is unknown or already applied."""
    pass


class InvalidStepError(ValueError):
    """Raised when a navigation target is not part of the current step graph."""
    pass


class LeadSubmissionError(RuntimeError):
    """Raised when the lead submission endpoint fails (network error or non-OK status)."""
    pass


class SubmissionInProgressError(RuntimeError):
    """Raised when a submit is attempted while another one is still in flight."""
    pass
