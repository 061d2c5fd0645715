"""Base exception shared by every postmark_mail error."""


class PostmarkMailError(Exception):
    """Root of the library's exception hierarchy."""
