"""
passgen.errors
Validation errors raised by the generator and its callers.
"""


class PasswordGenError(ValueError):
    """Base class; the message is safe to show to an API caller."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidPolicyError(PasswordGenError):
    pass


class InvalidLengthError(PasswordGenError):
    pass


class InvalidCountError(PasswordGenError):
    pass


class MissingInputError(PasswordGenError):
    pass


class InvalidConfigError(PasswordGenError):
    pass
