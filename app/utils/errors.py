"""
Application error types
"""


class ValidationError(Exception):
    """A request is missing a required field or carries an invalid value"""

    def __init__(self, message):
        super().__init__(message)
        self.message = message
