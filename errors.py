"""
Error types for the Prakrit verb conjugator

All engine errors are deterministic: retrying a request reproduces the
same failure, so callers report them instead of retrying.
"""


class ConjugationError(Exception):
    """Base class for every error raised by the conjugation engine"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidRootError(ConjugationError):
    """Raised when a verb root is empty or uses a sound outside the Prakrit inventory"""

    def __init__(self, root: str, reason: str):
        self.root = root
        self.reason = reason
        super().__init__(f"Invalid verb root '{root}': {reason}")


class MissingRuleError(ConjugationError):
    """
    Raised when a rule table has no entry for an otherwise valid request.

    This signals incomplete rule data, never bad user input.
    """

    def __init__(self, what: str):
        self.what = what
        super().__init__(f"No conjugation rule defined for {what}")


class EncodingError(ConjugationError):
    """Raised when text cannot be mapped under the declared encoding"""

    def __init__(self, text: str, encoding: str, reason: str):
        self.text = text
        self.encoding = encoding
        self.reason = reason
        super().__init__(f"Cannot read '{text}' as {encoding}: {reason}")
