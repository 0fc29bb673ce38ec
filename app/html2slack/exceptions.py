class Html2SlackError(Exception):
    """Base class for conversion errors"""

    def __init__(self, message: str, error_code: str = "HTML2SLACK_ERROR"):
        self.message = message
        self.error_code = error_code
        super().__init__(message)


class StructuralError(Html2SlackError):
    """Raised when a required element is missing from the document"""

    def __init__(self, message: str = "Required element is missing"):
        super().__init__(message, "STRUCTURAL_ERROR")


class MalformedAttributeError(Html2SlackError):
    """Raised when a structured attribute value cannot be parsed"""

    def __init__(self, attribute: str, message: str | None = None):
        self.attribute = attribute
        super().__init__(
            message or f"Malformed '{attribute}' attribute",
            "MALFORMED_ATTRIBUTE",
        )


class InvalidEncodingError(Html2SlackError):
    """Raised when a document is not valid UTF-8"""

    def __init__(self, message: str = "Document is not valid UTF-8"):
        super().__init__(message, "INVALID_ENCODING")
