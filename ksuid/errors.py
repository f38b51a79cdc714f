"""KSUID parsing and loading errors."""


class KSUIDError(ValueError):
    """Base class for all KSUID errors. `kind` is a stable machine-readable tag."""

    kind = "ksuid-error"


class InvalidLengthError(KSUIDError):
    """Input buffer or text is not exactly the required size."""

    kind = "invalid-length"

    def __init__(self, expected, actual, what="bytes"):
        super().__init__(f"expected {expected} {what}, got {actual}")
        self.expected = expected
        self.actual = actual


class InvalidCharacterError(KSUIDError):
    """Text contains a character outside the base62 alphabet."""

    kind = "invalid-character"

    def __init__(self, character, position):
        super().__init__(f"invalid base62 character {character!r} at position {position}")
        self.character = character
        self.position = position


class ValueTooLargeError(KSUIDError):
    """Text is valid base62 but decodes to more than 160 bits."""

    kind = "value-too-large"

    def __init__(self, text):
        super().__init__(f"base62 value {text!r} does not fit in 20 bytes")
        self.text = text


class DataCorruptedError(KSUIDError):
    """Identifier field in interchange data is not a valid KSUID."""

    kind = "data-corrupted"

    def __init__(self, message="malformed identifier text"):
        super().__init__(message)
