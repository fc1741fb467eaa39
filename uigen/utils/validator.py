"""Input validation: checks credentials are non-empty strings before they are submitted."""


def validate_credentials(identifier: str, secret: str) -> tuple[str, str]:
    """Validate an identifier/secret pair.

    Returns the identifier stripped of surrounding whitespace and the secret
    untouched (whitespace may be part of a password).
    Raises ValueError if either is empty or not a string.
    """
    if not isinstance(identifier, str) or not identifier.strip():
        raise ValueError("Email must be a non-empty string.")
    if not isinstance(secret, str) or not secret:
        raise ValueError("Password must be a non-empty string.")
    return identifier.strip(), secret
