"""Validation of e-mail addresses against a simplified set of rules."""

import string

_DOMAIN_CHARS = frozenset(string.ascii_letters + string.digits + "-.")
_LOCAL_CHARS = _DOMAIN_CHARS | frozenset("!#$%&'*+-/=?^_{|}~`")

_LOCAL_MAX_LENGTH = 64
_DOMAIN_MAX_LENGTH = 63


def has_single_at(address: str) -> bool:
    """Return whether ``address`` holds exactly one ``@``."""
    return address.count("@") == 1


def local_part(address: str) -> str:
    """Return everything before the first ``@``."""
    head, sep, _ = address.partition("@")
    if not sep:
        raise ValueError(f"no '@' in address: {address!r}")
    return head


def domain_part(address: str) -> str:
    """Return everything after the last ``@``."""
    _, sep, tail = address.rpartition("@")
    if not sep:
        raise ValueError(f"no '@' in address: {address!r}")
    return tail


def check_allowed(part: str, allowed) -> bool:
    """Return whether ``part`` uses only ``allowed`` characters and has no two dots in a row."""
    if ".." in part:
        return False
    return all(char in allowed for char in part)


def _check_part(part: str, max_length: int, allowed) -> bool:
    if not 1 <= len(part) <= max_length:
        return False
    if part.startswith(".") or part.endswith("."):
        return False
    return check_allowed(part, allowed)


def check_local_part(part: str) -> bool:
    """Validate the part of an address before the ``@``."""
    return _check_part(part, _LOCAL_MAX_LENGTH, _LOCAL_CHARS)


def check_domain_part(part: str) -> bool:
    """Validate the part of an address after the ``@``."""
    return _check_part(part, _DOMAIN_MAX_LENGTH, _DOMAIN_CHARS)


def is_valid_email(address: str) -> bool:
    """Return whether ``address`` is a correct e-mail address."""
    return (
        has_single_at(address)
        and check_local_part(local_part(address))
        and check_domain_part(domain_part(address))
    )