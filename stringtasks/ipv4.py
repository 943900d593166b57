"""Validation of dotted-decimal IPv4 addresses."""

import string

_DIGITS = frozenset(string.digits)


def valid_octet(octet: str) -> bool:
    """Return whether ``octet`` is a number 0-255 without leading zeros."""
    if not 1 <= len(octet) <= 3:
        return False
    if octet.startswith("0"):
        return len(octet) == 1
    if not all(char in _DIGITS for char in octet):
        return False
    return int(octet) <= 255


def get_octet(ip: str, number: int) -> str:
    """Return the ``number``-th (1-based) dot-separated field of ``ip``, or ``""``."""
    fields = ip.split(".")
    if 1 <= number <= len(fields):
        return fields[number - 1]
    return ""


def is_valid_ipv4(ip: str) -> bool:
    """Return whether ``ip`` is a correct IPv4 address."""
    if ip.count(".") > 3:
        return False
    return all(valid_octet(get_octet(ip, number)) for number in range(1, 5))