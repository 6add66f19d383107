"""
Exceptions raised by the subnet arithmetic.
"""


class CIDRError(ValueError):
    """Base exception for CIDR arithmetic errors."""
    pass


class InvalidFormatError(CIDRError):
    """Malformed dotted-decimal address, CIDR string or non-integer input."""
    pass


class OutOfRangeError(CIDRError):
    """Octet, prefix length, host bits or address outside its valid range."""
    pass
