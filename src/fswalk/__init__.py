"""fswalk: directory enumeration and depth-bounded walks over the OS directory API."""

__version__ = "0.1.0"


class FswalkError(Exception):
    """User-facing CLI error.

    Raised for invalid arguments, missing directories, and I/O failures
    during a walk. The message is printed to stderr and the process
    exits with code 1.
    """
