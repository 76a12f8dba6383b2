"""Process lifecycle helpers."""

import sys


def invariant(condition: object, message: str | None = None) -> None:
    """Exit the process unless condition holds.

    A falsy condition with a message prints it to stderr and exits 1.
    Without a message the process exits 0 silently (used for user-cancelled
    prompts, which are not errors).
    """
    if condition:
        return

    if message:
        print(message, file=sys.stderr)
        sys.exit(1)

    sys.exit(0)
