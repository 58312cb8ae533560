"""Current user identity resolution."""

import getpass
import os
from collections.abc import Callable

type IdentityProvider = Callable[[], str]


def get_user_name() -> str:
    """Return the login name of the current user.

    Resolution order:
    1. Environment variable PROJGEN_USER
    2. The operating system login name

    Returns:
        The user name used to name per-user settings files.
    """
    return os.environ.get("PROJGEN_USER") or getpass.getuser()
