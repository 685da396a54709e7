"""Shared wiring for CLI commands.

Commands read settings fresh from the environment (``POS_*``), so a
``POS_DATABASE_PATH`` exported in the shell points every command at the
same store the server uses.
"""

from __future__ import annotations

from restopos.infrastructure.bootstrap import Services, build_services
from restopos.infrastructure.config import Settings


def services() -> Services:
    return build_services(Settings())
