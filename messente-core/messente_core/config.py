"""
Client Configuration
====================
Environment-backed settings for the Messente API client.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from .protocol.models import Credentials

DEFAULT_HOST = "api2.messente.com"
DEFAULT_BACKUP_HOST = "api3.messente.com"


def _env(name: str, default: Optional[str] = None, show: bool = True):
    return field(default_factory=lambda: os.environ.get(name, default), repr=show)


@dataclass
class MessenteConfig:
    """Configuration for the Messente API connection."""
    username: Optional[str] = _env("MESSENTE_API_USERNAME")
    password: Optional[str] = _env("MESSENTE_API_PASSWORD", show=False)
    host: str = _env("MESSENTE_API_HOST", DEFAULT_HOST)
    # Empty value disables failover
    backup_host: Optional[str] = _env("MESSENTE_API_BACKUP_HOST", DEFAULT_BACKUP_HOST)

    def __post_init__(self):
        self.host = (self.host or "").strip() or DEFAULT_HOST
        self.backup_host = (self.backup_host or "").strip() or None

    def credentials(self) -> Credentials:
        """
        Credentials from this configuration.

        Raises:
            ValidationError: If the username or password is not configured
        """
        return Credentials(username=self.username or "", password=self.password or "")
