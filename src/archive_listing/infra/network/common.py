from __future__ import annotations

USER_AGENT = "ArchiveListing-Client/1.0.0"
DEFAULT_TIMEOUT = 30.0
