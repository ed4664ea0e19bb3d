# File: figurekit/core/config/settings.py

import os


class Settings:
    # --- Local File Server ---
    # Loopback only: the webview is the sole client.
    SERVER_HOST: str = "127.0.0.1"
    SERVER_DEFAULT_PORT: int = int(os.getenv("FIGUREKIT_SERVER_PORT", "8899"))
    SERVER_PORT_RANGE: int = int(os.getenv("FIGUREKIT_SERVER_PORT_RANGE", "100"))

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("FIGUREKIT_LOG_LEVEL", "INFO").upper()

    @property
    def SERVER_PORT_CANDIDATES(self) -> range:
        """Inclusive range [default, default + range - 1]."""
        return range(self.SERVER_DEFAULT_PORT, self.SERVER_DEFAULT_PORT + self.SERVER_PORT_RANGE)


settings = Settings()
