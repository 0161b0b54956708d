"""
HueWheel Configuration
Manages environment variables and defaults for the color services.
"""
import os
from typing import List


class Config:
    """Configuration class for HueWheel services."""

    # Logging
    LOG_LEVEL: str = os.environ.get("HUEWHEEL_LOG_LEVEL", "INFO")

    # Color name lookup
    COLOR_API_URL: str = os.environ.get("HUEWHEEL_COLOR_API_URL", "https://www.thecolorapi.com/id")
    NAME_LOOKUP_TIMEOUT: float = float(os.environ.get("HUEWHEEL_NAME_LOOKUP_TIMEOUT", "5.0"))
    FALLBACK_NAME: str = os.environ.get("HUEWHEEL_FALLBACK_NAME", "Custom Color")

    # CORS settings
    ALLOWED_ORIGINS: str = os.environ.get("HUEWHEEL_ALLOWED_ORIGINS", "http://localhost:3000")

    # Observability
    METRICS_ENABLED: bool = bool(int(os.environ.get("HUEWHEEL_METRICS_ENABLED", "1")))

    # Harmony constants
    HUE_STEPS: int = 12
    TINT_SHADE_STEP: int = 30

    @classmethod
    def allowed_origins(cls) -> List[str]:
        """Split the comma-separated CORS origins."""
        return [origin.strip() for origin in cls.ALLOWED_ORIGINS.split(",") if origin.strip()]

    @classmethod
    def validate_timeout(cls, timeout: float) -> bool:
        """Validate name lookup timeout in seconds."""
        return 0 < timeout <= 60


# Global config instance
config = Config()
