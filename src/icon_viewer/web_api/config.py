"""
Configuration settings for the web viewer.
Environment variables override defaults.
"""
import os
from dataclasses import dataclass, field
from typing import List


@dataclass
class Settings:
    """Web viewer configuration"""

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8000
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # CORS: no cross-origin access unless origins are listed
    CORS_ORIGINS: List[str] = field(default_factory=list)

    # Viewer defaults
    DEFAULT_THEME: str = "dark"
    DEFAULT_LOCALE: str = "en"
    GRID_COLUMNS: int = 8

    def __post_init__(self):
        """Load from environment variables"""
        for key in self.__dataclass_fields__:
            env_value = os.getenv(key)
            if env_value is not None:
                field_type = self.__dataclass_fields__[key].type
                if field_type == bool:
                    setattr(self, key, env_value.lower() in ("true", "1", "yes"))
                elif field_type == int:
                    setattr(self, key, int(env_value))
                elif field_type == List[str]:
                    setattr(self, key, [v.strip() for v in env_value.split(",") if v.strip()])
                else:
                    setattr(self, key, env_value)


# Global settings instance
settings = Settings()
