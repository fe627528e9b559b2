"""
Configuración de la aplicación
"""
from functools import lru_cache
from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Configuración de la aplicación"""

    # Información del proyecto
    PROJECT_NAME: str = Field(default="StockCare API", env="PROJECT_NAME")
    VERSION: str = "1.0.0"
    ENVIRONMENT: str = Field(default="development", env="ENVIRONMENT")
    DEBUG: bool = Field(default=False, env="DEBUG")

    # Configuración del servidor
    HOST: str = Field(default="0.0.0.0", env="HOST")
    PORT: int = Field(default=8081, env="PORT")

    # CORS
    CORS_ORIGINS: List[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:5173"
        ],
        env="CORS_ORIGINS"
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO", env="LOG_LEVEL")

    # Timezone para resolver "hoy" cuando el cliente no envía fecha de referencia
    DEFAULT_TIMEZONE: str = Field(default="America/Mexico_City", env="DEFAULT_TIMEZONE")

    # Alertas de stock
    LOW_STOCK_DAYS: int = Field(default=5, ge=0, env="LOW_STOCK_DAYS")
    REQUIREMENT_DAYS_TO_COVER: int = Field(default=30, ge=1, env="REQUIREMENT_DAYS_TO_COVER")
    MAX_BATCH_SIZE: int = Field(default=500, ge=1, env="MAX_BATCH_SIZE")

    @property
    def is_production(self) -> bool:
        """Verificar si estamos en producción"""
        return self.ENVIRONMENT.lower() == "production"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Obtener configuración con cache"""
    return Settings()
