# app/config/settings.py
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # App Info
    app_name: str = "Mizan Stock API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Database - SQLite local por defecto, PostgreSQL en producción
    database_url: str = "sqlite:///./mizan_stock.db"
    auto_create_tables: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: List[str] = ["*"]

    # Sesiones (tabla sessions compartida con el frontend)
    session_cookie_name: str = "connect.sid"
    session_ttl_days: int = 7

    # Catálogo
    default_currency: str = "TRY"
    default_min_quantity: int = 5

    # Facturación
    invoice_prefix: str = "INV-"
    invoice_number_width: int = 3

    # Paginación de transacciones
    default_page_size: int = 10
    max_page_size: int = 100

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def database_label(self) -> str:
        """Host de la base de datos sin credenciales, para logs"""
        if "@" in self.database_url:
            return self.database_url.split("@", 1)[1]
        return self.database_url

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = 'ignore'


settings = Settings()
