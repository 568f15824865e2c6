from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    app_host: str = 'localhost'
    app_port: int = 8000
    reload: bool = False
    db_url: str = 'postgresql://park_user:12345@db:5432/park_db'
    api_prefix: str = ''

    log_level: str = 'INFO'
    log_sql: bool = False

    model_config = SettingsConfigDict(env_file='.env', extra='ignore')

    @field_validator('db_url')
    @classmethod
    def normalize_postgres_scheme(cls, value: str) -> str:
        if value.startswith('postgres://'):
            return value.replace('postgres://', 'postgresql://', 1)
        return value

    @field_validator('api_prefix')
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip('/')

    @field_validator('log_level')
    @classmethod
    def upper_log_level(cls, value: str) -> str:
        return value.upper()


@lru_cache()
def get_settings():
    return Settings()
