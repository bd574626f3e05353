from pathlib import Path
from typing import Annotated, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Venue Ticket Purchase'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # DEBUG-level IO logging of args / return values

    # Logging
    LOG_DIR: str = ''  # Empty disables the rotating file sink

    # Purchase rules
    MAX_TICKETS_PER_PURCHASE: int = 20

    # Mock payment gateway
    DECLINED_PAYMENT_ACCOUNTS: Annotated[List[str], NoDecode] = []

    @field_validator('MAX_TICKETS_PER_PURCHASE')
    @classmethod
    def validate_max_tickets(cls, v: int) -> int:
        if v < 1:
            raise ValueError('MAX_TICKETS_PER_PURCHASE must be at least 1')
        return v

    @field_validator('DECLINED_PAYMENT_ACCOUNTS', mode='before')
    @classmethod
    def assemble_declined_accounts(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str):
            return [i.strip(' "\'') for i in v.strip('[]').split(',') if i.strip(' "\'')]
        elif isinstance(v, list):
            return [str(i) for i in v]
        return []


settings = Settings()  # type: ignore
