from __future__ import annotations

import logging
import typing as tp

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class StopwatchConfig(BaseSettings):
    '''
    Read from `STOPWATCH_*` variables and a `.env` file in the working 
    directory. Init kwargs win over both.  
    '''

    refresh_interval: float = Field(default=0.01, gt=0.0)  # seconds
    title: str = 'Stopwatch'
    log_level: str = 'WARNING'

    model_config = SettingsConfigDict(
        env_prefix='STOPWATCH_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
        frozen=True,
    )

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v: tp.Any) -> str:
        level = str(v).upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f'Unknown log level: {v}')
        return level

    @classmethod
    def fromEnv(cls, **overrides: tp.Any) -> StopwatchConfig:
        '''
        `None` overrides (unset CLI flags) fall through to the environment.  
        '''
        return cls(**{k: v for k, v in overrides.items() if v is not None})
