from __future__ import annotations

import os

import dotenv
from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = 'SALARY_TIMER_'

class TimerConfig(BaseModel):
    tick_interval: float = Field(default=1.0, gt=0)   # seconds
    currency_symbol: str = '€'
    symbol_after: bool = True
    thousands_sep: str = '.'
    decimal_sep: str = ','
    fraction_digits: int = Field(default=4, ge=0)

    # What the stand-in intake reports for every payslip.
    placeholder_gross: float = Field(default=2500.0, ge=0)
    placeholder_net: float = Field(default=1850.0, ge=0)
    placeholder_hours: float = Field(default=160.0, gt=0)

    model_config = ConfigDict(
        frozen=True,
    )

    @classmethod
    def fromEnv(cls, dotenv_path: str | None = None) -> TimerConfig:
        '''
        Reads `SALARY_TIMER_<FIELD>` variables, e.g. `SALARY_TIMER_TICK_INTERVAL`.
        A `.env` file is loaded first without overriding the real environment.
        '''
        dotenv.load_dotenv(dotenv_path)
        overrides = {}
        for name in cls.model_fields:
            value = os.getenv(ENV_PREFIX + name.upper())
            if value is not None:
                overrides[name] = value
        return cls.model_validate(overrides)
