from .UI import UI as SalaryTimerUI
from .accrual_timer import AccrualTimer
from .config import TimerConfig
from .intake_dummy import IntakeDummy
from .shared import PayRecord, UnsupportedFileType, ratePerSecond

__all__ = [
    "SalaryTimerUI", "AccrualTimer", "TimerConfig", "IntakeDummy",
    "PayRecord", "UnsupportedFileType", "ratePerSecond",
]
