import math

from .config import TimerConfig

def formatCurrency(amount: float, config: TimerConfig | None = None) -> str:
    '''
    Italian euro style by default, e.g. `1.850,0000\u00a0€`.
    A trailing symbol is joined by a no-break space.
    '''
    if config is None:
        config = TimerConfig()
    digits = f'{abs(amount):,.{config.fraction_digits}f}'
    digits = digits.replace(',', '\0').replace(
        '.', config.decimal_sep,
    ).replace('\0', config.thousands_sep)
    sign = '-' if amount < 0 else ''
    if config.symbol_after:
        return f'{sign}{digits}\u00a0{config.currency_symbol}'
    return f'{sign}{config.currency_symbol} {digits}'

def formatElapsed(seconds: float) -> str:
    '''
    `HH:MM:SS`. Hours keep counting past 24.
    '''
    if not math.isfinite(seconds) or seconds < 0:
        seconds = 0.0
    hours = math.floor(seconds / 3600)
    minutes = math.floor((seconds % 3600) / 60)
    secs = math.floor(seconds % 60)
    return f'{hours:02d}:{minutes:02d}:{secs:02d}'
