from __future__ import annotations

import logging
import typing as tp

from .shared import PayRecord, ratePerSecond

log = logging.getLogger(__name__)

class TickHandle(tp.Protocol):
    def stop(self) -> None: ...

ScheduleRepeating = tp.Callable[
    [float, tp.Callable[[], None]], TickHandle,
]

class AccrualTimer:
    def __init__(
        self,
        scheduleRepeating: ScheduleRepeating,
        tick_interval: float = 1.0,    # seconds
        onChange: tp.Callable[[AccrualTimer], None] | None = None,
    ) -> None:
        '''
        `scheduleRepeating(interval, callback)` must return a handle
        whose `stop()` cancels the repetition,
        e.g. `textual.app.App.set_interval`.
        '''
        if tick_interval <= 0:
            raise ValueError(f'{tick_interval = } must be positive')
        self.scheduleRepeating = scheduleRepeating
        self.tick_interval = tick_interval
        self.onChange = onChange

        self.pay_record: PayRecord | None = None
        self.rate_per_second = 0.0
        self.accumulated_earnings = 0.0
        self.running = False
        self.__handle: TickHandle | None = None

    @property
    def canStart(self) -> bool:
        return self.pay_record is not None and self.rate_per_second > 0.0

    @property
    def has_tick_source(self) -> bool:
        return self.__handle is not None

    def start(self) -> None:
        if self.pay_record is None:
            return
        self.__release()
        self.__handle = self.scheduleRepeating(self.tick_interval, self.tick)
        self.running = True
        log.debug('started at %.6f / sec', self.rate_per_second)
        self.__changed()

    def pause(self) -> None:
        self.__release()
        self.running = False
        log.debug('paused at %.6f', self.accumulated_earnings)
        self.__changed()

    def toggle(self) -> None:
        if self.running:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        self.__release()
        self.accumulated_earnings = 0.0
        self.running = False
        log.debug('reset')
        self.__changed()

    def tick(self) -> None:
        if not self.running:
            return
        if self.rate_per_second <= 0.0:
            return
        self.accumulated_earnings += self.rate_per_second
        self.__changed()

    def loadPayRecord(self, record: PayRecord) -> None:
        self.__release()
        self.pay_record = record
        self.rate_per_second = ratePerSecond(record)
        log.info(
            'loaded %s: %.6f / sec', record.source_name, self.rate_per_second,
        )
        self.reset()

    def unloadPayRecord(self) -> None:
        self.__release()
        self.pay_record = None
        self.rate_per_second = 0.0
        self.reset()

    def elapsedSeconds(self) -> float:
        if self.rate_per_second <= 0.0:
            return 0.0
        return self.accumulated_earnings / self.rate_per_second

    def __release(self) -> None:
        if self.__handle is not None:
            self.__handle.stop()
            self.__handle = None

    def __changed(self) -> None:
        if self.onChange is not None:
            self.onChange(self)
