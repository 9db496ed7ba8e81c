import typing as tp

import pytest

from salary_timer.shared import PayRecord


class FakeHandle:
    def __init__(self, interval: float, callback: tp.Callable[[], None]) -> None:
        self.interval = interval
        self.callback = callback
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True


class FakeScheduler:
    """Stands in for `App.set_interval`; `elapse()` fires every live handle."""

    def __init__(self) -> None:
        self.handles: list[FakeHandle] = []

    def __call__(self, interval: float, callback: tp.Callable[[], None]) -> FakeHandle:
        handle = FakeHandle(interval, callback)
        self.handles.append(handle)
        return handle

    @property
    def active(self) -> list[FakeHandle]:
        return [h for h in self.handles if not h.stopped]

    def elapse(self, ticks: int) -> None:
        for _ in range(ticks):
            for handle in self.active:
                handle.callback()


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def record() -> PayRecord:
    return PayRecord(
        gross_monthly=2500,
        net_monthly=1850,
        working_hours=160,
        source_name="payslip.pdf",
    )
