# reminder_worker.py

from __future__ import annotations

import asyncio
import signal
import sys
from enum import Enum
from typing import Awaitable, Callable, Optional

from config import Config, Reminder, EYES_REMINDER, WATER_REMINDER
from notifier import send_notification_async

NotifyFunc = Callable[[str, str], Awaitable[None]]


class TimerState(str, Enum):
    IDLE = "idle"
    WAITING = "waiting"
    FIRING = "firing"
    CANCELLED = "cancelled"


class ReminderTimer:
    """
    Один периодический таймер ("eyes" или "water").

    Первое напоминание приходит только через полный интервал.
    Сроки считаются от момента старта: start + n * interval,
    поэтому медленное уведомление не сдвигает расписание.
    Пропущенные сроки срабатывают сразу, один за другим.
    """

    def __init__(
        self,
        reminder: Reminder,
        interval_seconds: int,
        notify: Optional[NotifyFunc] = None,
    ):
        self.reminder = reminder
        self.interval_seconds = interval_seconds
        self.notify = notify or send_notification_async

        self.state = TimerState.IDLE
        self.fired = 0

    @property
    def name(self) -> str:
        return self.reminder.name

    async def run(self, start: Optional[float] = None) -> None:
        loop = asyncio.get_running_loop()
        if start is None:
            start = loop.time()

        tick = 0
        try:
            while True:
                tick += 1
                self.state = TimerState.WAITING
                deadline = start + tick * self.interval_seconds
                # при нулевом интервале sleep(0) всё равно отдаёт управление циклу
                await asyncio.sleep(max(0.0, deadline - loop.time()))

                self.state = TimerState.FIRING
                self.fired += 1
                try:
                    await self.notify(self.reminder.title, self.reminder.body)
                except Exception as e:
                    print(
                        f"[REMINDER ERROR] {self.name}: {type(e).__name__}: {e}",
                        file=sys.stderr,
                        flush=True,
                    )
        except asyncio.CancelledError:
            self.state = TimerState.CANCELLED
            raise


class ReminderScheduler:
    """
    Запускает таймеры как независимые asyncio-задачи и останавливает их разом.
    """

    def __init__(self, timers: list[ReminderTimer]):
        self.timers = list(timers)
        self._tasks: list[asyncio.Task] = []

    @property
    def tasks(self) -> list[asyncio.Task]:
        return list(self._tasks)

    def start(self) -> list[asyncio.Task]:
        loop = asyncio.get_running_loop()
        start = loop.time()

        self._tasks = [
            asyncio.create_task(timer.run(start), name=f"reminder-{timer.name}")
            for timer in self.timers
        ]
        return self.tasks

    def cancel(self) -> None:
        """Отмена без ожидания: текущее уведомление не дожидаемся."""
        for task in self._tasks:
            task.cancel()


def shutdown_signals() -> list[signal.Signals]:
    sigs = [signal.SIGINT]
    if hasattr(signal, "SIGTERM"):
        sigs.append(signal.SIGTERM)
    return sigs


async def wait_for_shutdown() -> None:
    """
    Ждёт Ctrl+C (SIGINT) или SIGTERM один раз.
    """
    loop = asyncio.get_running_loop()
    stop = asyncio.Event()

    installed = []
    for sig in shutdown_signals():
        try:
            loop.add_signal_handler(sig, stop.set)
        except (NotImplementedError, RuntimeError):
            # Windows: Ctrl+C придёт как KeyboardInterrupt из asyncio.run()
            continue
        installed.append(sig)

    try:
        await stop.wait()
    finally:
        for sig in installed:
            loop.remove_signal_handler(sig)


def build_scheduler(config: Config, notify: Optional[NotifyFunc] = None) -> ReminderScheduler:
    return ReminderScheduler(
        [
            ReminderTimer(EYES_REMINDER, config.eyes_seconds, notify),
            ReminderTimer(WATER_REMINDER, config.water_seconds, notify),
        ]
    )


async def run_reminders(
    config: Config,
    notify: Optional[NotifyFunc] = None,
    wait: Callable[[], Awaitable[None]] = wait_for_shutdown,
) -> ReminderScheduler:
    """
    Запускает оба таймера, ждёт сигнала остановки и отменяет их.
    """
    scheduler = build_scheduler(config, notify)
    scheduler.start()
    try:
        await wait()
    finally:
        scheduler.cancel()
    return scheduler
