# notifier.py

from __future__ import annotations

import asyncio
import platform
import sys
import threading
from datetime import datetime

from plyer import notification

APP_NAME = "health-reminder"

# системы, где plyer умеет показывать уведомления
PLYER_SYSTEMS = ("Linux", "FreeBSD", "Darwin", "Windows")


class NullBackend:
    """Нет системных уведомлений: только вывод в консоль."""

    name = "none"

    def show(self, title: str, body: str) -> None:
        return None


class PlyerBackend:
    """
    Системное уведомление через plyer
    (DBus на Linux/FreeBSD, Notification Center на macOS, balloon на Windows).
    """

    name = "plyer"

    def __init__(self, timeout: int = 10):
        self.timeout = timeout  # секунд

    def show(self, title: str, body: str) -> None:
        notification.notify(
            title=title,
            message=body,
            app_name=APP_NAME,
            timeout=self.timeout,
        )


def select_backend(system: str | None = None):
    """
    Выбирает реализацию уведомлений по имени ОС (platform.system()).
    """
    if system is None:
        system = platform.system()

    if system in PLYER_SYSTEMS:
        return PlyerBackend()
    return NullBackend()


_backend = None


def get_backend():
    global _backend
    if _backend is None:
        _backend = select_backend()
    return _backend


def print_reminder(title: str, body: str) -> None:
    """
    Печатает строку "[HH:MM:SS] title — body" (локальное время).
    """
    ts = datetime.now().strftime("%H:%M:%S")
    print(f"[{ts}] {title} — {body}", flush=True)


def show_desktop(title: str, body: str, backend=None) -> None:
    """
    Показывает системное уведомление. Ошибки не пробрасываются:
    пишем предупреждение в stderr и продолжаем.
    """
    if backend is None:
        backend = get_backend()

    try:
        backend.show(title, body)
    except Exception as e:
        print(f"[NOTIFIER ERROR] {type(e).__name__}: {e}", file=sys.stderr, flush=True)


async def send_notification_async(title: str, body: str, backend=None) -> None:
    """
    Печатает напоминание в консоль + отправляет системное уведомление (если возможно).

    Вызов ОС идёт в daemon-потоке: его не ждут ни asyncio.run(), ни выход
    из интерпретатора, поэтому зависший DBus не задерживает остановку.
    """
    print_reminder(title, body)

    loop = asyncio.get_running_loop()
    done = loop.create_future()

    def _resolve():
        if not done.done():
            done.set_result(None)

    def _worker():
        show_desktop(title, body, backend)
        try:
            loop.call_soon_threadsafe(_resolve)
        except RuntimeError:
            # цикл уже закрыт: программа завершается
            return

    threading.Thread(target=_worker, daemon=True, name="desktop-notify").start()
    await done
