# utils/interrupt_handler.py
import asyncio
import logging
import signal

import config

logger = logging.getLogger(f"{config.SERVICE_NAME}.InterruptHandler")

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class InterruptHandler:
    """
    Turns SIGINT/SIGTERM into an awaitable shutdown request on the running event loop.
    In-flight waits are not cancelled individually; they end with the server task.
    """
    def __init__(self, loop=None):
        self._loop = loop or asyncio.get_running_loop()
        self._shutdown_event = asyncio.Event()
        self._installed = []

    def install(self):
        for sig in SHUTDOWN_SIGNALS:
            try:
                self._loop.add_signal_handler(sig, self.handle_interrupt, sig)
                self._installed.append(sig)
            except (NotImplementedError, RuntimeError):
                # Event loops without signal support (e.g. Windows) fall back to KeyboardInterrupt
                logger.debug(f"Signal handler for {sig.name} not supported on this event loop.")
        return self

    def handle_interrupt(self, signum=None):
        """Marks the shutdown as requested. Repeated signals are ignored."""
        if self._shutdown_event.is_set():
            return
        name = signal.Signals(signum).name if signum is not None else "shutdown request"
        logger.info(f"Received {name}. Shutting down...")
        self._shutdown_event.set()

    def is_interrupted(self) -> bool:
        return self._shutdown_event.is_set()

    async def wait(self):
        await self._shutdown_event.wait()

    def restore(self):
        """Removes the signal handlers installed by install()."""
        for sig in self._installed:
            self._loop.remove_signal_handler(sig)
        self._installed.clear()
