"""
Notification Hub - live order updates over Server-Sent Events

Keeps an in-memory registry of open event streams keyed by customer email
and pushes order events to them. Delivery is best effort: nothing is
queued for subscribers that are not connected, and a restart drops every
subscription (browsers reconnect through EventSource auto-retry).
"""
import asyncio
import json
import logging
import threading
from typing import Any, Dict, Optional, Set

from app.exceptions import StreamClosedError

logger = logging.getLogger(__name__)

ORDER_CREATED = "order-created"
ORDER_UPDATED = "order-updated"


def format_event(event_name: str, payload: Any) -> str:
    """Encode one SSE frame: event name plus single-line JSON data"""
    data = json.dumps(payload, default=str)
    return f"event: {event_name}\ndata: {data}\n\n"


class SSEStream:
    """
    Stream handle for one open subscription

    Frames are handed to the event loop that owns the HTTP response, so
    `send` may be called from any thread.
    """

    def __init__(self, max_buffered: int = 0, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop or asyncio.get_running_loop()
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=max_buffered)
        self.closed = False

    def send(self, frame: str) -> None:
        """
        Queue a frame for delivery

        Raises:
            StreamClosedError: If the stream was already closed
        """
        if self.closed:
            raise StreamClosedError("Stream is closed")
        self._loop.call_soon_threadsafe(self._put, frame)

    def close(self) -> None:
        """Stop the stream once the frames already queued have been read"""
        if self.closed:
            return
        self.closed = True
        try:
            self._loop.call_soon_threadsafe(self._put_sentinel)
        except RuntimeError:
            # Event loop already shut down
            pass

    def _put(self, frame: str) -> None:
        try:
            self._queue.put_nowait(frame)
        except asyncio.QueueFull:
            logger.warning("SSE stream buffer full, dropping frame")

    def _put_sentinel(self) -> None:
        if self._queue.full():
            self._queue.get_nowait()
        self._queue.put_nowait(None)

    def __aiter__(self):
        return self

    async def __anext__(self) -> str:
        frame = await self._queue.get()
        if frame is None:
            raise StopAsyncIteration
        return frame


class NotificationHub:
    """
    Registry of open streams keyed by subscriber email

    Any object with `send(frame)` and `close()` can be registered. All
    registry access goes through one lock so that publish never writes to
    a handle that is halfway through being removed.
    """

    def __init__(self):
        self._subscribers: Dict[str, Set[Any]] = {}
        self._lock = threading.Lock()

    def subscribe(self, key: str, stream) -> None:
        """Register a stream under a key; a key may hold any number of streams"""
        with self._lock:
            self._subscribers.setdefault(key, set()).add(stream)
        logger.info(f"SSE subscriber added for {key}")

    def unsubscribe(self, key: str, stream) -> None:
        """Remove a stream; the key is dropped once it has no streams left"""
        with self._lock:
            streams = self._subscribers.get(key)
            if streams is None:
                return
            streams.discard(stream)
            if not streams:
                del self._subscribers[key]
        logger.info(f"SSE subscriber removed for {key}")

    def publish(self, key: str, event_name: str, payload: Any) -> int:
        """
        Send an event to every stream registered under a key

        Never raises: a stream that cannot be written to is logged and
        skipped, and the remaining streams still get the event.

        Returns:
            Number of streams the frame was handed to
        """
        with self._lock:
            streams = list(self._subscribers.get(key, ()))
            if not streams:
                return 0

            try:
                frame = format_event(event_name, payload)
            except (TypeError, ValueError):
                logger.exception(f"Failed to encode {event_name} event for {key}")
                return 0

            delivered = 0
            for stream in streams:
                try:
                    stream.send(frame)
                    delivered += 1
                except Exception as e:
                    logger.warning(f"Failed to write {event_name} event to subscriber of {key}: {e}")

        logger.debug(f"Event {event_name} sent to {delivered}/{len(streams)} subscribers of {key}")
        return delivered

    def subscriber_count(self, key: Optional[str] = None) -> int:
        """Number of open streams for a key, or in total"""
        with self._lock:
            if key is not None:
                return len(self._subscribers.get(key, ()))
            return sum(len(s) for s in self._subscribers.values())

    def close(self) -> None:
        """Close every stream and clear the registry (service shutdown)"""
        with self._lock:
            streams = [s for group in self._subscribers.values() for s in group]
            self._subscribers.clear()

        for stream in streams:
            try:
                stream.close()
            except Exception as e:
                logger.warning(f"Failed to close SSE stream: {e}")
        logger.info(f"Notification hub closed ({len(streams)} streams)")
