"""
Test doubles and helpers shared by the test modules.
"""
import json

from app.exceptions import StreamClosedError


class RecordingStream:
    """Stream handle that keeps every frame it is sent"""

    def __init__(self):
        self.frames = []
        self.closed = False

    def send(self, frame):
        if self.closed:
            raise StreamClosedError("closed")
        self.frames.append(frame)

    def close(self):
        self.closed = True


class BrokenStream:
    """Stream handle whose client has gone away"""

    def __init__(self):
        self.closed = False

    def send(self, frame):
        raise BrokenPipeError("client disconnected")

    def close(self):
        self.closed = True


def parse_frame(frame):
    """Split an SSE frame into (event name, decoded data)"""
    event_line, data_line, *_ = frame.split("\n")
    assert event_line.startswith("event: ")
    assert data_line.startswith("data: ")
    return event_line[len("event: "):], json.loads(data_line[len("data: "):])
