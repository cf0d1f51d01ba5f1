import logging
from collections import deque
from typing import List

from textual.message import Message

from ...core.exceptions import MessagePostTargetNotSetError


class MessageEmitterMixin:
    def __init__(self):
        self._message_post_target = None

    def set_message_post_target(self, post_target):
        """Set the target (a Textual app or widget, or an EventQueue) that receives posted messages."""
        self._message_post_target = post_target
        logging.info(f"post target message set to: {self._message_post_target}")

    def post_message(self, message: Message):
        """Post a message if a target is set."""
        if self._message_post_target is None:
            raise MessagePostTargetNotSetError("Message post target is not set.")
        return self._message_post_target.post_message(message)


class EventQueue:
    """
    Unbounded, order-preserving, single-consumer event channel.

    Stands in for a Textual message pump when the save-state operations run
    without an app, e.g. in scripts and tests.
    """

    def __init__(self):
        self._queue: deque = deque()

    def post_message(self, message: Message) -> bool:
        self._queue.append(message)
        return True

    def pending(self) -> List[Message]:
        """Remove and return every queued message, oldest first."""
        messages = []
        while self._queue:
            messages.append(self._queue.popleft())
        return messages

    def drain(self, reducer, model):
        """Apply every queued message to ``model`` in posting order."""
        for message in self.pending():
            model = reducer.apply(model, message)
        return model

    def __len__(self) -> int:
        return len(self._queue)
