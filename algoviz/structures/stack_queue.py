# stack_queue.py
import logging
from collections import deque

from algoviz.errors import EmptyStructureError
from algoviz.trace import generate_id

logger = logging.getLogger(__name__)


class Stack:
    """LIFO stack; the top is the last item. push/pop/peek are O(1)."""

    kind = "stack"

    def __init__(self, values=()):
        self.items = []
        self.last_operation = None
        for value in values:
            self.push(value)

    def __len__(self):
        return len(self.items)

    def is_empty(self) -> bool:
        return not self.items

    def push(self, value) -> dict:
        item = {"id": generate_id(), "value": value}
        self.items.append(item)
        self.last_operation = "push"
        logger.debug("stack: push %s", value)
        return item

    def pop(self) -> dict:
        if not self.items:
            raise EmptyStructureError("The stack is empty; there is nothing to remove")
        item = self.items.pop()
        self.last_operation = "pop"
        logger.debug("stack: pop %s", item["value"])
        return item

    def peek(self) -> dict:
        if not self.items:
            raise EmptyStructureError("The stack is empty")
        return self.items[-1]

    def values(self) -> list:
        return [item["value"] for item in self.items]


class Queue:
    """FIFO queue; enqueue at the back, dequeue from the front, both O(1)."""

    kind = "queue"

    def __init__(self, values=()):
        self.items = deque()
        self.last_operation = None
        # index of the slot touched by the last operation, for highlighting
        self.operation_index = None
        for value in values:
            self.enqueue(value)

    def __len__(self):
        return len(self.items)

    def is_empty(self) -> bool:
        return not self.items

    def enqueue(self, value) -> dict:
        item = {"id": generate_id(), "value": value}
        self.items.append(item)
        self.last_operation = "enqueue"
        self.operation_index = len(self.items) - 1
        logger.debug("queue: enqueue %s", value)
        return item

    def dequeue(self) -> dict:
        if not self.items:
            raise EmptyStructureError("The queue is empty; there is nothing to remove")
        item = self.items.popleft()
        self.last_operation = "dequeue"
        self.operation_index = 0
        logger.debug("queue: dequeue %s", item["value"])
        return item

    def front(self) -> dict:
        if not self.items:
            raise EmptyStructureError("The queue is empty")
        return self.items[0]

    def values(self) -> list:
        return [item["value"] for item in self.items]
