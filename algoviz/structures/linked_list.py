# linked_list.py
#
# Singly and doubly linked lists. `next` links own the chain; in the doubly
# linked list `prev` is a back-reference to the node that owns this one.
import logging
from collections import namedtuple

from algoviz.errors import EmptyStructureError, ValueNotFoundError
from algoviz.trace import generate_id

logger = logging.getLogger(__name__)

SearchResult = namedtuple("SearchResult", ["found", "index", "path", "message"])


class ListNode:
    def __init__(self, value):
        self.value = value
        self.id = generate_id()
        self.next = None


class DoublyListNode(ListNode):
    def __init__(self, value):
        super().__init__(value)
        self.prev = None


def search_step(event, message, delay, highlight=None, index=None, found=None):
    return {
        "event": event,
        "message": message,
        "delay": delay,
        "highlight": highlight,
        "index": index,
        "found": found,
    }


def collect_search(steps) -> SearchResult:
    """Consume search steps without delays and summarise them."""
    path = []
    last = None
    for last in steps:
        if last["event"] == "visit":
            path.append(last["highlight"])
    return SearchResult(bool(last["found"]), last["index"], path, last["message"])


class _LinkedList:
    kind = "list"

    def __init__(self, values=()):
        self.head = None
        self._size = 0
        for value in values:
            self.append(value)

    def __len__(self):
        return self._size

    def __iter__(self):
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def is_empty(self) -> bool:
        return self.head is None

    def values(self) -> list:
        return [node.value for node in self]

    def snapshot(self) -> list:
        return [{"id": node.id, "value": node.value} for node in self]

    def iter_search(self, value, delay=1.0):
        """
        Linear search from the head. Each visited node is highlighted for
        `delay` seconds; the final step reports the position or "not found".
        """
        if self.is_empty():
            raise EmptyStructureError("The list is empty; there is nothing to search")
        return self._search_steps(value, delay)

    def _search_steps(self, value, delay):
        for index, node in enumerate(self):
            yield search_step("visit", f"Checking position {index}", delay, node.id, index)
            if node.value == value:
                yield search_step("found", f"Found: value {value} is at position {index}", delay,
                                  node.id, index, found=True)
                return
        yield search_step("not_found", f"Value {value} does not exist in the list", 0, found=False)

    def search(self, value) -> SearchResult:
        return collect_search(self.iter_search(value, delay=0))


class SinglyLinkedList(_LinkedList):
    """Singly linked list; append walks to the tail (O(n))."""

    kind = "singly"

    def append(self, value) -> ListNode:
        node = ListNode(value)
        if self.head is None:
            self.head = node
        else:
            current = self.head
            while current.next is not None:
                current = current.next
            current.next = node
        self._size += 1
        logger.debug("singly list: appended %s", value)
        return node

    def remove(self, value) -> ListNode:
        """Unlink the first node holding `value`."""
        if self.head is None:
            raise EmptyStructureError("The list is empty; there is nothing to remove")

        if self.head.value == value:
            removed = self.head
            self.head = removed.next
        else:
            current = self.head
            while current.next is not None and current.next.value != value:
                current = current.next
            if current.next is None:
                raise ValueNotFoundError(f"Value {value} does not exist in the list")
            removed = current.next
            current.next = removed.next

        removed.next = None
        self._size -= 1
        logger.debug("singly list: removed %s", value)
        return removed


class DoublyLinkedList(_LinkedList):
    """Doubly linked list with a tail reference; append is O(1)."""

    kind = "doubly"

    def __init__(self, values=()):
        self.tail = None
        super().__init__(values)

    def append(self, value) -> DoublyListNode:
        node = DoublyListNode(value)
        if self.tail is None:
            self.head = node
            self.tail = node
        else:
            node.prev = self.tail
            self.tail.next = node
            self.tail = node
        self._size += 1
        logger.debug("doubly list: appended %s", value)
        return node

    def remove(self, value) -> DoublyListNode:
        if self.head is None:
            raise EmptyStructureError("The list is empty; there is nothing to remove")

        current = self.head
        while current is not None and current.value != value:
            current = current.next
        if current is None:
            raise ValueNotFoundError(f"Value {value} does not exist in the list")

        if current.prev is not None:
            current.prev.next = current.next
        else:
            self.head = current.next

        if current.next is not None:
            current.next.prev = current.prev
        else:
            self.tail = current.prev

        current.prev = None
        current.next = None
        self._size -= 1
        logger.debug("doubly list: removed %s", value)
        return current

    def iter_backward(self):
        node = self.tail
        while node is not None:
            yield node
            node = node.prev
