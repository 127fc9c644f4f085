from algoviz.structures.bst import BinarySearchTree
from algoviz.structures.linked_list import DoublyLinkedList, SinglyLinkedList
from algoviz.structures.stack_queue import Queue, Stack
from algoviz.structures.visualizer import SearchVisualizer

__all__ = ["BinarySearchTree", "DoublyLinkedList", "SinglyLinkedList", "Queue", "Stack", "SearchVisualizer"]
