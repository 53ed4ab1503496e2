"""
Queue module.

Public API:
    PriorityQueue  - min-priority queue, earliest insertion wins ties
"""

from pystructures.queues.priority import PriorityQueue

__all__ = [
    "PriorityQueue",
]
