"""Data-structure and algorithm routines, with small interactive record tools."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "assignments",
    "bits",
    "linked_list",
    "linked_queue",
    "power",
    "recursion",
    "searching",
    "sorting",
    "stacks",
]