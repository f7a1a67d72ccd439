"""Label selector construction.

Exposes:
    to_label_selector -- translate an equality label map into a LabelSelector.
"""

from rcdash.labels.selector import to_label_selector

__all__ = ["to_label_selector"]
