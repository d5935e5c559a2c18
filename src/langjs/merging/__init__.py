"""Message merging: resource decoding and dotted-key flattening.

Python 3.13+.
"""

from .decoders import decode_json, decode_po, decode_resource, decode_yaml
from .merger import MessageMerger, flatten, merge_messages, normalize_group_filter

__all__ = [
    "MessageMerger",
    "decode_json",
    "decode_po",
    "decode_resource",
    "decode_yaml",
    "flatten",
    "merge_messages",
    "normalize_group_filter",
]
