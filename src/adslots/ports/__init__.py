"""Port interfaces (Protocols).

Domain and services depend only on these, never on concrete adapters.
No sqlite or requests imports allowed here.
"""

from .ad_source import AdSource
from .key_value_store import KeyValueStore

__all__ = [
    "AdSource",
    "KeyValueStore",
]
