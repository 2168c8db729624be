"""Alias registry — named paths organised into nested groups.

Layout of a registry file (see ``group.py`` for the byte format):
    ~/.aliasreg/
    └── registry.bin              # One encoded root group, nothing else

``Registry`` (store.py) owns the root ``Group`` (group.py) and writes the file
back only when an edit has happened since it was loaded.
"""

from aliasreg.registry.errors import (
    DecodeError,
    InvalidArgument,
    NotFound,
    OperationFailed,
    RegistryIOError,
)
from aliasreg.registry.group import EditAction, Group
from aliasreg.registry.store import Registry

__all__ = [
    "DecodeError",
    "EditAction",
    "Group",
    "InvalidArgument",
    "NotFound",
    "OperationFailed",
    "Registry",
    "RegistryIOError",
]
