from typing import Union

from typing_extensions import TypeAlias

# accepted payload types, stored as str
Payload: TypeAlias = Union[str, bytes, bytearray]
