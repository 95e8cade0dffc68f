from ringqueue.interfaces import Payload

ENCODING = "utf-8"
ERRORS = "surrogateescape"


def to_text(payload: Payload) -> str:
    if isinstance(payload, str):
        # copy so the stored value never aliases a caller-owned subclass
        return str(payload)
    return bytes(payload).decode(ENCODING, ERRORS)


def to_bytes(text: str) -> bytes:
    return text.encode(ENCODING, ERRORS)


def strcmp(a: str, b: str) -> int:
    """Byte-wise comparison of the UTF-8 forms of ``a`` and ``b``."""
    ba = to_bytes(a)
    bb = to_bytes(b)
    return (ba > bb) - (ba < bb)
