from __future__ import annotations


class KitError(Exception):
    """Base class for every failure raised by the object store."""


class FormatError(KitError):
    pass


class InvalidObjectId(FormatError):
    def __init__(self, text: object) -> None:
        self.text = text
        super().__init__(f"Not a valid object name {text}")


class MalformedHeader(FormatError):
    pass


class MalformedTreeEntry(FormatError):
    pass


class InvalidEntryName(FormatError):
    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(f"invalid path name {path!r}")


class ObjectNotFound(KitError):
    def __init__(self, oid: object) -> None:
        self.oid = oid
        super().__init__(f"object {oid} not found")


class CorruptionError(KitError):
    pass


class CorruptObject(CorruptionError):
    def __init__(self, oid: object, reason: str) -> None:
        self.oid = oid
        self.reason = reason
        super().__init__(f"object {oid} is corrupt: {reason}")


class TruncatedOrCorruptObject(CorruptionError):
    pass


class TruncatedTree(CorruptionError):
    pass


class TrailingTreeBytes(CorruptionError):
    pass


class UnexpectedObjectKind(KitError):
    def __init__(self, oid: object, expected: str, actual: str) -> None:
        self.oid = oid
        self.expected = expected
        self.actual = actual
        super().__init__(f"object {oid} is a {actual}, not a {expected}")


class SymlinkCycle(KitError):
    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(f"symbolic link cycle at {path}")


class NotARepository(KitError):
    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(
            "not a kit repository (or any of the parent directories): .git"
        )
