from kit.oid import ObjectId


class Blob:
    def __init__(self, data: bytes) -> None:
        self.data: bytes = data
        self._oid: ObjectId | None = None

    @classmethod
    def parse(cls, data: bytes) -> "Blob":
        return cls(data)

    @property
    def oid(self) -> ObjectId:
        assert self._oid is not None
        return self._oid

    @oid.setter
    def oid(self, value: ObjectId) -> None:
        self._oid = value

    def text(self) -> str:
        return self.data.decode("utf-8")

    def to_bytes(self) -> bytes:
        return self.data

    def type(self) -> str:
        return "blob"
