# csgtrace/core/uv.py
class UV:
    """
    Represents a 2D texture coordinate.
    """
    def __init__(self, u: float, v: float):
        self.u = u
        self.v = v

    def __eq__(self, other) -> bool:
        if not isinstance(other, UV):
            return NotImplemented
        return self.u == other.u and self.v == other.v

    def __hash__(self) -> int:
        return hash((self.u, self.v))

    def __repr__(self) -> str:
        return f"UV({self.u}, {self.v})"
