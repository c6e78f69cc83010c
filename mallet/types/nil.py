from __future__ import annotations


class NilType:
    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


class EofType:
    """Marker read from input that holds no form; prints as nothing."""

    def __repr__(self): return "EOF"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, EofType)

    def __hash__(self):
        return hash(EofType)


Nil = NilType()
EOF = EofType()
