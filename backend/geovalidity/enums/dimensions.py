import enum


class Dimensions(enum.IntEnum):
    EMPTY = -1
    ZERO_DIMENSIONAL = 0
    ONE_DIMENSIONAL = 1
    TWO_DIMENSIONAL = 2

    @classmethod
    def from_de9im(cls, value: str) -> 'Dimensions':
        if value == 'F':
            return cls.EMPTY
        if value in ('0', '1', '2'):
            return cls(int(value))
        raise NotImplementedError(f'Unexpected DE-9IM entry: {value!r}')
