from sine_table import ConfigurationError, check_table, gen_table


class IndexRangeError(IndexError):
    pass


class SampleNotReady(RuntimeError):
    pass


class SyncLookup:
    """Cycle model of the registered sine ROM.

    Each ``tick(index)`` is one rising clock edge: the entry addressed by
    ``index`` is latched into the output register, so ``output()`` always
    returns the entry for the index presented on the previous edge.

    Out of range indices are rejected with IndexRangeError and leave the
    register untouched; they are never wrapped or clamped. There is no
    reset value: reading ``output()`` before the first tick raises
    SampleNotReady.

    ``table`` adopts a prebuilt table instead of generating one; it must
    hold ``depth`` integers that fit in ``width`` bits.
    """

    def __init__(self, depth=256, width=8, observer=None, table=None):
        if table is None:
            table = gen_table(depth, width, observer=observer)
        else:
            table = check_table(table, width)
            if len(table) != depth:
                raise ConfigurationError("table has {} entries, expected {}".format(
                    len(table), depth))
        self._table = table
        self._width = width
        self._registered = None
        self._ticks = 0

    @classmethod
    def from_table(cls, table, width):
        table = check_table(table, width)
        return cls(len(table), width, table=table)

    @property
    def table(self):
        return self._table

    @property
    def depth(self):
        return len(self._table)

    @property
    def width(self):
        return self._width

    @property
    def ticks(self):
        return self._ticks

    def tick(self, index):
        if isinstance(index, bool) or not isinstance(index, int):
            raise IndexRangeError("index must be an integer, got {!r}".format(index))
        if not (0 <= index < len(self._table)):
            raise IndexRangeError("index {} outside [0, {}]".format(index, len(self._table)-1))
        self._registered = self._table[index]
        self._ticks += 1

    def output(self):
        if self._registered is None:
            raise SampleNotReady("output read before the first tick")
        return self._registered

    def run(self, indices):
        outputs = []
        for index in indices:
            self.tick(index)
            outputs.append(self._registered)
        return outputs
