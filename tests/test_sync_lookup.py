import pytest

from sine_table import ConfigurationError
from sync_lookup import IndexRangeError, SampleNotReady, SyncLookup


class TestSyncLookup:

    def test_one_cycle_latency(self, table_8x8):
        lut = SyncLookup(8, 8)
        assert lut.run([2, 5, 0]) == [table_8x8[2], table_8x8[5], table_8x8[0]]

    def test_output_before_first_tick(self):
        lut = SyncLookup(8, 8)
        with pytest.raises(SampleNotReady):
            lut.output()

    def test_registered_value_not_changed_by_later_index(self, table_8x8):
        lut = SyncLookup(8, 8)
        lut.tick(2)
        registered = lut.output()
        assert registered == table_8x8[2] == 127
        assert lut.output() == registered
        lut.tick(6)
        assert lut.output() == table_8x8[6] == -128

    def test_repeated_tick_idempotent(self):
        lut = SyncLookup(8, 8)
        assert lut.run([3, 3, 3]) == [90, 90, 90]
        assert lut.ticks == 3

    def test_owns_generated_table(self, table_8x8):
        lut = SyncLookup(8, 8)
        assert lut.table == table_8x8
        assert lut.depth == 8
        assert lut.width == 8

    @pytest.mark.parametrize("index", [-1, 8, 100, 1.0, "2", None, True])
    def test_index_out_of_range(self, index):
        lut = SyncLookup(8, 8)
        lut.tick(1)
        with pytest.raises(IndexRangeError):
            lut.tick(index)
        assert lut.output() == 90
        assert lut.ticks == 1

    def test_index_error_is_index_error(self):
        with pytest.raises(IndexError):
            SyncLookup(8, 8).tick(8)

    def test_depth_one(self):
        lut = SyncLookup(1, 8)
        assert lut.table == (0,)
        lut.tick(0)
        assert lut.output() == 0
        with pytest.raises(IndexRangeError):
            lut.tick(1)

    def test_bad_config(self):
        with pytest.raises(ConfigurationError):
            SyncLookup(0, 8)
        with pytest.raises(ConfigurationError):
            SyncLookup(8, 0)

    def test_observer_passed_through(self):
        seen = []
        SyncLookup(16, 8, observer=lambda *args: seen.append(args[0]))
        assert seen == list(range(16))


class TestFromTable:

    def test_adopts_table(self, table_8x8):
        lut = SyncLookup.from_table(list(table_8x8), 8)
        assert lut.table == table_8x8
        assert lut.run([7]) == [-90]

    def test_rejects_wide_sample(self):
        with pytest.raises(ConfigurationError):
            SyncLookup.from_table([0, 128], 8)
        with pytest.raises(ConfigurationError):
            SyncLookup.from_table([0, -129], 8)

    def test_rejects_empty_table(self):
        with pytest.raises(ConfigurationError):
            SyncLookup.from_table([], 8)

    @pytest.mark.parametrize("table", [[0, 1.5], [0, 90.0], [0, True], [0, "1"], [0, None]])
    def test_rejects_non_integer_sample(self, table):
        with pytest.raises(ConfigurationError):
            SyncLookup.from_table(table, 8)

    def test_table_keyword(self, table_8x8):
        lut = SyncLookup(8, 8, table=table_8x8)
        assert lut.table == table_8x8
        assert lut.run([2]) == [127]

    def test_table_keyword_length_mismatch(self, table_8x8):
        with pytest.raises(ConfigurationError):
            SyncLookup(16, 8, table=table_8x8)

    def test_adopted_starts_unprimed(self, table_8x8):
        lut = SyncLookup.from_table(table_8x8, 8)
        assert lut.ticks == 0
        with pytest.raises(SampleNotReady):
            lut.output()
