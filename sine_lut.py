import os
import sys
from amaranth import *
from amaranth.lib.memory import Memory
from amaranth.sim import *
from amaranth.back import verilog

from sine_table import gen_table, print_observer
from sync_lookup import SyncLookup

class SineLUT(Elaboratable):
    # Full period sine ROM with a registered output: sample_o carries
    # table[index_i] one clock after index_i is presented.
    # Indices >= depth (only reachable when depth is not a power of two)
    # hold sample_o and raise error_o for that cycle instead of reading.
    # sample_o and error_o reset to 0.
    def __init__(self, depth=256, width=8, use_memory=False, observer=None):
        self.table = gen_table(depth, width, observer=observer)
        self.depth = depth
        self.width = width
        # storage hint only: Memory read port vs. inferred Switch ROM
        self.use_memory = use_memory

        self.index_i = Signal(range(depth))
        self.sample_o = Signal(shape=signed(width))
        self.error_o = Signal()

    def ports(self):
        return [self.index_i, self.sample_o, self.error_o]

    def elaborate(self, platform):
        m = Module()

        in_range = Signal()
        m.d.comb += in_range.eq(self.index_i < self.depth)
        m.d.sync += self.error_o.eq(~in_range)

        if self.use_memory:
            m.submodules.rom = rom = Memory(shape=signed(self.width), depth=self.depth,
                init=self.table)
            read_port = rom.read_port(domain="sync")
            m.d.comb += [
                read_port.addr.eq(self.index_i),
                read_port.en.eq(in_range),
                self.sample_o.eq(read_port.data),
            ]
        else:
            with m.If(in_range):
                if self.depth == 1:
                    # index_i is zero bits wide, nothing to switch on
                    m.d.sync += self.sample_o.eq(self.table[0])
                else:
                    with m.Switch(self.index_i):
                        for entry, sample in enumerate(self.table):
                            with m.Case(entry):
                                m.d.sync += self.sample_o.eq(sample)

        return m

def simulate(dut, vcd_path=None):
    # sweeps every index twice and checks each registered sample against the model
    model = SyncLookup.from_table(dut.table, dut.width)
    indices = list(range(dut.depth)) + list(reversed(range(dut.depth)))
    mismatches = []

    async def sweep(ctx):
        for index in indices:
            ctx.set(dut.index_i, index)
            await ctx.tick()
            model.tick(index)
            sample = ctx.get(dut.sample_o)
            if sample != model.output():
                mismatches.append((index, sample, model.output()))

    sim = Simulator(dut)
    sim.add_clock(10e-9) #100MHz
    sim.add_testbench(sweep)

    if vcd_path:
        with sim.write_vcd(vcd_path):
            sim.run()
    else:
        sim.run()
    return mismatches

if __name__ == "__main__":

    usage = "usage: sine_lut.py table|sim|convert [depth] [width]"
    if len(sys.argv) < 2:
        print(usage)
        sys.exit(1)

    depth = int(sys.argv[2]) if len(sys.argv) > 2 else 256
    width = int(sys.argv[3]) if len(sys.argv) > 3 else 8
    path = "sine_lut_outputs"

    if sys.argv[1] == "table":
        gen_table(depth, width, observer=print_observer)

    elif sys.argv[1] == "sim":
        if not os.path.exists(path):
            os.makedirs(path)
        dut = SineLUT(depth=depth, width=width)
        mismatches = simulate(dut, vcd_path=os.path.join(path, "sine_lut.vcd"))
        for index, sample, expected in mismatches:
            print("index:", index, "  sample:", sample, "  expected:", expected)
        print("checked", 2*depth, "cycles,", len(mismatches), "mismatches")
        sys.exit(1 if mismatches else 0)

    elif sys.argv[1] == "convert":
        if not os.path.exists(path):
            os.makedirs(path)
        dut = SineLUT(depth=depth, width=width)
        with open(os.path.join(path, "sine_lut.v"), "w") as out:
            out.write(verilog.convert(dut, name="sine_lut", ports=dut.ports()))

    else:
        print(usage)
        sys.exit(1)
