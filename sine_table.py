import math
from fractions import Fraction


class ConfigurationError(ValueError):
    pass


def sample_range(width):
    # (min, max) of a signed width-bit sample
    half = 2**(width-1)
    return -half, half - 1


def check_config(depth, width):
    for name, value in (("depth", depth), ("width", width)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError("{} must be an integer, got {!r}".format(name, value))
        if value < 1:
            raise ConfigurationError("{} must be at least 1, got {}".format(name, value))


def check_table(table, width):
    """Validate a prebuilt table against ``width`` and return it as a tuple."""
    table = tuple(table)
    check_config(len(table), width)
    min_sample, max_sample = sample_range(width)
    for entry, sample in enumerate(table):
        if isinstance(sample, bool) or not isinstance(sample, int):
            raise ConfigurationError("entry {} = {!r} is not an integer".format(entry, sample))
        if not (min_sample <= sample <= max_sample):
            raise ConfigurationError("entry {} = {} does not fit in {} bits".format(
                entry, sample, width))
    return table


def _quantize(entry, depth, width):
    #map the entry to a phase around the full circle
    phase = 2.0*math.pi*entry/depth
    sin_phi = math.sin(phase)
    # exact, so widths past the float exponent range still scale
    scaled = Fraction(sin_phi)*(1 << (width-1))
    #truncate toward zero, then saturate the positive peak
    output = int(scaled)
    min_sample, max_sample = sample_range(width)
    if output > max_sample:
        output = max_sample
    assert output >= min_sample, "sample {} below {}".format(output, min_sample)
    return phase, sin_phi, scaled, output


def gen_lookup(entry, depth, width):
    """Quantized sine sample for table entry ``entry`` of a ``depth`` entry,
    ``width`` bit full period table."""
    return _quantize(entry, depth, width)[3]


def gen_table(depth, width, observer=None):
    """Generate the full period sine table.

    Every entry is ``trunc(sin(2*pi*i/depth) * 2**(width-1))``, clamped to
    the largest positive ``width`` bit value. Truncation is toward zero, so
    non-exact magnitudes are biased slightly low; this is intentional.
    The scaling is exact (``Fraction``), so any positive width works.

    ``observer``, if given, is called once per entry in index order as
    ``observer(index, angle, raw_sine, scaled, quantized)``, with ``scaled``
    as an exact Fraction. It only watches; the returned table is the same
    with or without it.

    Raises ConfigurationError for a depth or width below 1.
    """
    check_config(depth, width)

    table = []
    for entry in range(0, depth):
        phase, sin_phi, scaled, output = _quantize(entry, depth, width)
        if observer is not None:
            observer(entry, phase, sin_phi, scaled, output)
        table.append(output)
    return tuple(table)


def print_observer(index, angle, raw_sine, scaled, quantized):
    # past 2**53 a float has no fraction digits left to show
    if abs(scaled) < 2**53:
        scaled = round(float(scaled), 4)
    else:
        scaled = int(scaled)
    print("entry:", index, "  angle:", round(angle, 6), "  sin:", round(raw_sine, 6),
        "  scaled:", scaled, "  sample:", quantized)
