from setuptools import setup

setup(
    name="sine-lut",
    description="Amaranth full period sine lookup table with a registered read port",
    python_requires=">=3.9",
    setup_requires=["wheel", "setuptools"],
    install_requires=["amaranth[builtin-yosys]>=0.5,<0.6"],
    extras_require={"test": ["pytest"]},
    py_modules=["sine_table", "sync_lookup", "sine_lut"],
)
