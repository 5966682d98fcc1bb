"""Read linker and brick fragment libraries and join fragments into larger molecules."""

__version__ = "0.1.0"