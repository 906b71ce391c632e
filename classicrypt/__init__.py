"""Classical ciphers, cryptanalysis, number-theory helpers and a toy LWE scheme."""

__version__ = "0.1.0"