"""Chess engine building blocks: bitboards and attacks, a PRNG, debug statistics and version info."""

__version__ = "0.1.0"