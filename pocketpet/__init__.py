"""Virtual pocket pet: simulation, behaviour tree, personality, storage, sound synthesis and canvas drawing."""

__version__ = "0.1.0"