"""Configuration, base58 keys, cloud request payloads, dashboard state and terminal colours for a local Solana simulation network."""

__version__ = "0.5.0"