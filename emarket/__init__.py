"""Item marketplace ledger: items, owners, genesis state, queries and a command line."""

__version__ = "0.1.0"