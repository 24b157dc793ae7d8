"""
ledger_kernel -- Pure domain core for plain-text journal ledgers.

Amounts, commodities, accounts, entries and the ledger store, plus the typed
exception hierarchy and structured logging shared by the other packages.
Nothing in the kernel reads files or parses journal text.
"""
