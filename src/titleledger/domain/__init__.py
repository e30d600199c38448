"""Domain core of the title ledger: records, ports and ownership reconciliation."""
