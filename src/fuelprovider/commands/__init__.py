"""
Command implementations for the fuelprovider CLI.

- query:     read-only lookups (version, transactions, blocks, coins)
- execution: dry-run and submission
- session:   interactive execution sessions
"""
