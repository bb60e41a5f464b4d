"""SMS cash ledger: record and query daily cash totals over text messages."""
