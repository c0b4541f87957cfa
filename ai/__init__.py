"""
StockMaster AI Module
=======================
Command interpretation (text → intent) and read-only stock advisors.
AI output never touches the ledger directly; the command center
decides what to apply.
"""
