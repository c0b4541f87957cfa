"""
StockMaster Console Adapter
=============================
Line-oriented text front end over the command center.
"""
