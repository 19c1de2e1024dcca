"""
Blockchain CLI - a terminal client for the blockchain.info public API.

Query addresses, blocks, transactions, exchange rates and network
statistics, and print them as readable summaries or raw JSON.
"""

__version__ = "1.0.0"
__app_name__ = "Blockchain CLI"
