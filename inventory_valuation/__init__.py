"""Inventory valuation engine: FIFO, LIFO and average costing over batch queues."""

__version__ = "1.0.0"
