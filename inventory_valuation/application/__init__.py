"""Application layer - use cases, DTOs and the valuation ledger."""
