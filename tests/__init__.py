"""
Test suite for the Bank Account Kata.

Architecture: Hexagonal (Ports & Adapters)
Testing Strategy:
- Unit tests: Domain entities, formatter and adapters
- Use case tests: Use cases with stubbed ports (MagicMock)
- Acceptance tests: All three use cases against the in-memory repository
"""
