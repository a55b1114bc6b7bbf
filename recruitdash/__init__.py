"""
Recruitment Dashboard Backend Package.

FastAPI service layer for the recruitment dashboard metrics pipeline.
Computes daily call/selection aggregates over candidate records and serves
them over a request/response endpoint and a live WebSocket channel.

Subpackages:
    - api: FastAPI route handlers (HTTP and WebSocket)
    - core: Configuration, database, dependencies and exceptions
    - models: Pydantic schemas and enums
    - services: Record store adapter, aggregation, stats query, live channel
    - sql: Parameterized SQL queries
"""

__version__ = "1.0.0"
