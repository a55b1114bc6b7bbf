'''
Recruitment Dashboard Backend Test Suite

Test Modules:
-------------
- test_aggregation.py: Aggregation engine
  - Day window [00:00, 23:59:59.999] in the dashboard timezone
  - Totals, selections, per-recruiter and per-client breakdowns
  - clientCalls ordering (calls descending, stable ties)
  - totalSelected <= totalCalls over generated record sets

- test_stats_query.py: Filter normalization and error conversion
  - Empty / malformed recruiterId and date values
  - STRICT_FILTERS rejection
  - StoreUnavailable -> {"error": "Server error"}

- test_candidate_store.py: PostgreSQL record store adapter
  - Read-only REPEATABLE READ snapshot per computation
  - Timeouts and connection failures -> StoreUnavailable

- test_session_registry.py: Live session bookkeeping

- test_live_channel.py: Live update channel
  - Replies go to the requesting connection only
  - Disconnect before completion discards the reply silently
  - Concurrent connections and out-of-order completion

- test_api.py: HTTP and WebSocket routes through fastapi.testclient

Running Tests:
--------------
    pip install -e ".[test]"
    pytest -v

No database is needed; asyncpg is mocked and the engine runs against an
in-memory record store (see conftest.py).
'''

__all__ = []
