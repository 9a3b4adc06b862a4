"""
Places proxy layer.

Responsibilities:
- Call the Google Places Text Search API with a fixed field mask.
- Normalize raw results into the canonical Place schema.
- Apply the requested price / open-now filters server-side.
- Cache filtered results in memory for a bounded time.
"""
