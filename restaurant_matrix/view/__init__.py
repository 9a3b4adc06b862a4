"""
Client-side review matrix.

Responsibilities:
- Hold the list of places returned by ``/api/places``.
- Recompute the filtered subset whenever a filter control changes.
- Derive the selectable category labels from the data.
- Turn the filtered subset into scatter points for a chart renderer.
"""
