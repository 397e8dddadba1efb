"""
Shared, cross-cutting code for the app.

`core/` holds small building blocks that the feature packages use (DB pool,
document collections, views, error responses). Keep record-specific logic in
the corresponding feature package (e.g. `cats/`).
"""
