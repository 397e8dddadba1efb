"""
Cat records: schemas, persistence, business logic and routes.
"""
