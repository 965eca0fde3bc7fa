"""
Service layer abstraction.

Services hold the business rules (validation, error reporting,
logging) and delegate storage to ``core.store``.
"""
