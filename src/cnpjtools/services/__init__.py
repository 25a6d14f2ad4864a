"""Service layer — wraps the identifier engine in ServiceResult envelopes."""
