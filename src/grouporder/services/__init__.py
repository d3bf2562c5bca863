"""Service layer — catalog lookups and ordering operations.

Every public service method returns a ServiceResult. Domain errors are
converted to structured ServiceError payloads here, never in the CLI.
"""
