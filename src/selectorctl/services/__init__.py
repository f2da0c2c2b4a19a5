"""Service layer — ServiceResult-returning facades over the domain."""
