"""Service layer: ServiceResult-returning facades over the routing core."""
