"""
Application layer: services and DTOs.

Services orchestrate one repository call per operation and translate
repository failures into tagged service errors.
"""
