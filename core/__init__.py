"""Core domain logic for client health assessments.

This package contains the business logic and domain models,
isolated from external dependencies for easy testing and reasoning.
"""
