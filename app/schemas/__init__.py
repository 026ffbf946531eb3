"""Pydantic schemas package.

Folder intent:
  common.py  — CamelModel base, HealthResponse, error envelope
  job.py     — Job request DTOs, response model, seed record
"""
