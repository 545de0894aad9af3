"""Swap pricing GraphQL API (FastAPI + Strawberry)."""
