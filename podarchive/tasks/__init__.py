"""Prefect tasks for the archive build."""
