"""Transactional job-status tracking."""
