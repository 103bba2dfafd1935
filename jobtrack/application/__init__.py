"""Application services coordinating the job store."""
