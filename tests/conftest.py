"""Test configuration and fixtures."""

import os

import logfire

# Settings are read from the environment; pin them before any container builds
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret-key-with-enough-length-for-hs256")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")  # bcrypt minimum, keeps tests fast
os.environ.setdefault("VOTING__LOCK_TIMEOUT_SECONDS", "2")

logfire.configure(send_to_logfire=False, console=False)
