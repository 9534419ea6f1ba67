"""Test configuration and fixtures."""

import os

# Settings are read from the environment when containers are built
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault("AUTH__ADMIN_EMAILS", '["admin@linkup.test"]')
os.environ.setdefault("IMAGE_HOST__API_KEY", "test-key")
