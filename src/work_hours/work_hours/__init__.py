"""Work Hours package.

Feature modules (logs, hours, holidays, users, ...) behind a thin Flask
controller layer, with plain service/repository layers underneath.
"""
