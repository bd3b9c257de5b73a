"""SportHive application package.

Activities, registrations and the background jobs that keep them consistent.
"""
