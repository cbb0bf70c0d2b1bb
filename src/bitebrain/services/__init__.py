"""
External service plumbing.

- http.py - shared ``requests`` session with retry/backoff (map tile servers)
"""
