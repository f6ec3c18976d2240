"""
HTTP layer for the Z.com control-plane API.

Uses httpx's async client; one connection per call, no retries.
"""
