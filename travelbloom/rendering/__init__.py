"""
Result rendering.

Responsibilities:
- Turn matched places into display cards (at least two, at most six).
- Build the results header and the empty-state messages.
- Send rendering commands to whatever surface presents them.
"""
