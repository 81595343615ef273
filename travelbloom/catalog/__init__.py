"""
Travel catalog.

Responsibilities:
- Describe the beaches, temples and country/city places shown on the page.
- Load the recommendation dataset once and keep it in memory, read-only.
"""
