"""
Keyword search over the travel catalog.

Responsibilities:
- Normalize free-text queries (case, punctuation, plural keywords).
- Resolve a query through an ordered list of match tiers.
- Describe which clock the page should show for the result.
"""
