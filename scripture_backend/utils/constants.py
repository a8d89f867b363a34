"""
Generation constants shared by prompt builders and services.

Output token budgets depend on content mode only. Academic mode always asks
for more room than casual mode because it requests longer, denser analysis.
"""

TOKEN_BUDGETS = {
    # endpoint: {content_mode: max_output_tokens}
    'context': {'casual': 2500, 'academic': 4000},
    'imagery': {'casual': 1500, 'academic': 3000},
    'interpretation': {'casual': 4000, 'academic': 5000},
    'poem': {'casual': 1000, 'academic': 1500},
    'story': {'casual': 4000, 'academic': 6000},
}

# Verse lookups return a small JSON object and have no content mode
VERSE_TOKEN_BUDGET = 500

# Shared by every system prompt; the sanitizer is only a backstop for this
PLAIN_PROSE_INSTRUCTION = (
    "CRITICAL: Write ONLY plain prose text. NO URLs, NO links, NO citations, NO references, "
    "NO bracketed text like [source], NO markdown formatting, NO asterisks, NO underscores "
    "for emphasis. Just clean, flowing prose."
)


def token_budget(endpoint: str, content_mode: str) -> int:
    """Max output tokens for an endpoint; unknown modes get the casual budget."""
    budgets = TOKEN_BUDGETS[endpoint]
    return budgets.get(content_mode, budgets['casual'])
