"""
Package root for the quote API source code.
Subpackages: `api` (HTTP boundary), `quoting` (quote calculator), `directory` (agent table), `common` (settings and logging).
"""
