"""
Shared utilities used by the data sources.

- http.py  - requests.Session factory (retry policy, default timeout)
"""
