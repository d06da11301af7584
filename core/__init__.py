# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic for the travel tracker: the
# record schema, migration, the visit ledger, statistics, the country
# catalogue and the geo-code resolver.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports Google ADK, FastMCP, or any orchestration
#   framework.  Every module here is plain Python and can be imported and
#   tested without the agent or the tool server.
#
# The only module that touches the filesystem is core/storage.py.
# =============================================================================
