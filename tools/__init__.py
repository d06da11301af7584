# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool wrappers.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between the agent and core/.  Each tool:
#     1. Calls a core/ function or the session's TravelStore
#     2. Converts dataclasses to plain dicts for JSON
#     3. Turns core exceptions into {"error": ...} responses
#
# WHAT TOOLS DO NOT DO:
#   - No business logic (that's core/)
#   - No decisions about WHICH tool to call (that's the agent)
#   - No knowledge of Google ADK
#
# TOOL NAMING CONVENTIONS:
#   - get_* / list_* / resolve_*  -> read-only, safe to retry
#   - add_* / update_* / delete_* / clear_* / import_* -> change the record
#   - export_*                     -> writes a copy, record unchanged
# =============================================================================
