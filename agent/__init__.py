# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK agent configuration.
#
# ARCHITECTURAL ROLE:
#   The agent/ layer turns conversation into tool calls.  It:
#     1. Receives the user's message ("I was in Lisbon last May for work")
#     2. Works out which country and which dates are meant
#     3. Calls tools (via MCP) to read or change the travel record
#     4. Reports back what was recorded or what the record says
#
# WHAT THE AGENT IS NOT:
#   - It is NOT the record logic (that's in core/)
#   - It is NOT the tool implementations (that's in tools/)
#
# THE LLM'S ROLE:
#   The LLM (connected via LiteLlm) reads the system prompt and the tool
#   descriptions, then decides which tools to call.  Dates, counts and
#   statistics always come from the tools, never from the model.
# =============================================================================
