# =============================================================================
# tools/__init__.py
# =============================================================================
# FastMCP wrapper around the givebutter package.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between MCP and the request-translation
#   core in givebutter/.  It:
#     1. Turns each OperationDescriptor into an MCP tool (name, description,
#        JSON input schema, annotations)
#     2. Routes every call into givebutter.dispatch.invoke()
#     3. Wraps results as one pretty-printed JSON text block
#     4. Converts GivebutterError into FastMCP ToolError
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT validate arguments or build HTTP requests (givebutter/)
#   - They do NOT hold per-operation code: all tools share one wrapper
# =============================================================================
