"""
Tools Package

Meal planner operations exposed as agent tools.
"""

from .base import Tool, ToolContext, ToolError, ToolInputError, UnknownToolError
from .planning_tools import PLANNING_TOOLS
from .event_tools import EVENT_TOOLS
from .calendar_tools import CALENDAR_TOOLS

TOOLS = {tool.id: tool for tool in PLANNING_TOOLS + EVENT_TOOLS + CALENDAR_TOOLS}


def get_tool(tool_id):
    try:
        return TOOLS[tool_id]
    except KeyError:
        raise UnknownToolError(tool_id) from None


def list_tools():
    return [tool.describe() for tool in TOOLS.values()]


def run_tool(tool_id, payload, context):
    return get_tool(tool_id).run(payload, context)


__all__ = [
    'Tool',
    'ToolContext',
    'ToolError',
    'ToolInputError',
    'UnknownToolError',
    'TOOLS',
    'get_tool',
    'list_tools',
    'run_tool',
]
