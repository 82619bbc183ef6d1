"""
Agent Tool Plumbing

A tool is an id, a description for the LLM, a pydantic input model and a
handler. The input model's JSON schema is what the agent sees for
function-calling; payloads are validated against it before the handler runs.
"""

from pydantic import BaseModel, ValidationError


class ToolError(Exception):
    """Base class for tool invocation errors."""
    pass


class UnknownToolError(ToolError):
    """Raised when no tool is registered under the requested id."""

    def __init__(self, tool_id):
        self.tool_id = tool_id
        super().__init__(f"Unknown tool {tool_id!r}")


class ToolInputError(ToolError):
    """Raised when a tool payload fails validation against its input model."""

    def __init__(self, tool_id, validation_error):
        self.tool_id = tool_id
        self.errors = validation_error.errors(include_url=False, include_context=False)
        super().__init__(f"Invalid input for tool {tool_id!r}: {validation_error.error_count()} error(s)")


class ToolContext:
    """Services a tool handler may call."""

    def __init__(self, planning_service, event_service):
        self.planning_service = planning_service
        self.event_service = event_service


class EmptyInput(BaseModel):
    """Tools that take no arguments."""
    pass


class Tool:
    def __init__(self, id, description, input_model, handler):
        self.id = id
        self.description = description
        self.input_model = input_model
        self.handler = handler

    def describe(self):
        return {
            'id': self.id,
            'description': self.description,
            'input_schema': self.input_model.model_json_schema(),
        }

    def run(self, payload, context):
        try:
            params = self.input_model.model_validate(payload or {})
        except ValidationError as e:
            raise ToolInputError(self.id, e) from e
        return self.handler(params, context)


def overlap_result(error):
    """Structured overlap failure the agent can explain to the user."""
    return {
        'error': 'overlap',
        'message': str(error),
        'conflicts': [p.to_dict() for p in error.conflicting_plannings],
    }
